"""Tests for the analyze, detect, sample, schema and env CLI commands."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]

CARD_TSX = """\
import React from 'react';

interface CardProps {
  title: string;
  elevation?: number;
  onClose?: () => void;
}

export const Card = ({ title, elevation, onClose }: CardProps) => (
  <section>
    <h2>{title}</h2>
  </section>
);
"""


def run_cli(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
        timeout=60,
    )


@pytest.fixture
def card_file(tmp_path: Path) -> Path:
    path = tmp_path / "Card.tsx"
    path.write_text(CARD_TSX, encoding="utf-8")
    return path


class TestAnalyzeCommand:
    """Tests for `python . analyze`."""

    @pytest.mark.integration
    def test_prints_wire_schema(self, card_file):
        """analyze prints the camelCase wire schema of the file."""
        result = run_cli("analyze", str(card_file))
        assert result.returncode == 0, result.stderr
        wire = json.loads(result.stdout)
        assert wire["name"] == "Card"
        assert wire["platform"] == "react"
        assert [p["name"] for p in wire["props"]] == ["title", "elevation"]
        assert [e["name"] for e in wire["events"]] == ["onClose"]
        assert wire["supportsChildren"] is True

    @pytest.mark.integration
    def test_name_override(self, card_file):
        """--name replaces the file stem."""
        result = run_cli("analyze", str(card_file), "--name", "InfoCard")
        assert json.loads(result.stdout)["name"] == "InfoCard"

    @pytest.mark.integration
    def test_broken_source_prints_fallback(self, tmp_path):
        """A parse failure still prints a schema, flagged as fallback."""
        path = tmp_path / "Broken.tsx"
        path.write_text("interface Props { text: string;\n  onClick?: (", encoding="utf-8")
        result = run_cli("analyze", str(path))
        assert result.returncode == 0
        wire = json.loads(result.stdout)
        assert wire["description"] == "fallback"
        assert wire["platform"] == "universal"

    @pytest.mark.integration
    def test_strict_flag_sets_exit_status(self, tmp_path):
        """--strict exits 2 when the fallback is produced."""
        path = tmp_path / "Broken.tsx"
        path.write_text("const = ;", encoding="utf-8")
        assert run_cli("analyze", str(path), "--strict").returncode == 2

    @pytest.mark.integration
    def test_missing_file(self, tmp_path):
        """An unreadable file exits non-zero without a traceback."""
        result = run_cli("analyze", str(tmp_path / "nope.tsx"))
        assert result.returncode == 1
        assert "Traceback" not in result.stderr

    @pytest.mark.integration
    def test_runtime_descriptor(self, tmp_path):
        """JSON files are analyzed as runtime descriptors."""
        path = tmp_path / "Counter.json"
        path.write_text(
            json.dumps({"props": {"start": {"type": "Number"}}, "emits": ["change"], "setup": "fn"}),
            encoding="utf-8",
        )
        wire = json.loads(run_cli("analyze", str(path)).stdout)
        assert wire["platform"] == "vue"
        assert wire["props"][0]["type"] == "number"
        assert wire["events"][0]["name"] == "onChange"

    @pytest.mark.integration
    def test_vue_component_file(self, tmp_path):
        """A .vue file is analyzed from its script and template."""
        path = tmp_path / "Action.vue"
        path.write_text(
            '<template><button @click="go">{{ label }}</button></template>\n'
            '<script setup lang="ts">defineProps<{ label: string }>()</script>\n',
            encoding="utf-8",
        )
        result = run_cli("analyze", str(path), "--strict")
        assert result.returncode == 0
        wire = json.loads(result.stdout)
        assert wire["platform"] == "vue"
        assert [p["name"] for p in wire["props"]] == ["label"]
        assert [e["name"] for e in wire["events"]] == ["onClick"]


class TestOtherCommands:
    """Tests for detect, sample, schema and env."""

    @pytest.mark.integration
    def test_detect(self, card_file):
        """detect prints the platform value."""
        result = run_cli("detect", str(card_file))
        assert result.returncode == 0
        assert result.stdout.strip() == "react"

    @pytest.mark.integration
    def test_sample(self, card_file):
        """sample prints generated values for non-function props."""
        result = run_cli("sample", str(card_file))
        samples = json.loads(result.stdout)
        assert samples == {"title": "Title", "elevation": 42}

    @pytest.mark.integration
    def test_schema(self):
        """schema prints the JSON Schema of the wire format."""
        result = run_cli("schema")
        assert result.returncode == 0
        assert "supportsChildren" in json.loads(result.stdout)["properties"]

    @pytest.mark.integration
    def test_env_lists_variables(self):
        """env lists every configuration variable."""
        result = run_cli("env")
        assert result.returncode == 0
        assert "UISCHEMA_GRAMMAR" in result.stdout
        assert "UISCHEMA_LOG_LEVEL" in result.stdout

    @pytest.mark.integration
    def test_env_category_filter(self):
        """--category restricts the listing."""
        result = run_cli("env", "--category", "logging")
        assert "UISCHEMA_LOG_LEVEL" in result.stdout
        assert "UISCHEMA_GRAMMAR" not in result.stdout

    @pytest.mark.integration
    def test_no_arguments_shows_help(self):
        """Running without a command prints usage and exits 1."""
        result = run_cli()
        assert result.returncode == 1
