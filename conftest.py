"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Sample component sources and runtime descriptors
- Analyzer and registry fixtures with fixed settings
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from dotenv import load_dotenv

from uischema.analyzer import SchemaAnalyzer
from uischema.config import AnalyzerSettings
from uischema.registry import ComponentRegistry

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Configuration Constants
# =============================================================================

PROJECT_ROOT = Path(__file__).parent


# =============================================================================
# Sample Components
# =============================================================================

BUTTON_TSX = """\
import React from 'react';

interface ButtonProps {
  /** Text shown on the button */
  label: string;
  variant?: 'primary' | 'secondary';
  disabled?: boolean;
  onClick?: (event: MouseEvent) => void;
}

export function Button({ label, variant = 'primary', disabled, onClick }: ButtonProps) {
  return (
    <button className={variant} disabled={disabled} onClick={onClick}>
      {label}
    </button>
  );
}
"""

BROKEN_TSX = """\
interface Props {
  text: string;
  onClick?: (
"""


@pytest.fixture
def button_source() -> str:
    """A React button with an interface, destructuring and an event."""
    return BUTTON_TSX


@pytest.fixture
def broken_source() -> str:
    """Source text that fails to parse."""
    return BROKEN_TSX


@pytest.fixture
def vue_runtime() -> dict[str, Any]:
    """A Vue-style runtime descriptor with typed props and emits."""
    return {
        "name": "Counter",
        "props": {
            "start": {"type": "Number", "required": True},
            "step": {"type": "Number", "default": 1},
        },
        "emits": ["change"],
        "setup": "function",
    }


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def settings() -> AnalyzerSettings:
    """Default settings, independent of the environment."""
    return AnalyzerSettings()


@pytest.fixture
def analyzer(settings: AnalyzerSettings) -> SchemaAnalyzer:
    """Analyzer using the default settings."""
    return SchemaAnalyzer(settings=settings)


@pytest.fixture
def registry(analyzer: SchemaAnalyzer) -> ComponentRegistry:
    """Empty registry backed by the default analyzer."""
    return ComponentRegistry(analyzer=analyzer)
