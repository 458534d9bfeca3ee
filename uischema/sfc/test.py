"""Unit tests for single-file component splitting."""

import pytest

from uischema.schema import Origin

from .lib import SingleFileComponent, is_single_file_component, split_component, template_events


class TestSplitComponent:
    """Tests for split_component and is_single_file_component."""

    @pytest.mark.unit
    def test_script_and_markup(self):
        """Script bodies are separated from the markup around them."""
        sfc = split_component(
            '<template><b>{{ x }}</b></template>\n<script setup lang="ts">const a = 1</script>'
        )
        assert sfc == SingleFileComponent(
            script="const a = 1",
            markup="<template><b>{{ x }}</b></template>",
            script_lang="ts",
        )

    @pytest.mark.unit
    def test_multiple_scripts_joined(self):
        """Module and instance scripts are both kept, in order."""
        sfc = split_component(
            '<script context="module">export const n = 1;</script>'
            "<script>export let a;</script><p>{a}</p>"
        )
        assert sfc.script == "export const n = 1;\nexport let a;"
        assert sfc.script_lang is None
        assert sfc.markup == "<p>{a}</p>"

    @pytest.mark.unit
    def test_styles_and_comments_removed(self):
        """Style blocks and comments are not markup."""
        sfc = split_component(
            "<template><!-- <slot/> --><i /></template><style>.a{}</style>"
        )
        assert sfc.markup == "<template><i /></template>"
        assert sfc.has_slot is False

    @pytest.mark.unit
    def test_slot(self):
        """A slot element is detected in the markup."""
        assert split_component("<template><div><slot name=\"x\"/></div></template>").has_slot

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("<script>let a;</script>", True),
            ("<template><i /></template>", True),
            ("export default defineComponent({})", False),
            ("const A = () => <div />;", False),
        ],
    )
    def test_is_single_file_component(self, text, expected):
        """Only texts holding script or template blocks are single-file components."""
        assert is_single_file_component(text) is expected


class TestTemplateEvents:
    """Tests for template_events."""

    @pytest.mark.unit
    def test_framework_spellings(self):
        """Vue and Svelte listener spellings are all found, as written."""
        markup = (
            '<button @click.stop="go" v-on:focus="f">'
            "<input on:change|preventDefault={save} on:blur />"
        )
        names = [event.name for event in template_events(markup)]
        assert names == ["@click.stop", "v-on:focus", "on:change|preventDefault", "on:blur"]

    @pytest.mark.unit
    def test_other_attributes_ignored(self):
        """Bound props and listener-like text inside values are not events."""
        markup = '<a :href="url" title="press @click here" class="on:x">x</a>'
        assert template_events(markup) == []

    @pytest.mark.unit
    def test_offset_and_origin(self):
        """Positions are shifted by the offset; origin is markup."""
        (event,) = template_events('<b @click="go" />', offset=100)
        assert event.origin == Origin.MARKUP_ATTRIBUTE
        assert event.position == 103
