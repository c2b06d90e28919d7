"""Preset text import."""

from .preset_import import (
    format_preset_block,
    get_preset_format_instructions,
    parse_presets_from_text,
    preset_to_field_values,
)
from .preset_models import PresetParseResult, StreamPreset

__all__ = [
    "PresetParseResult",
    "StreamPreset",
    "format_preset_block",
    "get_preset_format_instructions",
    "parse_presets_from_text",
    "preset_to_field_values",
]
