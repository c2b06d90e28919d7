"""Streaming destination adapters."""

from .output_params import OutputParams, build_output_params
from .platform_models import (
    FieldValue,
    FieldValues,
    NumberField,
    PlatformAdapter,
    PlatformField,
    SelectField,
    SelectOption,
    TextField,
    ValidationResult,
)
from .registry import PlatformRegistry, build_default_registry
from .validation import (
    apply_field_defaults,
    is_absolute_url,
    mask_secret,
    redact_field_values,
    validate_platform_fields,
)
from .youtube_adapter import youtube_adapter

__all__ = [
    "FieldValue",
    "FieldValues",
    "NumberField",
    "OutputParams",
    "PlatformAdapter",
    "PlatformField",
    "PlatformRegistry",
    "SelectField",
    "SelectOption",
    "TextField",
    "ValidationResult",
    "apply_field_defaults",
    "build_default_registry",
    "build_output_params",
    "is_absolute_url",
    "mask_secret",
    "redact_field_values",
    "validate_platform_fields",
    "youtube_adapter",
]
