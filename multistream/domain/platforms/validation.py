"""Field validation for platform adapters."""

import math
import re
from urllib.parse import urlsplit

from .platform_models import (
    FieldValue,
    FieldValues,
    NumberField,
    PlatformAdapter,
    SelectField,
    TextField,
    ValidationResult,
)

INGEST_URL_FIELD_ID = "ingestUrl"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_WHITESPACE_RE = re.compile(r"\s")


def is_absent(value: FieldValue | None) -> bool:
    """True when a value counts as not supplied (missing, None or blank text)."""
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def is_absolute_url(value: str) -> bool:
    """Check that a string parses as an absolute URL (scheme plus a location).

    Whitespace is only rejected in the scheme and host; a path or query may
    contain spaces.
    """
    value = value.strip()
    if not value:
        return False

    try:
        parts = urlsplit(value)
    except ValueError:
        return False

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return False

    rest = value[len(parts.scheme) + 1 :]
    if rest.startswith("//"):
        return bool(parts.netloc) and not _WHITESPACE_RE.search(parts.netloc)
    return bool(rest) and not rest[0].isspace()


def coerce_number(value: FieldValue) -> int | float | None:
    """Return the numeric value of a field value, or None if it is not a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    return None


def validate_platform_fields(adapter: PlatformAdapter, values: FieldValues) -> ValidationResult:
    """Validate supplied values against the adapter's field schemas.

    Every violated field gets one human-readable message; fields that pass are
    left out, so an empty result means the whole value set is valid.
    """
    errors: ValidationResult = {}

    for field in adapter.fields:
        value = values.get(field.id)

        if field.required and is_absent(value):
            errors[field.id] = f"{field.label} is required"
            continue

        if is_absent(value) or value is False:
            continue

        if isinstance(field, TextField):
            if (
                field.id == INGEST_URL_FIELD_ID
                and isinstance(value, str)
                and not is_absolute_url(value)
            ):
                errors[field.id] = "Please enter a valid URL"

        elif isinstance(field, NumberField):
            number = coerce_number(value)  # type: ignore[arg-type]
            if number is None:
                errors[field.id] = f"{field.label} must be a number"
            elif number < 0:
                errors[field.id] = f"{field.label} must be a positive number"

        elif isinstance(field, SelectField):
            if field.options and str(value) not in field.option_values():
                errors[field.id] = f"Please select a valid {field.label}"

    return errors


def apply_field_defaults(adapter: PlatformAdapter, values: FieldValues) -> FieldValues:
    """Return a copy of values with each absent field filled from its default."""
    merged: FieldValues = dict(values)
    for field in adapter.fields:
        if field.default_value is not None and is_absent(merged.get(field.id)):
            merged[field.id] = field.default_value
    return merged


def mask_secret(value: FieldValue) -> str:
    text = str(value)
    if len(text) > 8:
        return f"****{text[-4:]}"
    return "****"


def redact_field_values(adapter: PlatformAdapter, values: FieldValues) -> dict[str, FieldValue]:
    """Copy of values safe for logging: sensitive fields are masked."""
    sensitive = adapter.sensitive_field_ids()
    return {
        key: mask_secret(value) if key in sensitive and not is_absent(value) else value
        for key, value in values.items()
    }
