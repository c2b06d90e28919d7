"""Platform adapter schema models.

A platform adapter describes one kind of streaming destination: which fields
the user must fill in, which transport protocol the output uses and which
ingest categories outputs are tagged with by default.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

FieldValue = str | int | float | bool
FieldValues = dict[str, FieldValue]
ValidationResult = dict[str, str]


class _BaseField(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    required: bool = False
    sensitive: bool = Field(
        default=False,
        description="Value must be masked in forms and never logged",
    )
    placeholder: str | None = None
    help_text: str | None = None


class TextField(_BaseField):
    type: Literal["text"] = "text"
    default_value: str | None = None


class NumberField(_BaseField):
    type: Literal["number"] = "number"
    default_value: int | float | None = None


class SelectOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class SelectField(_BaseField):
    type: Literal["select"] = "select"
    options: tuple[SelectOption, ...] = ()
    default_value: str | bool | None = None

    def option_values(self) -> set[str]:
        return {option.value for option in self.options}


PlatformField = Annotated[TextField | NumberField | SelectField, Field(discriminator="type")]


class PlatformAdapter(BaseModel):
    """Schema bundle for one streaming-destination kind."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    protocol: str = Field(description="Transport identifier, e.g. 'rtmp'")
    fields: tuple[PlatformField, ...] = ()
    default_categories: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_unique_field_ids(self) -> "PlatformAdapter":
        seen: set[str] = set()
        for field in self.fields:
            if field.id in seen:
                raise ValueError(f"Duplicate field id '{field.id}' in adapter '{self.id}'")
            seen.add(field.id)
        return self

    def get_field(self, field_id: str) -> TextField | NumberField | SelectField | None:
        for field in self.fields:
            if field.id == field_id:
                return field
        return None

    def sensitive_field_ids(self) -> set[str]:
        return {field.id for field in self.fields if field.sensitive}
