from pydantic import BaseModel, Field

from multistream.domain.platforms.platform_models import (
    FieldValue,
    PlatformAdapter,
    PlatformField,
)


class PlatformOut(BaseModel):
    id: str
    display_name: str
    protocol: str
    fields: list[PlatformField]
    default_categories: list[str]

    @classmethod
    def from_adapter(cls, adapter: PlatformAdapter) -> "PlatformOut":
        return cls(
            id=adapter.id,
            display_name=adapter.display_name,
            protocol=adapter.protocol,
            fields=list(adapter.fields),
            default_categories=list(adapter.default_categories),
        )


class ListPlatformsOut(BaseModel):
    platforms: list[PlatformOut]


class ValidateFieldsIn(BaseModel):
    platform_id: str = Field(description="Registered platform adapter id")
    values: dict[str, FieldValue] = Field(default_factory=dict)
    apply_defaults: bool = Field(
        default=False, description="Fill absent fields from their defaults before validating"
    )


class ValidateFieldsOut(BaseModel):
    valid: bool
    errors: dict[str, str]
