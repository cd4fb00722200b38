"""
Request/response schemas for the /frameworks endpoints.

JSON uses camelCase keys (currentVersion, primaryLanguage, officialSite);
snake_case keys are accepted on input as well. Every string is trimmed before
the field checks run.
"""

from pydantic import BaseModel, ConfigDict, HttpUrl, field_validator
from pydantic.alias_generators import to_camel

from ..models.enums import Category, Language
from ..models.framework import Framework, FrameworkInput
from ..validators.field_validators import (
    check_current_version,
    check_description,
    check_framework_name,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class FrameworkRequest(_CamelModel):
    """Body of POST /frameworks and PUT /frameworks/{id} (full replacement)."""

    name: str
    current_version: str
    category: Category | None = None
    primary_language: Language | None = None
    description: str | None = None
    official_site: HttpUrl | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "Playwright",
                    "currentVersion": "1.45.0",
                    "category": "WEB_AUTOMATION",
                    "primaryLanguage": "TYPESCRIPT",
                    "description": "Modern framework for end-to-end web automation testing.",
                    "officialSite": "https://playwright.dev/",
                }
            ]
        }
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return check_framework_name(v)

    @field_validator("current_version")
    @classmethod
    def validate_current_version(cls, v: str) -> str:
        return check_current_version(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return check_description(v)

    def to_input(self) -> FrameworkInput:
        return FrameworkInput(
            name=self.name,
            current_version=self.current_version,
            category=self.category,
            primary_language=self.primary_language,
            description=self.description,
            official_site=str(self.official_site) if self.official_site else None,
        )


class FrameworkResponse(_CamelModel):
    id: int
    name: str
    current_version: str
    category: Category | None = None
    primary_language: Language | None = None
    description: str | None = None
    official_site: str | None = None

    @classmethod
    def from_model(cls, framework: Framework) -> "FrameworkResponse":
        return cls(
            id=framework.id,
            name=framework.name,
            current_version=framework.current_version,
            category=framework.category,
            primary_language=framework.primary_language,
            description=framework.description,
            official_site=framework.official_site,
        )


__all__ = ["FrameworkRequest", "FrameworkResponse"]
