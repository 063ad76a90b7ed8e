"""
Pydantic models for the project manifest.
Provides validation for the `vendurl` section of package.json.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_PROVIDER = "https://esm.sh/"
DEFAULT_DESTINATION = "./vendor"


class SpecifierOverride(BaseModel):
    """A per-entry specifier that overrides the global defaults for one file."""

    specifier: str
    provider: str | None = None
    bundle: bool | None = None
    destination: str | None = None

    class Config:
        """Pydantic model configuration."""

        extra = "allow"
        str_strip_whitespace = True

    @field_validator("specifier")
    @classmethod
    def validate_specifier(cls, v: str) -> str:
        if not v:
            raise ValueError("Specifier cannot be empty.")
        return v


class VendorConfig(BaseModel):
    """A validated configuration model for one vendoring run."""

    name: str | None = Field(default=None, repr=False)
    bundle: bool = True
    destination: str = DEFAULT_DESTINATION
    provider: str = DEFAULT_PROVIDER
    # Values are left untyped here; their shape is checked per entry when
    # the manifest is resolved.
    packages: dict[str, Any]

    class Config:
        """Pydantic model configuration."""

        str_strip_whitespace = True

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Ensures the destination is a usable directory path."""
        if not v:
            raise ValueError("Destination cannot be empty.")
        return v

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        if not v:
            raise ValueError("Provider cannot be empty.")
        return v
