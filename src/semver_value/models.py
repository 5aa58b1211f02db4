# SPDX-License-Identifier: MIT
"""Pydantic model for the structured version record."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .semver import IDENTIFIERS_PATTERN, Version


class VersionRecord(BaseModel):
    """Structured form of a Version for JSON and other serializers.

    Decoding goes through the Version constructor, not the text parser,
    so a major version of zero is accepted. Numbers must be real integers;
    strings, floats and booleans are rejected as the constructor rejects them.
    """

    model_config = ConfigDict(frozen=True)

    major: int = Field(..., ge=0, strict=True, description="Major version number")
    minor: int = Field(..., ge=0, strict=True, description="Minor version number")
    patch: int = Field(..., ge=0, strict=True, description="Patch version number")
    prerelease: Optional[str] = Field(
        default=None,
        description="Dot-separated pre-release identifiers (e.g., alpha.1)",
    )
    metadata: Optional[str] = Field(
        default=None,
        description="Dot-separated build metadata identifiers (e.g., exp.sha.5114f85)",
    )

    @field_validator("prerelease", "metadata")
    @classmethod
    def validate_identifiers(cls, value: Optional[str]) -> Optional[str]:
        """Reject strings that are not dot-separated [0-9A-Za-z-] identifiers."""
        if value is not None and not IDENTIFIERS_PATTERN.fullmatch(value):
            raise ValueError(f"must be dot-separated [0-9A-Za-z-] identifiers, got {value!r}")
        return value

    @classmethod
    def from_version(cls, version: Version) -> "VersionRecord":
        """Encode a Version."""
        return cls(**version.to_dict())

    def to_version(self) -> Version:
        """Decode into a Version."""
        return Version.from_dict(self.model_dump())
