from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ZONE_ENV = "ZONED_DATE_DEFAULT_ZONE"
TAG_ABSOLUTE_ENV = "ZONED_DATE_TAG_ABSOLUTE"


class ZoneSettings(BaseModel):
    """Process-wide configuration shared by reference with a factory."""

    default_zone: Optional[str] = Field(default=None, description="Zone for positional fields without a zone")
    tag_absolute_constructions: bool = Field(
        default=False,
        description="Tag dates built from nothing, a number or a parsed string with the default zone",
    )
    model_config = ConfigDict(validate_assignment=True)

    @field_validator("default_zone")
    @classmethod
    def _reject_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("default_zone must not be blank")
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ZoneSettings":
        environ = os.environ if environ is None else environ
        return cls(
            default_zone=environ.get(DEFAULT_ZONE_ENV) or None,
            tag_absolute_constructions=environ.get(TAG_ABSOLUTE_ENV) or False,
        )
