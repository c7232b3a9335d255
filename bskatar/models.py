"""
AvatarConfig — the ten-field record that fully describes one avatar.

Attribute names are snake_case; the aliases are the camelCase names used in
stored records and in the HTTP API.  Instances are frozen: every edit yields
a new, complete configuration.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .taxonomy import (
    DEFAULTS,
    EyeStyle,
    EyebrowStyle,
    HairStyle,
    HeadShape,
    MouthStyle,
    NoseStyle,
    resolve,
)


class AvatarConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    head_shape: HeadShape = Field(default=DEFAULTS["headShape"], alias="headShape")
    head_color: str = Field(default=DEFAULTS["headColor"], alias="headColor")
    hair_style: HairStyle = Field(default=DEFAULTS["hairStyle"], alias="hairStyle")
    hair_color: str = Field(default=DEFAULTS["hairColor"], alias="hairColor")
    eye_style: EyeStyle = Field(default=DEFAULTS["eyeStyle"], alias="eyeStyle")
    eye_color: str = Field(default=DEFAULTS["eyeColor"], alias="eyeColor")
    eyebrow_style: EyebrowStyle = Field(default=DEFAULTS["eyebrowStyle"], alias="eyebrowStyle")
    nose_style: NoseStyle = Field(default=DEFAULTS["noseStyle"], alias="noseStyle")
    mouth_style: MouthStyle = Field(default=DEFAULTS["mouthStyle"], alias="mouthStyle")
    has_blush: bool = Field(default=DEFAULTS["hasBlush"], alias="hasBlush")

    # Unknown styles become the default instead of failing validation
    @field_validator(
        "head_shape", "hair_style", "eye_style", "eyebrow_style", "nose_style", "mouth_style",
        mode="before",
    )
    @classmethod
    def _known_style(cls, value: Any, info: ValidationInfo) -> str:
        return resolve(cls.model_fields[info.field_name].alias, value)

    @field_validator("head_color", "hair_color", "eye_color", mode="before")
    @classmethod
    def _color_string(cls, value: Any, info: ValidationInfo) -> str:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return DEFAULTS[cls.model_fields[info.field_name].alias]

    @field_validator("has_blush", mode="before")
    @classmethod
    def _strict_bool(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        return DEFAULTS["hasBlush"]

    @classmethod
    def defaults(cls) -> "AvatarConfig":
        return cls()

    def to_fields(self) -> Dict[str, Any]:
        """The ten fields keyed by their record (camelCase) names."""
        return self.model_dump(by_alias=True)

    def with_updates(self, changes: Mapping[str, Any] | None = None, **kwargs: Any) -> "AvatarConfig":
        """
        Return a new configuration with some fields replaced.

        Keys may be record names (``hairStyle``) or attribute names
        (``hair_style``).  Keys that are not configuration fields are ignored.
        """
        merged = self.to_fields()
        by_attr = {name: f.alias for name, f in type(self).model_fields.items()}
        for key, value in {**(changes or {}), **kwargs}.items():
            alias = by_attr.get(key, key)
            if alias in merged:
                merged[alias] = value
        return type(self).model_validate(merged)
