"""
Pydantic request / response models for the HTTP surface.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .gateway import LoadStatus
from .models import AvatarConfig

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class AvatarConfigPatch(BaseModel):
    """Any subset of the ten fields; absent fields keep their current value."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    head_shape: Optional[str] = Field(default=None, alias="headShape")
    head_color: Optional[str] = Field(default=None, alias="headColor")
    hair_style: Optional[str] = Field(default=None, alias="hairStyle")
    hair_color: Optional[str] = Field(default=None, alias="hairColor")
    eye_style: Optional[str] = Field(default=None, alias="eyeStyle")
    eye_color: Optional[str] = Field(default=None, alias="eyeColor")
    eyebrow_style: Optional[str] = Field(default=None, alias="eyebrowStyle")
    nose_style: Optional[str] = Field(default=None, alias="noseStyle")
    mouth_style: Optional[str] = Field(default=None, alias="mouthStyle")
    has_blush: Optional[bool] = Field(default=None, alias="hasBlush")

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class AvatarOptions(BaseModel):
    styles: Dict[str, List[str]]
    colors: List[str]
    defaults: Dict[str, Any]
    swatches: Dict[str, List[str]]


MeshVariant = Literal["editor", "player"]

# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class LoginRequest(BaseModel):
    identifier: str = Field(..., min_length=1, description="Handle or email, e.g. user.bsky.social")
    password: str = Field(..., min_length=1, description="App password")


class SessionInfo(BaseModel):
    logged_in: bool
    handle: Optional[str] = None
    did: Optional[str] = None
    busy: bool = False


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class SaveResponse(BaseModel):
    ok: bool
    created: bool = False
    message: str


class LoadResponse(BaseModel):
    status: LoadStatus
    config: AvatarConfig
    message: str


class LoginResponse(BaseModel):
    session: SessionInfo
    load: LoadResponse


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service status: ok or error")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    service_url: str = Field(..., description="PDS base URL")
