"""
bskatar — FastAPI router.

The UI reads and edits the live configuration here; the renderer fetches
the assembled hierarchy.  All endpoints are mounted under ``/v1``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from . import taxonomy
from .atproto import NotAuthenticated, XrpcError, XrpcUnavailable
from .gateway import LoadResult, LoadStatus
from .models import AvatarConfig
from .schemas import (
    AvatarConfigPatch,
    AvatarOptions,
    LoadResponse,
    LoginRequest,
    LoginResponse,
    MeshVariant,
    SaveResponse,
    SessionInfo,
)
from .session import AvatarSession, SessionBusy

logger = logging.getLogger("bskatar.router")

router = APIRouter(prefix="/v1", tags=["avatar"])


def get_session(request: Request) -> AvatarSession:
    return request.app.state.session


def _session_info(session: AvatarSession) -> SessionInfo:
    identity = session.identity
    return SessionInfo(
        logged_in=identity is not None,
        handle=identity.handle if identity else None,
        did=identity.did if identity else None,
        busy=session.busy,
    )


def _load_response(session: AvatarSession, result: LoadResult) -> LoadResponse:
    if result.status == LoadStatus.ERROR:
        raise HTTPException(status_code=502, detail=f"Load failed: {result.error}")
    if result.status == LoadStatus.NOT_FOUND:
        message = "No avatar saved yet"
    else:
        message = "Avatar loaded"
    return LoadResponse(status=result.status, config=session.config, message=message)


# ------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------


@router.get("/avatar/options", response_model=AvatarOptions)
def get_options() -> AvatarOptions:
    """Legal styles, defaults and suggested colour swatches."""
    return AvatarOptions(**taxonomy.describe())


@router.get("/avatar/config", response_model=AvatarConfig)
async def get_config(session: AvatarSession = Depends(get_session)) -> AvatarConfig:
    return session.config


@router.patch("/avatar/config", response_model=AvatarConfig)
async def patch_config(
    patch: AvatarConfigPatch,
    session: AvatarSession = Depends(get_session),
) -> AvatarConfig:
    """Replace some fields and rebuild the avatar."""
    try:
        return session.update(patch.changes())
    except SessionBusy as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.put("/avatar/config", response_model=AvatarConfig)
async def put_config(
    body: Dict[str, Any],
    session: AvatarSession = Depends(get_session),
) -> AvatarConfig:
    """Replace the whole configuration; missing fields take their defaults."""
    try:
        return session.replace(AvatarConfig.model_validate(body))
    except SessionBusy as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.get("/avatar/mesh")
async def get_mesh(
    variant: MeshVariant = "editor",
    session: AvatarSession = Depends(get_session),
) -> Dict[str, Any]:
    """The assembled hierarchy, as handed to the renderer."""
    if variant == "player":
        return session.player_mesh()
    return session.mesh()


# ------------------------------------------------------------------
# Session
# ------------------------------------------------------------------


@router.get("/session", response_model=SessionInfo)
async def get_session_info(session: AvatarSession = Depends(get_session)) -> SessionInfo:
    return _session_info(session)


@router.post("/session/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    session: AvatarSession = Depends(get_session),
) -> LoginResponse:
    try:
        result = await session.login(req.identifier.strip(), req.password)
    except SessionBusy as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except XrpcError as exc:
        logger.warning("Login failed for %s: %s", req.identifier, exc)
        raise HTTPException(status_code=401, detail=f"Login failed: {exc.describe()}") from exc
    except XrpcUnavailable as exc:
        raise HTTPException(status_code=502, detail=f"Login failed: {exc}") from exc

    # A failed avatar load does not undo the login
    if result.status == LoadStatus.ERROR:
        load = LoadResponse(status=result.status, config=session.config, message=result.error or "Load failed")
    else:
        load = _load_response(session, result)
    return LoginResponse(session=_session_info(session), load=load)


@router.post("/session/logout", response_model=SessionInfo)
async def logout(session: AvatarSession = Depends(get_session)) -> SessionInfo:
    try:
        session.logout()
    except SessionBusy as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _session_info(session)


# ------------------------------------------------------------------
# Store
# ------------------------------------------------------------------


@router.post("/avatar/save", response_model=SaveResponse)
async def save_avatar(session: AvatarSession = Depends(get_session)) -> SaveResponse:
    try:
        result = await session.save()
    except NotAuthenticated as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except SessionBusy as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    if not result.ok:
        raise HTTPException(status_code=502, detail=f"Save failed: {result.error}")
    return SaveResponse(ok=True, created=result.created, message="Avatar saved")


@router.post("/avatar/load", response_model=LoadResponse)
async def load_avatar(session: AvatarSession = Depends(get_session)) -> LoadResponse:
    try:
        result = await session.load()
    except NotAuthenticated as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except SessionBusy as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _load_response(session, result)
