"""
XRPC client for an AT Protocol personal data server.

Only the four calls the avatar store needs are wrapped: session creation and
the get / put / create record procedures.  Uses httpx for async-friendly HTTP.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from ..config import settings
from .errors import XrpcError, XrpcUnavailable

logger = logging.getLogger("bskatar.atproto.client")


@dataclass(frozen=True)
class Identity:
    """
    A logged-in account.

    Attributes:
        did: Decentralized identifier; the repo every record lives in
        handle: Human-readable handle used to log in
        access_jwt: Bearer token for repo writes
        refresh_jwt: Token for renewing the session
    """
    did: str
    handle: str
    access_jwt: str = field(repr=False)
    refresh_jwt: str = field(default="", repr=False)


class XrpcClient:
    """
    Async client for the ``com.atproto`` XRPC endpoints.

    ``transport`` lets tests route requests to an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        service_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base = (service_url or settings.BSKATAR_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.BSKATAR_HTTP_TIMEOUT_S
        self.transport = transport

    def _headers(self, identity: Optional[Identity]) -> Dict[str, str]:
        headers: Dict[str, str] = {"Accept": "application/json"}
        if identity is not None:
            headers["Authorization"] = f"Bearer {identity.access_jwt}"
        return headers

    async def _call(
        self,
        method: str,
        nsid: str,
        identity: Optional[Identity] = None,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base}/xrpc/{nsid}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                resp = await client.request(
                    method,
                    url,
                    params=params,
                    json=body,
                    headers=self._headers(identity),
                )
            except httpx.RequestError as e:
                raise XrpcUnavailable(f"{nsid}: {e}") from e

        payload: Any = None
        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if resp.status_code >= 400:
            error = message = None
            if isinstance(payload, dict):
                error = payload.get("error")
                message = payload.get("message")
            logger.debug("%s failed: HTTP %d %s", nsid, resp.status_code, error or "")
            raise XrpcError(resp.status_code, error, message)

        if not isinstance(payload, dict):
            raise XrpcError(resp.status_code, "InvalidResponse", f"{nsid} returned non-JSON response")
        return payload

    async def create_session(self, identifier: str, password: str) -> Identity:
        """Log in with a handle (or email) and an app password."""
        data = await self._call(
            "POST",
            "com.atproto.server.createSession",
            body={"identifier": identifier, "password": password},
        )
        did = data.get("did")
        jwt = data.get("accessJwt")
        if not did or not jwt:
            raise XrpcError(200, "InvalidResponse", "createSession response missing did or accessJwt")
        return Identity(
            did=did,
            handle=data.get("handle") or identifier,
            access_jwt=jwt,
            refresh_jwt=data.get("refreshJwt") or "",
        )

    async def get_record(self, identity: Identity, collection: str, rkey: str) -> Dict[str, Any]:
        """Return the record value stored at ``collection/rkey`` in the identity's repo."""
        data = await self._call(
            "GET",
            "com.atproto.repo.getRecord",
            identity=identity,
            params={"repo": identity.did, "collection": collection, "rkey": rkey},
        )
        value = data.get("value")
        if not isinstance(value, dict):
            raise XrpcError(200, "InvalidResponse", "getRecord response has no record value")
        return value

    async def put_record(
        self, identity: Identity, collection: str, rkey: str, record: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self._call(
            "POST",
            "com.atproto.repo.putRecord",
            identity=identity,
            body={"repo": identity.did, "collection": collection, "rkey": rkey, "record": record},
        )

    async def create_record(
        self, identity: Identity, collection: str, rkey: str, record: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self._call(
            "POST",
            "com.atproto.repo.createRecord",
            identity=identity,
            body={"repo": identity.did, "collection": collection, "rkey": rkey, "record": record},
        )
