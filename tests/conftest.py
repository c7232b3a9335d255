"""
Pytest configuration and shared fixtures.

``FakePDS`` stands in for the personal data server.  It is wired into
``XrpcClient`` through ``httpx.MockTransport`` so no request leaves the
process.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from bskatar.atproto import Identity, XrpcClient
from bskatar.gateway import PersistenceGateway
from bskatar.session import AvatarSession

TEST_DID = "did:plc:testuser123"
TEST_HANDLE = "tester.bsky.social"
TEST_PASSWORD = "app-pass-1234"


class FakePDS:
    """
    In-memory XRPC server.

    ``put_requires_existing`` makes putRecord answer RecordNotFound for a
    missing record so the create fallback can be exercised.
    """

    def __init__(self, put_requires_existing: bool = True):
        self.records: Dict[Tuple[str, str, str], Dict[str, Any]] = {}
        self.calls: List[str] = []
        self.bodies: List[Dict[str, Any]] = []
        self.put_requires_existing = put_requires_existing
        self.fail_with: Optional[Tuple[int, Dict[str, Any]]] = None
        self.fail_on: Optional[str] = None
        self.unreachable = False

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def _error(self, status: int, error: str, message: str) -> httpx.Response:
        return httpx.Response(status, json={"error": error, "message": message})

    def handle(self, request: httpx.Request) -> httpx.Response:
        nsid = request.url.path.rsplit("/", 1)[-1]
        self.calls.append(nsid)

        if self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail_with is not None and (self.fail_on is None or self.fail_on == nsid):
            status, body = self.fail_with
            return httpx.Response(status, json=body)

        if nsid == "com.atproto.server.createSession":
            body = json.loads(request.content)
            if body.get("identifier") != TEST_HANDLE or body.get("password") != TEST_PASSWORD:
                return self._error(401, "AuthenticationRequired", "Invalid identifier or password")
            return httpx.Response(200, json={
                "did": TEST_DID,
                "handle": TEST_HANDLE,
                "accessJwt": "access-token",
                "refreshJwt": "refresh-token",
            })

        if request.headers.get("Authorization") != "Bearer access-token":
            return self._error(401, "AuthenticationRequired", "Authentication Required")

        if nsid == "com.atproto.repo.getRecord":
            p = request.url.params
            key = (p["repo"], p["collection"], p["rkey"])
            if key not in self.records:
                return self._error(400, "RecordNotFound", f"Could not locate record: at://{key[0]}/{key[1]}/{key[2]}")
            return httpx.Response(200, json={
                "uri": f"at://{key[0]}/{key[1]}/{key[2]}",
                "value": self.records[key],
            })

        body = json.loads(request.content)
        self.bodies.append(body)
        key = (body["repo"], body["collection"], body["rkey"])

        if nsid == "com.atproto.repo.putRecord":
            if self.put_requires_existing and key not in self.records:
                return self._error(400, "RecordNotFound", "Record not found")
            self.records[key] = body["record"]
            return httpx.Response(200, json={"uri": f"at://{key[0]}/{key[1]}/{key[2]}", "cid": "bafy-put"})

        if nsid == "com.atproto.repo.createRecord":
            if key in self.records:
                return self._error(400, "InvalidRequest", "Record already exists")
            self.records[key] = body["record"]
            return httpx.Response(200, json={"uri": f"at://{key[0]}/{key[1]}/{key[2]}", "cid": "bafy-create"})

        return self._error(501, "MethodNotImplemented", nsid)


@pytest.fixture
def pds() -> FakePDS:
    return FakePDS()


@pytest.fixture
def xrpc(pds) -> XrpcClient:
    return XrpcClient("https://pds.test", timeout=5, transport=pds.transport())


@pytest.fixture
def gateway(xrpc) -> PersistenceGateway:
    return PersistenceGateway(xrpc)


@pytest.fixture
def identity() -> Identity:
    return Identity(did=TEST_DID, handle=TEST_HANDLE, access_jwt="access-token", refresh_jwt="refresh-token")


@pytest.fixture
def session(xrpc) -> AvatarSession:
    return AvatarSession(client=xrpc)


@pytest.fixture
def credentials() -> Tuple[str, str]:
    return TEST_HANDLE, TEST_PASSWORD
