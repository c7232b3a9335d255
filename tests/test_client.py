"""
Tests for the XRPC client and its error classification.

All traffic goes to ``FakePDS`` through ``httpx.MockTransport``.
"""

import httpx
import pytest

from bskatar.atproto import XrpcClient, XrpcError, XrpcUnavailable


class TestXrpcError:
    """Not-found and auth detection from status and error body."""

    def test_record_not_found_name(self):
        """RecordNotFound is a not-found error."""
        assert XrpcError(400, "RecordNotFound", "whatever").is_not_found

    def test_404(self):
        """HTTP 404 is a not-found error."""
        assert XrpcError(404).is_not_found

    def test_message_text(self):
        """A message naming a missing record is a not-found error."""
        assert XrpcError(400, "InvalidRequest", "Could not locate record: at://x").is_not_found

    def test_plain_bad_request_is_not_not_found(self):
        """A bare 400 is neither not-found nor auth."""
        err = XrpcError(400, "InvalidRequest", "Input/record must be an object")
        assert not err.is_not_found
        assert not err.is_auth_failure

    def test_auth_failures(self):
        """401 and token errors are auth failures."""
        assert XrpcError(401).is_auth_failure
        assert XrpcError(400, "ExpiredToken", "Token has expired").is_auth_failure

    def test_describe(self):
        """describe() prefers the message and adds the status."""
        assert XrpcError(500, "InternalServerError", "boom").describe() == "boom (HTTP 500)"
        assert XrpcError(502).describe() == "request failed (HTTP 502)"


class TestXrpcClient:
    @pytest.mark.asyncio
    async def test_create_session(self, xrpc, credentials):
        """Login returns the account identity."""
        identity = await xrpc.create_session(*credentials)
        assert identity.did == "did:plc:testuser123"
        assert identity.handle == credentials[0]
        assert identity.access_jwt == "access-token"

    @pytest.mark.asyncio
    async def test_identity_repr_hides_tokens(self, xrpc, credentials):
        """Tokens never appear in repr."""
        identity = await xrpc.create_session(*credentials)
        assert "access-token" not in repr(identity)

    @pytest.mark.asyncio
    async def test_bad_password(self, xrpc, credentials):
        """Wrong credentials raise an auth failure."""
        with pytest.raises(XrpcError) as excinfo:
            await xrpc.create_session(credentials[0], "wrong")
        assert excinfo.value.status == 401
        assert excinfo.value.is_auth_failure

    @pytest.mark.asyncio
    async def test_put_then_get(self, pds, xrpc, identity):
        """A stored record reads back from the identity's repo."""
        pds.put_requires_existing = False
        await xrpc.put_record(identity, "xyz.bskatar.avatar", "self", {"hairStyle": "bob"})
        value = await xrpc.get_record(identity, "xyz.bskatar.avatar", "self")
        assert value == {"hairStyle": "bob"}
        assert pds.calls == ["com.atproto.repo.putRecord", "com.atproto.repo.getRecord"]
        assert pds.bodies[0]["repo"] == identity.did

    @pytest.mark.asyncio
    async def test_get_missing_record(self, xrpc, identity):
        """Reading an absent record raises not-found."""
        with pytest.raises(XrpcError) as excinfo:
            await xrpc.get_record(identity, "xyz.bskatar.avatar", "self")
        assert excinfo.value.is_not_found

    @pytest.mark.asyncio
    async def test_unreachable(self, pds, xrpc, identity):
        """Transport errors raise XrpcUnavailable."""
        pds.unreachable = True
        with pytest.raises(XrpcUnavailable):
            await xrpc.get_record(identity, "xyz.bskatar.avatar", "self")

    @pytest.mark.asyncio
    async def test_non_json_response(self, identity):
        """A non-JSON success body is an invalid response."""
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>hi</html>"))
        client = XrpcClient("https://pds.test", transport=transport)
        with pytest.raises(XrpcError) as excinfo:
            await client.get_record(identity, "xyz.bskatar.avatar", "self")
        assert excinfo.value.error == "InvalidResponse"

    @pytest.mark.asyncio
    async def test_error_without_body(self, identity):
        """An error status without a JSON body still raises."""
        transport = httpx.MockTransport(lambda request: httpx.Response(503, text="unavailable"))
        client = XrpcClient("https://pds.test/", transport=transport)
        with pytest.raises(XrpcError) as excinfo:
            await client.put_record(identity, "xyz.bskatar.avatar", "self", {})
        assert excinfo.value.status == 503
        assert excinfo.value.error == ""

    @pytest.mark.asyncio
    async def test_url_and_auth_header(self, identity):
        """Requests go to /xrpc/<nsid> with a bearer token."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"uri": "at://x", "value": {}})

        client = XrpcClient("https://pds.test/", transport=httpx.MockTransport(handler))
        await client.get_record(identity, "xyz.bskatar.avatar", "self")
        request = seen[0]
        assert str(request.url).startswith("https://pds.test/xrpc/com.atproto.repo.getRecord?")
        assert request.url.params["rkey"] == "self"
        assert request.headers["Authorization"] == "Bearer access-token"
