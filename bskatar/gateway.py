"""
Persistence gateway — one avatar record per identity on the PDS.

Failures come back as result values rather than exceptions so callers can
never be left holding a half-applied state.  Calling either operation
without an identity is a programming error and raises ``NotAuthenticated``
before any request is made.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from .atproto import Identity, NotAuthenticated, XrpcClient, XrpcError, XrpcUnavailable
from .codec import AVATAR_COLLECTION, AVATAR_RKEY, from_record, to_record
from .models import AvatarConfig

logger = logging.getLogger("bskatar.gateway")


class LoadStatus(str, Enum):
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class SaveResult:
    ok: bool
    created: bool = False
    error: Optional[str] = None


@dataclass(frozen=True)
class LoadResult:
    status: LoadStatus
    config: Optional[AvatarConfig] = None
    error: Optional[str] = None


def _require(identity: Optional[Identity]) -> Identity:
    if identity is None or not identity.did:
        raise NotAuthenticated("Not logged in")
    return identity


def _reason(exc: Exception) -> str:
    if isinstance(exc, XrpcError) and exc.is_auth_failure:
        return f"Authentication failed: {exc.describe()}"
    if isinstance(exc, XrpcError):
        return exc.describe()
    return f"Store unreachable: {exc}"


class PersistenceGateway:
    """Reads and writes the ``xyz.bskatar.avatar/self`` record."""

    def __init__(self, client: Optional[XrpcClient] = None):
        self.client = client or XrpcClient()

    async def save(
        self,
        identity: Optional[Identity],
        config: AvatarConfig,
        now: Optional[datetime] = None,
    ) -> SaveResult:
        """
        Update the record if it exists, otherwise create it.

        Both writes carry the same fully encoded record.
        """
        identity = _require(identity)
        record = to_record(config, now)

        try:
            await self.client.put_record(identity, AVATAR_COLLECTION, AVATAR_RKEY, record)
            logger.info("Avatar record updated for %s", identity.did)
            return SaveResult(ok=True, created=False)
        except XrpcError as exc:
            if not exc.is_not_found:
                logger.warning("Avatar save failed for %s: %s", identity.did, exc)
                return SaveResult(ok=False, error=_reason(exc))
        except XrpcUnavailable as exc:
            logger.warning("Avatar save failed for %s: %s", identity.did, exc)
            return SaveResult(ok=False, error=_reason(exc))

        try:
            await self.client.create_record(identity, AVATAR_COLLECTION, AVATAR_RKEY, record)
        except (XrpcError, XrpcUnavailable) as exc:
            logger.warning("Avatar create failed for %s: %s", identity.did, exc)
            return SaveResult(ok=False, error=_reason(exc))

        logger.info("Avatar record created for %s", identity.did)
        return SaveResult(ok=True, created=True)

    async def load(self, identity: Optional[Identity]) -> LoadResult:
        """Fetch and decode the stored configuration."""
        identity = _require(identity)

        try:
            value = await self.client.get_record(identity, AVATAR_COLLECTION, AVATAR_RKEY)
        except XrpcError as exc:
            if exc.is_not_found:
                logger.info("No avatar record yet for %s", identity.did)
                return LoadResult(status=LoadStatus.NOT_FOUND)
            logger.warning("Avatar load failed for %s: %s", identity.did, exc)
            return LoadResult(status=LoadStatus.ERROR, error=_reason(exc))
        except XrpcUnavailable as exc:
            logger.warning("Avatar load failed for %s: %s", identity.did, exc)
            return LoadResult(status=LoadStatus.ERROR, error=_reason(exc))

        return LoadResult(status=LoadStatus.LOADED, config=from_record(value))
