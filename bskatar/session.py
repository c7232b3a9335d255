"""
Avatar session — the single owner of the live configuration.

There is exactly one live configuration and one ``avatar`` hierarchy per
session.  Every change replaces the configuration wholesale and rebuilds the
hierarchy.  While a save or load is in flight the session is busy and
rejects edits, so a load's decode, assign and rebuild can never interleave
with a UI change.  Every rebuild runs under one lock, so ``clear`` and
``add`` on the root never interleave across threads.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional

from .assembler import ROOT_NAME, assemble, build_player
from .atproto import Identity, NotAuthenticated, XrpcClient
from .gateway import LoadResult, LoadStatus, PersistenceGateway, SaveResult
from .geometry import Node, group
from .models import AvatarConfig

logger = logging.getLogger("bskatar.session")


class SessionBusy(Exception):
    """An edit or store operation was attempted while another is in flight."""


class AvatarSession:
    """
    Live avatar state for one user session.

    Attributes:
        root: The ``avatar`` node; its children are replaced on every change
        identity: Logged-in account, or None
    """

    def __init__(
        self,
        client: Optional[XrpcClient] = None,
        gateway: Optional[PersistenceGateway] = None,
        config: Optional[AvatarConfig] = None,
    ):
        self.client = client or XrpcClient()
        self.gateway = gateway or PersistenceGateway(self.client)
        self.identity: Optional[Identity] = None
        self.root: Node = group(ROOT_NAME)
        self._config = config or AvatarConfig.defaults()
        self._busy = False
        self._lock = threading.Lock()
        assemble(self.root, self._config)

    @property
    def config(self) -> AvatarConfig:
        return self._config

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def logged_in(self) -> bool:
        return self.identity is not None

    @contextmanager
    def _operation(self, name: str) -> Iterator[None]:
        with self._lock:
            self._ensure_idle(name)
            self._busy = True
        try:
            yield
        finally:
            with self._lock:
                self._busy = False

    # Callers of _ensure_idle and _apply hold self._lock
    def _ensure_idle(self, name: str) -> None:
        if self._busy:
            raise SessionBusy(f"Cannot {name} while a save or load is in progress")

    def _apply(self, config: AvatarConfig) -> AvatarConfig:
        self._config = config
        assemble(self.root, config)
        return config

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def update(self, changes: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> AvatarConfig:
        """Replace one or more fields and rebuild the avatar."""
        with self._lock:
            self._ensure_idle("edit")
            return self._apply(self._config.with_updates(changes, **kwargs))

    def replace(self, config: AvatarConfig) -> AvatarConfig:
        with self._lock:
            self._ensure_idle("edit")
            return self._apply(config)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    async def login(self, identifier: str, password: str) -> LoadResult:
        """Log in, then try to load the stored avatar."""
        with self._operation("log in"):
            self.identity = await self.client.create_session(identifier, password)
            logger.info("Logged in as %s (%s)", self.identity.handle, self.identity.did)
            return await self._load()

    def logout(self) -> None:
        with self._lock:
            self._ensure_idle("log out")
            if self.identity is not None:
                logger.info("Logged out %s", self.identity.handle)
            self.identity = None

    # ------------------------------------------------------------------
    # Store
    # ------------------------------------------------------------------

    async def save(self) -> SaveResult:
        if self.identity is None:
            raise NotAuthenticated("Not logged in")
        with self._operation("save"):
            return await self.gateway.save(self.identity, self._config)

    async def load(self) -> LoadResult:
        if self.identity is None:
            raise NotAuthenticated("Not logged in")
        with self._operation("load"):
            return await self._load()

    async def _load(self) -> LoadResult:
        result = await self.gateway.load(self.identity)
        if result.status == LoadStatus.LOADED and result.config is not None:
            with self._lock:
                self._apply(result.config)
            logger.info("Applied stored avatar for %s", self.identity.did)
        return result

    # ------------------------------------------------------------------
    # Rendering boundary
    # ------------------------------------------------------------------

    def mesh(self) -> Dict[str, Any]:
        with self._lock:
            return self.root.to_dict()

    def player_mesh(self) -> Dict[str, Any]:
        return build_player(self._config).to_dict()
