"""Minimal AT Protocol XRPC access for avatar records."""

from .client import Identity, XrpcClient
from .errors import NotAuthenticated, XrpcError, XrpcUnavailable

__all__ = ["Identity", "NotAuthenticated", "XrpcClient", "XrpcError", "XrpcUnavailable"]
