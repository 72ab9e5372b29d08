"""Application layer - workflows, configuration, presets and share tokens."""

from .codec import (
    CodecUnavailableError,
    DecodeFailure,
    DecodeResult,
    LayoutCodec,
    layout_from_token,
    layout_to_token,
)
from .controller import LayoutController, PlacementResult
from .factory import ServiceFactory, get_factory, reset_factory, set_factory
from .share import LAYOUT_QUERY_KEY, restore_from_url, share_url, token_from_url

__all__ = [
    "CodecUnavailableError",
    "DecodeFailure",
    "DecodeResult",
    "LAYOUT_QUERY_KEY",
    "LayoutCodec",
    "LayoutController",
    "PlacementResult",
    "ServiceFactory",
    "get_factory",
    "layout_from_token",
    "layout_to_token",
    "reset_factory",
    "restore_from_url",
    "set_factory",
    "share_url",
    "token_from_url",
]
