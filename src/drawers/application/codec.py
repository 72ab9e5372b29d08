"""Layout codec: the share-token format.

A token is produced in three steps:

1. the layout is serialized to compact JSON in the wire format,
2. the JSON text is percent-escaped (the ``encodeURIComponent`` safe set),
3. the escaped text is base64 encoded with the URL-safe alphabet and the
   padding stripped.

The result only contains ``[A-Za-z0-9_-]`` and can be used as a query
parameter value as-is. Decoding reverses the steps and never raises:
failures come back as a :class:`DecodeResult` with a reason, so callers
can fall back to an empty layout and still log what went wrong.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable
from urllib.parse import quote, unquote

from pydantic import ValidationError as PydanticValidationError

from drawers.application.config.adapter import config_to_layout, layout_to_dict
from drawers.application.config.loader import extract_validation_errors
from drawers.application.config.schema import LayoutConfig
from drawers.domain.value_objects import LayoutState

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched besides ASCII alphanumerics.
URI_COMPONENT_SAFE = "-_.!~*'()"


class CodecUnavailableError(RuntimeError):
    """Raised when no binary-to-text encoder is available for a scheme."""

    def __init__(self, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(f"Binary-to-text encoding '{scheme}' is not available")


class DecodeFailure(str, Enum):
    """Why a token could not be decoded."""

    EMPTY = "empty"
    BAD_ENCODING = "bad_encoding"
    BAD_STRUCTURE = "bad_structure"
    MISSING_FIELD = "missing_field"


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding a token.

    Attributes:
        layout: The decoded layout, or None on failure.
        reason: Failure category, None on success.
        detail: Human-readable diagnostic for logs.
    """

    layout: LayoutState | None = None
    reason: DecodeFailure | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.layout is not None

    @classmethod
    def failure(cls, reason: DecodeFailure, detail: str) -> DecodeResult:
        return cls(layout=None, reason=reason, detail=detail)


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _b64url_decode(text: str) -> bytes:
    # Accept tokens written with the standard alphabet and padding too.
    normalized = text.strip().replace("+", "-").replace("/", "_").rstrip("=")
    padded = normalized + "=" * (-len(normalized) % 4)
    return base64.b64decode(padded, altchars=b"-_", validate=True)


def _b32_encode(data: bytes) -> str:
    return base64.b32encode(data).decode("ascii").rstrip("=")


def _b32_decode(text: str) -> bytes:
    normalized = text.strip().upper().rstrip("=")
    padded = normalized + "=" * (-len(normalized) % 8)
    return base64.b32decode(padded)


BINARY_CODECS: dict[str, tuple[Callable[[bytes], str], Callable[[str], bytes]]] = {
    "base64url": (_b64url_encode, _b64url_decode),
    "base32": (_b32_encode, _b32_decode),
}


class LayoutCodec:
    """Encodes layouts to share tokens and back.

    Args:
        scheme: Binary-to-text scheme, one of :data:`BINARY_CODECS`.

    Example:
        codec = LayoutCodec()
        token = codec.encode(state)
        result = codec.decode(token)
        if result.ok:
            controller.replace_layout(result.layout)
    """

    def __init__(self, scheme: str = "base64url") -> None:
        self.scheme = scheme

    def encode(self, state: LayoutState) -> str:
        """Serialize ``state`` into a URL-safe token.

        The stored grid is written verbatim so the token reproduces the
        layout exactly.

        Raises:
            CodecUnavailableError: If the configured scheme is unavailable.
        """
        encoder, _ = self._codec()
        payload = json.dumps(
            layout_to_dict(state), ensure_ascii=False, separators=(",", ":")
        )
        escaped = quote(payload, safe=URI_COMPONENT_SAFE)
        return encoder(escaped.encode("ascii"))

    def decode(self, token: str | None) -> DecodeResult:
        """Restore a layout from ``token`` without raising.

        Args:
            token: The share token, possibly None or empty.

        Returns:
            A DecodeResult carrying the layout or a failure reason. No
            partial layouts are ever returned.
        """
        if not token or not token.strip():
            return DecodeResult.failure(DecodeFailure.EMPTY, "No layout token given")

        result = self._decode(token)
        if not result.ok:
            logger.warning(
                f"Could not load layout from share token ({result.reason.value}): "
                f"{result.detail}"
            )
        return result

    def _decode(self, token: str) -> DecodeResult:
        try:
            _, decoder = self._codec()
        except CodecUnavailableError as e:
            return DecodeResult.failure(DecodeFailure.BAD_ENCODING, str(e))

        try:
            escaped = decoder(token).decode("ascii")
            text = unquote(escaped, errors="strict")
        except (binascii.Error, ValueError) as e:
            # UnicodeDecodeError is a ValueError.
            return DecodeResult.failure(DecodeFailure.BAD_ENCODING, str(e))

        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as e:
            return DecodeResult.failure(
                DecodeFailure.BAD_STRUCTURE, f"Invalid JSON: {e.msg}"
            )
        except RecursionError:
            return DecodeResult.failure(
                DecodeFailure.BAD_STRUCTURE, "Invalid JSON: nested too deeply"
            )

        if not isinstance(data, dict):
            return DecodeResult.failure(
                DecodeFailure.BAD_STRUCTURE, "Layout must be a JSON object"
            )

        missing = [name for name in ("drawer", "grid") if data.get(name) is None]
        if not isinstance(data.get("panels"), list):
            missing.append("panels")
        if missing:
            return DecodeResult.failure(
                DecodeFailure.MISSING_FIELD, f"Missing fields: {', '.join(missing)}"
            )

        try:
            config = LayoutConfig.model_validate(data)
        except PydanticValidationError as e:
            paths = ", ".join(d["path"] for d in extract_validation_errors(e))
            return DecodeResult.failure(
                DecodeFailure.BAD_STRUCTURE, f"Invalid values at: {paths}"
            )
        except RecursionError:
            return DecodeResult.failure(
                DecodeFailure.BAD_STRUCTURE, "Layout values nested too deeply"
            )

        return DecodeResult(layout=config_to_layout(config))

    def _codec(self) -> tuple[Callable[[bytes], str], Callable[[str], bytes]]:
        try:
            return BINARY_CODECS[self.scheme]
        except KeyError:
            raise CodecUnavailableError(self.scheme) from None


_default_codec = LayoutCodec()


def layout_to_token(state: LayoutState) -> str:
    """Encode with the default codec."""
    return _default_codec.encode(state)


def layout_from_token(token: str | None) -> LayoutState | None:
    """Decode with the default codec; None when the token is unusable."""
    return _default_codec.decode(token).layout
