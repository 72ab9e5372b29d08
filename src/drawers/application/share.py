"""Share links: layouts carried in the ``layout`` query parameter."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from drawers.application.codec import LayoutCodec
from drawers.domain.layout import initial_layout
from drawers.domain.value_objects import LayoutState

LAYOUT_QUERY_KEY = "layout"


def share_url(base_url: str, state: LayoutState, codec: LayoutCodec) -> str:
    """Rewrite ``base_url`` so its ``layout`` parameter carries ``state``.

    Any existing ``layout`` value is replaced in place; other query
    parameters and the fragment are kept.
    """
    token = codec.encode(state)
    parts = urlsplit(base_url)

    params = parse_qsl(parts.query, keep_blank_values=True)
    replaced = False
    updated: list[tuple[str, str]] = []
    for key, value in params:
        if key == LAYOUT_QUERY_KEY:
            if replaced:
                continue
            value = token
            replaced = True
        updated.append((key, value))
    if not replaced:
        updated.append((LAYOUT_QUERY_KEY, token))

    return urlunsplit(parts._replace(query=urlencode(updated)))


def token_from_url(url: str) -> str | None:
    """The ``layout`` query value of ``url``, or None when absent."""
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        if key == LAYOUT_QUERY_KEY:
            return value
    return None


def restore_from_url(url: str, codec: LayoutCodec) -> LayoutState:
    """Layout encoded in ``url``; the empty default layout when unusable."""
    result = codec.decode(token_from_url(url))
    if result.layout is None:
        return initial_layout()
    return result.layout
