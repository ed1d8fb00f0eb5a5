"""Theme framework constants."""

from __future__ import annotations

DEFAULT_REGIONS: tuple[str, ...] = (
    "top",
    "header",
    "container_header",
    "container_headline",
    "content_top",
    "content_left",
    "content_right",
    "content_bottom",
    "container_bottom",
    "bottom",
)

STATIC = "static"
TEMPLATE = "template"
RESOURCE_KINDS: frozenset[str] = frozenset({STATIC, TEMPLATE})

EXTENSIONS_DIR = "extensions"
DEFINITION_SUFFIX = ".yaml"
HIDDEN_PREFIX = "."
