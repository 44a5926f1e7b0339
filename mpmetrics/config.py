"""
mpmetrics Configuration

Holds the per-context settings that builders read at construction time.
The only setting today is where global tags come from.

By default every new MetadataBuilder reads the MP_METRICS_TAGS environment
variable, so operators can attach baseline tags (region, environment, ...)
without touching call sites:

    MP_METRICS_TAGS="app=shop,region=eu-west" python service.py

Tests and embedding applications can replace the source without mutating
the real process environment:

    from mpmetrics.config import configure, reset_config

    configure(global_tags="env=test")        # literal tag string
    configure(environ={"MP_METRICS_TAGS": "env=ci"})  # alternate env mapping
    reset_config()
"""

from __future__ import annotations

import contextvars
import os
from typing import Any, Mapping, Optional

GLOBAL_TAGS_VARIABLE = "MP_METRICS_TAGS"

_DEFAULTS: dict[str, Any] = {
    "global_tags": None,
    "environ": None,
}

_config: contextvars.ContextVar[dict[str, Any]] = contextvars.ContextVar(
    "mpmetrics_config",
    default=_DEFAULTS,
)


def configure(
    global_tags: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """
    Configure where builders read their global tags from.

    Options left as None keep their current value.

    Args:
        global_tags: Tag string applied to every new builder, used instead
            of the environment variable
        environ: Mapping consulted for MP_METRICS_TAGS instead of os.environ
    """
    config = _config.get().copy()

    if global_tags is not None:
        config["global_tags"] = global_tags
    if environ is not None:
        config["environ"] = dict(environ)

    _config.set(config)


def get_config() -> dict[str, Any]:
    """Get the current mpmetrics configuration."""
    return _config.get().copy()


def reset_config() -> None:
    """Restore the default configuration (read os.environ)."""
    _config.set(_DEFAULTS)


def get_global_tags() -> Optional[str]:
    """
    Return the global tag string for a new builder.

    An explicit ``global_tags`` setting wins; otherwise MP_METRICS_TAGS is
    read from the configured environment mapping, falling back to os.environ.
    Returns None when no global tags are set.
    """
    config = _config.get()

    if config["global_tags"] is not None:
        return config["global_tags"]

    environ = config["environ"] if config["environ"] is not None else os.environ
    return environ.get(GLOBAL_TAGS_VARIABLE)


__all__ = [
    "GLOBAL_TAGS_VARIABLE",
    "configure",
    "get_config",
    "reset_config",
    "get_global_tags",
]
