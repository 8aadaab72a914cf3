"""Runtime settings for pxb.

pxb keeps no configuration file; the few knobs it has are read from
``PXB_*`` environment variables with sensible defaults.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel

DEFAULT_HELPERS_REPO = "https://github.com/pxblue/cli-helpers"

# Environment variable -> settings field
_ENV_FIELDS: dict[str, str] = {
    "PXB_LEGACY_PEER_DEPS": "legacy_peer_deps",
    "PXB_HELPERS_REPO": "helpers_repo",
    "PXB_VERBOSE": "verbose",
}

_BOOL_FIELDS: frozenset[str] = frozenset({"legacy_peer_deps", "verbose"})


class CliSettings(BaseModel):
    """Settings shared by every command invocation."""

    model_config = {"extra": "forbid", "frozen": True}

    legacy_peer_deps: bool = True
    helpers_repo: str = DEFAULT_HELPERS_REPO
    verbose: bool = False


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def load_settings(environ: Mapping[str, str] | None = None) -> CliSettings:
    """Build CliSettings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Validated CliSettings; unset variables keep their defaults.
    """
    env = os.environ if environ is None else environ
    raw: dict[str, object] = {}
    for var, field in _ENV_FIELDS.items():
        value = env.get(var)
        if value is None or value == "":
            continue
        raw[field] = _is_truthy(value) if field in _BOOL_FIELDS else value
    return CliSettings.model_validate(raw)
