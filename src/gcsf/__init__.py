"""gcsf: run declarative conformance specs against Python implementations."""
from __future__ import annotations

import importlib
import logging
import os
from typing import Iterable, List, Optional

from .registry import registry
from .version import __version__

__all__ = [
    "__version__",
    "bootstrap",
    "plugin_names",
]

PLUGINS_ENV = "GCSF_PLUGINS"

logger = logging.getLogger(__name__)

_LOADED: List[str] = []


def plugin_names(value: Optional[str]) -> List[str]:
    """Split a comma separated plugin list, dropping blank entries."""

    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


def bootstrap(plugins: Optional[Iterable[str]] = None) -> List[str]:
    """Import operation plugins and let them populate the shared registry.

    ``plugins`` defaults to the modules named in ``$GCSF_PLUGINS``. A plugin is
    imported at most once per process; when it defines ``register`` the hook is
    called with the process-wide :class:`~gcsf.registry.OperationRegistry`.
    Returns every plugin loaded so far, in load order.
    """

    names = plugin_names(os.environ.get(PLUGINS_ENV)) if plugins is None else list(plugins)
    for module_name in names:
        if module_name in _LOADED:
            continue
        logger.debug("loading plugin %s", module_name)
        module = importlib.import_module(module_name)
        hook = getattr(module, "register", None)
        if callable(hook):
            hook(registry)
        _LOADED.append(module_name)
    if names:
        logger.debug("%d operation(s) registered by plugins", len(registry))
    return list(_LOADED)
