"""Build operation registries from user-provided implementation modules."""
from __future__ import annotations

import importlib
import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Mapping

from .registry import OperationRegistry

logger = logging.getLogger(__name__)


def load_implementation(source: str | Path) -> OperationRegistry:
    """Return the operations exported by a Python file or importable module.

    ``source`` may be a path to a ``.py`` file, a dotted module name, or
    ``module:attr`` where ``attr`` names a mapping of operation name to
    callable.
    """

    text = str(source)
    if not text:
        raise ValueError("Empty implementation source provided")
    module_name, sep, attr = text.partition(":")
    path = Path(module_name).expanduser()
    if path.suffix == ".py" or path.is_file():
        module = load_module_from_path(path)
    else:
        module = importlib.import_module(module_name)
    if sep:
        return _registry_from_attribute(module, attr)
    operations = module_operations(module)
    logger.debug("loaded %d operation(s) from %s", len(operations), text)
    return operations


def load_module_from_path(source: Path) -> ModuleType:
    path = source.expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Implementation file not found: {path}")
    module_name = f"gcsf_impl_{path.stem}_{hash(str(path)) & 0xFFFF:x}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Unable to load module from {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


def module_operations(module: ModuleType) -> OperationRegistry:
    """Collect public functions defined in ``module`` (imports are ignored)."""

    exported = getattr(module, "__all__", None)
    operations = OperationRegistry()
    for name, value in vars(module).items():
        if exported is not None:
            if name not in exported or not callable(value):
                continue
        elif name.startswith("_") or not inspect.isfunction(value) or value.__module__ != module.__name__:
            continue
        operations.register(name, value)
    return operations


def _registry_from_attribute(module: ModuleType, attr: str) -> OperationRegistry:
    try:
        value: Any = getattr(module, attr)
    except AttributeError as exc:
        raise AttributeError(f"Module '{module.__name__}' has no attribute '{attr}'") from exc
    if not isinstance(value, Mapping):
        raise TypeError(f"Attribute '{attr}' in {module.__name__} is not a mapping of operations")
    return OperationRegistry(value)
