"""Operation registry exports."""
from .importing import load_implementation, load_module_from_path, module_operations
from .registry import OperationRegistry, clear_registry, register_operation, registry

__all__ = [
    "OperationRegistry",
    "clear_registry",
    "load_implementation",
    "load_module_from_path",
    "module_operations",
    "register_operation",
    "registry",
]
