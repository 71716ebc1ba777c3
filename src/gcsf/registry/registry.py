"""Operation registry mapping operation names to callables."""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Mapping, Optional

Operation = Callable[[Any], Any]


class OperationRegistry(Mapping[str, Operation]):
    """Stores operations and exposes them as a read-only mapping."""

    def __init__(self, operations: Optional[Mapping[str, Operation]] = None) -> None:
        self._operations: Dict[str, Operation] = {}
        for name, func in (operations or {}).items():
            self.register(name, func)

    def register(self, name: str, func: Operation) -> Operation:
        if not callable(func):
            raise TypeError(f"Operation '{name}' is not callable")
        if name in self._operations:
            raise ValueError(f"Operation '{name}' already registered")
        self._operations[name] = func
        return func

    def update_or_register(self, name: str, func: Operation) -> Operation:
        self._operations[name] = func
        return func

    def merged(self, other: Mapping[str, Operation]) -> "OperationRegistry":
        """Return a new registry with ``other``'s operations layered over these."""

        combined = OperationRegistry(self)
        for name, func in other.items():
            combined.update_or_register(name, func)
        return combined

    def __getitem__(self, name: str) -> Operation:
        return self._operations[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def names(self) -> tuple[str, ...]:
        return tuple(self._operations.keys())


registry = OperationRegistry()


def register_operation(name: Optional[str] = None) -> Callable[[Operation], Operation]:
    """Decorator registering the decorated function in the process-wide registry."""

    def decorator(func: Operation) -> Operation:
        registry.register(name or func.__name__, func)
        return func

    return decorator


def clear_registry() -> None:
    registry._operations.clear()
