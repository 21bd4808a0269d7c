"""Observable value holders used by the equation model.

An `ObservableValue` is a mutable value with change notification. A
`DerivedValue` is computed from other observables and recomputed as soon as
any of them changes, so reading it never returns a stale result.
"""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")

Listener = Callable[[T, T], None]


class ReadOnlyObservable(Generic[T]):
    """Listener bookkeeping shared by mutable and derived values."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._listeners: List[Listener] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, listener: Listener) -> None:
        """Register `listener(new, old)`; registering the same listener twice is an error."""
        if self.has_listener(listener):
            raise ValueError(f"Listener {listener!r} is already subscribed.")
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if not self.has_listener(listener):
            raise ValueError(f"Listener {listener!r} is not subscribed.")
        self._listeners.remove(listener)

    def has_listener(self, listener: Listener) -> bool:
        return any(existing == listener for existing in self._listeners)

    def _update(self, value: T) -> None:
        old = self._value
        if value == old:
            return
        self._value = value
        # Copy so that listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(value, old)


class ObservableValue(ReadOnlyObservable[T]):
    """A value holder with an optional validator and a resettable initial value."""

    def __init__(self, initial_value: T, validator: Optional[Callable[[T], None]] = None) -> None:
        if validator is not None:
            validator(initial_value)
        super().__init__(initial_value)
        self._initial_value = initial_value
        self._validator = validator

    value = ReadOnlyObservable.value

    @value.setter
    def value(self, value: T) -> None:
        if self._validator is not None:
            self._validator(value)
        self._update(value)

    @property
    def initial_value(self) -> T:
        return self._initial_value

    @initial_value.setter
    def initial_value(self, value: T) -> None:
        if self._validator is not None:
            self._validator(value)
        self._initial_value = value

    def reset(self) -> None:
        self.value = self._initial_value


class DerivedValue(ReadOnlyObservable[T]):
    """A read-only value computed from a fixed list of dependencies."""

    def __init__(self, dependencies: Sequence[ReadOnlyObservable], derivation: Callable[[], T]) -> None:
        super().__init__(derivation())
        self._dependencies = tuple(dependencies)
        self._derivation = derivation
        for dependency in self._dependencies:
            dependency.subscribe(self._on_dependency_changed)

    def _on_dependency_changed(self, _new: object, _old: object) -> None:
        self._update(self._derivation())

    def dispose(self) -> None:
        """Detach from all dependencies."""
        for dependency in self._dependencies:
            dependency.unsubscribe(self._on_dependency_changed)
        self._dependencies = ()
