"""Element access strategies for control-point handles.

A spline stores handles. A handle is either the control point itself or a
reference to a value owned by the caller. The strategy is picked once, when
the spline is built, so evaluation never inspects handle types.
"""

from __future__ import annotations

import numbers
from typing import Any, Generic, MutableSequence, Sequence, TypeVar

import numpy as np


T = TypeVar("T")


def coerce_like(value: Any, like: Any) -> Any:
    """Convert an arithmetic result back to the value type of `like`."""
    if isinstance(like, np.ndarray):
        return np.asarray(value).astype(like.dtype, copy=False)
    if isinstance(like, np.generic):
        return like.dtype.type(value)
    if isinstance(like, numbers.Integral) and not isinstance(value, numbers.Integral):
        # int() truncates toward zero.
        return type(like)(int(value))
    if isinstance(like, float) and type(value) is not type(like):
        return type(like)(value)
    return value


def promote_scalar(t: Any, like: Any) -> Any:
    """Widen the curve parameter to the scalar precision of the point `like`."""
    if isinstance(like, (np.ndarray, np.generic)):
        return np.result_type(t, like.dtype).type(t)
    if isinstance(like, float) and type(t) is not float:
        return float(t)
    return t


def value_half_difference(start: Any, end: Any, half: Any = 0.5) -> Any:
    """Return ``(end - start) * half`` in the value type of `start`."""
    return coerce_like((end - start) * half, start)


class Ref(Generic[T]):
    """A mutable box holding one value owned by the caller."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"


class SlotRef:
    """
    Reference to ``container[key]``, re-read on every access.

    The container must keep ``key`` valid for as long as the reference is
    used; removing or reordering elements silently retargets it.
    """

    __slots__ = ("container", "key")

    def __init__(self, container: Any, key: Any) -> None:
        self.container = container
        self.key = key

    def get(self) -> Any:
        return self.container[self.key]

    def set(self, value: Any) -> None:
        self.container[self.key] = value

    def __repr__(self) -> str:
        return f"SlotRef(key={self.key!r}, value={self.get()!r})"


def alias(values: MutableSequence[Any]) -> list[SlotRef]:
    """Build one `SlotRef` per element of a caller-owned sequence."""
    return [SlotRef(values, i) for i in range(len(values))]


class ElementAccess:
    """Strategy turning a stored handle into the value used in arithmetic."""

    name = "abstract"
    is_reference = False

    def deref(self, handle: Any) -> Any:
        raise NotImplementedError

    def half_difference(self, a: Any, b: Any, half: Any = 0.5) -> Any:
        """Return ``(b - a) * half`` in the value type of `a`."""
        return value_half_difference(self.deref(a), self.deref(b), half)

    def deref_window(self, window: Sequence[Any]) -> list[Any]:
        return [self.deref(handle) for handle in window]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ValueAccess(ElementAccess):
    """Handles are the control points themselves."""

    name = "value"

    def deref(self, handle: Any) -> Any:
        return handle


class ReferenceAccess(ElementAccess):
    """Handles expose ``get()`` returning the current control point."""

    name = "reference"
    is_reference = True

    def deref(self, handle: Any) -> Any:
        return handle.get()


VALUE = ValueAccess()
REFERENCE = ReferenceAccess()
