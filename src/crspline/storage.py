"""Owned and borrowed control-point storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator


class Ownership(str, Enum):
    OWNED = "owned"
    BORROWED = "borrowed"


@dataclass(eq=False)
class PointStorage:
    """
    Ordered control-point handles tagged with who owns the list.

    Borrowed storage wraps the caller's own list object, so appends made
    through the spline are visible to the caller and vice versa.
    """

    ownership: Ownership = Ownership.OWNED
    items: list[Any] = field(default_factory=list)

    @classmethod
    def owned(cls, items: Iterable[Any] = ()) -> "PointStorage":
        return cls(Ownership.OWNED, list(items))

    @classmethod
    def borrowed(cls, items: list[Any]) -> "PointStorage":
        if not isinstance(items, list):
            raise TypeError(
                f"Borrowed storage must be a list owned by the caller; got {type(items).__name__}."
            )
        return cls(Ownership.BORROWED, items)

    @property
    def is_borrowed(self) -> bool:
        return self.ownership is Ownership.BORROWED

    def append(self, item: Any) -> None:
        self.items.append(item)

    def extend(self, items: Iterable[Any]) -> None:
        self.items.extend(items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]

    def __setitem__(self, index: int, item: Any) -> None:
        self.items[index] = item

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)
