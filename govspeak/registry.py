"""Ordered, freeze-once registries shared by the macro and post-process pipelines."""

from __future__ import annotations

from typing import Generic, Iterator, List, TypeVar

from .exceptions import RegistryFrozenError

T = TypeVar("T")


class OrderedRegistry(Generic[T]):
    """
    Append-only list of entries that is frozen before the first render.

    Entries run in registration order; a frozen registry rejects further
    registrations so every render sees the same pipeline.
    """

    def __init__(self, entries=()):
        self._entries: List[T] = list(entries)
        self._frozen = False

    def _append(self, entry: T) -> T:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register {entry!r}: {type(self).__name__} is frozen"
            )
        self._entries.append(entry)
        return entry

    def freeze(self):
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    def get(self, name: str):
        """Return the first entry registered under ``name``, or None."""
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
