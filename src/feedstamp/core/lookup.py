"""Case-insensitive key lookup shared by overrides, metadata and token names."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


def fold_key(key: str) -> str:
    """Normalize a key for case-insensitive comparison."""
    return key.casefold()


class FoldedMapping(Mapping[str, str]):
    """Read-only mapping whose keys compare case-insensitively.

    The original spelling of each key is kept for display. When two keys
    fold to the same value, the later one wins.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, tuple[str, str]] = {}
        for key, value in (data or {}).items():
            self._data[fold_key(str(key))] = (str(key), "" if value is None else str(value))

    def __getitem__(self, key: str) -> str:
        return self._data[fold_key(key)][1]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold_key(key) in self._data

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FoldedMapping({dict(self.items())!r})"

    def merged(self, other: Mapping[str, Any]) -> FoldedMapping:
        """Return a new mapping with ``other`` layered on top of this one."""
        return FoldedMapping({**dict(self.items()), **dict(FoldedMapping(other).items())})


def as_folded(data: Mapping[str, Any] | None) -> FoldedMapping:
    """Wrap a plain mapping, reusing it if it is already folded."""
    if isinstance(data, FoldedMapping):
        return data
    return FoldedMapping(data)
