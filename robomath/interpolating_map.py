"""A sorted key-value map that linearly interpolates between its keys."""

from __future__ import annotations

import bisect
from typing import Any


class InterpolatingMap:
    """Map from ordered numeric keys to values, interpolating between pairs.

    Looking up a key below the smallest or above the largest stored key
    returns the value at that end. Values may be anything that supports
    multiplication by a float and addition, such as floats or numpy arrays.
    """

    def __init__(self) -> None:
        self._keys: list[Any] = []
        self._values: dict[Any, Any] = {}

    def insert(self, key: Any, value: Any) -> None:
        """Add a pair; a key already present keeps its first value."""
        if key in self._values:
            return
        bisect.insort(self._keys, key)
        self._values[key] = value

    def __getitem__(self, key: Any) -> Any:
        if not self._keys:
            raise KeyError(key)
        upper_index = bisect.bisect_right(self._keys, key)
        if upper_index == len(self._keys):
            return self._values[self._keys[-1]]
        if upper_index == 0:
            return self._values[self._keys[0]]
        lower_key = self._keys[upper_index - 1]
        upper_key = self._keys[upper_index]
        delta = (key - lower_key) / (upper_key - lower_key)
        return delta * self._values[upper_key] + (1.0 - delta) * self._values[lower_key]

    def clear(self) -> None:
        """Remove every pair."""
        self._keys.clear()
        self._values.clear()

    def __len__(self) -> int:
        return len(self._keys)