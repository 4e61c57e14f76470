from __future__ import annotations

from typing import Hashable


class NestedDict(dict):
    """
    A dict whose intermediate levels are created on first access through `branch`.
    Insertion order is preserved at every level.

    >>> d = NestedDict()
    >>> d.branch("0xabc")["2023-4"] = {"amount": "1"}
    >>> d
    {'0xabc': {'2023-4': {'amount': '1'}}}
    """

    def branch(self, key: Hashable) -> NestedDict:
        """Get the nested level at `key`, inserting an empty one if missing"""
        child = self.get(key)
        if child is None:
            child = self[key] = NestedDict()
        return child
