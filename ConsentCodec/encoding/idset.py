"""
Set of small positive identifiers backed by a boolean mask.
"""

import numpy as np
from typing import Iterable, Iterator, Union


class IdSet:
    """
    Set of 1-based integer identifiers.

    Slot i of the mask marks identifier i + 1. The mask grows as larger
    identifiers are added; identifiers outside it are simply not members.
    Iteration is in ascending order.
    """

    __slots__ = ("_mask",)

    def __init__(self, members: Iterable[int] = ()):
        self._mask = np.zeros(0, dtype=bool)
        for member in members:
            self.add(member)

    @classmethod
    def from_mask(cls, mask: Union[np.ndarray, Iterable[bool]]) -> "IdSet":
        """Creates a set whose members are the 1-based positions of true flags."""
        ids = cls()
        ids._mask = np.array(mask, dtype=bool).ravel()
        return ids

    def to_mask(self, size: int) -> np.ndarray:
        """
        Gets membership flags for identifiers 1..size.

        Args:
            size: Number of slots; members above it are left out

        Returns:
            Boolean array of length size
        """
        mask = np.zeros(size, dtype=bool)
        n = min(size, self._mask.size)
        mask[:n] = self._mask[:n]
        return mask

    def add(self, member: int) -> None:
        member = int(member)
        if member < 1:
            raise ValueError(f"identifiers are 1-based, got {member}")
        if member > self._mask.size:
            grown = np.zeros(max(member, 2 * self._mask.size), dtype=bool)
            grown[:self._mask.size] = self._mask
            self._mask = grown
        self._mask[member - 1] = True

    def discard(self, member: int) -> None:
        if member in self:
            self._mask[member - 1] = False

    def __contains__(self, member: object) -> bool:
        if isinstance(member, (bool, np.bool_)) or not isinstance(member, (int, np.integer)):
            return False
        return 1 <= member <= self._mask.size and bool(self._mask[member - 1])

    def __iter__(self) -> Iterator[int]:
        return (int(i) + 1 for i in np.flatnonzero(self._mask))

    def __len__(self) -> int:
        return int(np.count_nonzero(self._mask))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IdSet):
            return list(self) == list(other)
        if isinstance(other, (set, frozenset)):
            return set(self) == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"IdSet({list(self)})"
