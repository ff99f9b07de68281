# Copyright 2024 TsumiNa.
# SPDX-License-Identifier: Apache-2.0


from collections.abc import Sequence
from typing import Iterable, Iterator


class Combination(Sequence):
    """
    A lazy, read-only view of one combination.

    Only the sub-index of each dimension is kept. Elements are resolved against the
    dimensions of the owning :class:`~combinatory.Combinatory` when accessed, so they are
    the very same objects that were given at construction, never copies.
    """

    __slots__ = ("_values", "_indices")

    def __init__(self, values: tuple, indices: Iterable[int]):
        self._values = values
        self._indices = tuple(indices)

    @property
    def indices(self) -> tuple:
        """The sub-index picked from each dimension."""
        return self._indices

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(len(self))[index]]
        dim = range(len(self._indices))[index]
        return self._values[dim][self._indices[dim]]

    def __len__(self):
        return len(self._indices)

    def __iter__(self):
        for dim, index in enumerate(self._indices):
            yield self._values[dim][index]

    def __reversed__(self):
        for dim in range(len(self._indices) - 1, -1, -1):
            yield self._values[dim][self._indices[dim]]

    def __eq__(self, other):
        if isinstance(other, (str, bytes)) or not isinstance(other, Sequence):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return f"Combination({', '.join(repr(v) for v in self)})"


class CombinationSequence(Sequence):
    """
    Every combination of a :class:`~combinatory.Combinatory` in index order.

    Nothing is stored: each item is decoded from its index on demand, therefore the
    sequence can be iterated as many times as needed, from either end.
    ``len()`` is limited to ``sys.maxsize``; use :attr:`size` for bigger products.
    """

    def __init__(self, combinatory):
        self._combinatory = combinatory

    @property
    def size(self) -> int:
        return self._combinatory.size

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._combinatory.combination(i) for i in range(self.size)[index]]
        return self._combinatory.combination(range(self.size)[index])

    def __len__(self):
        return self.size

    def __iter__(self) -> Iterator[Combination]:
        for index in range(self.size):
            yield self._combinatory.combination(index)

    def __reversed__(self) -> Iterator[Combination]:
        for index in range(self.size - 1, -1, -1):
            yield self._combinatory.combination(index)

    def __repr__(self):
        return f"CombinationSequence(size={self.size})"
