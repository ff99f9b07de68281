# Copyright 2024 TsumiNa.
# SPDX-License-Identifier: Apache-2.0


from copy import deepcopy
from typing import Iterable, Iterator, Optional, Union

import numpy as np

from .setting import CombinatorySetting, Direction
from .view import Combination, CombinationSequence


class Combinatory(object):
    """
    A class to represent the Cartesian product of several dimensions without materializing it.

    Any combination can be fetched by its index, every combination can be walked lazily
    through :meth:`ref_combinations`, and the object itself iterates over copied
    combinations from both ends until the two cursors meet.

    Attributes:
    -----------
    values : tuple
        The dimensions, repeated as specified.
    lens : tuple
        The lengths of the dimensions.
    size : int
        The total number of combinations.
    forward_strides : tuple
        Place value of each dimension when the last dimension varies fastest.
    backward_strides : tuple
        Place value of each dimension when the first dimension varies fastest.
    """

    def __init__(
        self,
        dimensions: Iterable[Iterable],
        *,
        repeat: int = 1,
        direction: Union[str, Direction] = Direction.forward,
        verbose: bool = False,
    ):
        """
        Initializes the Combinatory object with its dimensions.

        Parameters:
        -----------
        dimensions : Iterable[Iterable]
            The dimensions to combine. Each of them is consumed once and stored as a tuple.
        repeat : int, optional
            The number of times to repeat the dimensions (default is 1).
        direction : str or Direction, optional
            ``"forward"`` makes the last dimension vary fastest, ``"backward"`` the first one
            (default is ``"forward"``).
        verbose : bool, optional
            Whether to print information while generating (default is False).

        Raises:
        -------
        ValueError
            If no dimension is given.
        pydantic.ValidationError
            If repeat or direction are not valid.
        """
        setting = CombinatorySetting(direction=direction, repeat=repeat, verbose=verbose)
        values = tuple(tuple(dim) for dim in dimensions)
        if len(values) == 0:
            raise ValueError("at least one dimension is required")
        values = values * setting.repeat
        lens = tuple(len(dim) for dim in values)
        size = int(np.prod(lens, dtype=object))

        # running products: from the right for forward, from the left for backward
        forward_strides = np.cumprod((1,) + lens[:0:-1], dtype=object)[::-1]
        backward_strides = np.cumprod((1,) + lens[:-1], dtype=object)

        self._values = values
        self._lens = lens
        self._size = size
        self._forward_strides = tuple(int(s) for s in forward_strides)
        self._backward_strides = tuple(int(s) for s in backward_strides)
        self._forward_cursor = 0
        self._backward_cursor = max(size - 1, 0)
        self._direction = setting.direction
        self._repeat = setting.repeat
        self._verbose = setting.verbose

        self._info(f"Combinatory of {len(lens)} dimensions {list(lens)}: {size} combinations.")

    @classmethod
    def from_setting(cls, dimensions: Iterable[Iterable], setting: CombinatorySetting) -> "Combinatory":
        """
        Build a Combinatory from a :class:`CombinatorySetting`.
        """
        return cls(dimensions, repeat=setting.repeat, direction=setting.direction, verbose=setting.verbose)

    @property
    def values(self) -> tuple:
        return self._values

    @property
    def lens(self) -> tuple:
        return self._lens

    @property
    def size(self) -> int:
        return self._size

    @property
    def forward_strides(self) -> tuple:
        return self._forward_strides

    @property
    def backward_strides(self) -> tuple:
        return self._backward_strides

    @property
    def forward_cursor(self) -> int:
        return self._forward_cursor

    @property
    def backward_cursor(self) -> int:
        return self._backward_cursor

    @property
    def remaining(self) -> int:
        """
        Number of combinations not yet pulled by :meth:`__next__` or :meth:`next_back`.
        """
        if self._size == 0:
            return 0
        return max(self._backward_cursor - self._forward_cursor + 1, 0)

    @property
    def direction(self) -> Direction:
        return self._direction

    @direction.setter
    def direction(self, direction: Union[str, Direction]):
        self._direction = Direction(direction)
        self._info(f"Direction set to {self._direction.value}.")

    @property
    def verbose(self) -> bool:
        return self._verbose

    @verbose.setter
    def verbose(self, verbose: bool):
        self._verbose = verbose

    @property
    def setting(self) -> CombinatorySetting:
        """
        Returns the current configuration as a new :class:`CombinatorySetting`.
        """
        return CombinatorySetting(direction=self._direction, repeat=self._repeat, verbose=self._verbose)

    def _info(self, info: str):
        if self._verbose:
            print(info)

    def _exhausted(self) -> bool:
        return self._backward_cursor < self._forward_cursor

    def forward_direction(self) -> "Combinatory":
        """
        Makes combinations grow from right to left, the combinations of ``[1, 2]`` and
        ``[a, b]`` follow the order ``(1, a), (1, b), (2, a), (2, b)``.

        Returns
        -------
        Combinatory
            This object, so the call can be chained.
        """
        self.direction = Direction.forward
        return self

    def backward_direction(self) -> "Combinatory":
        """
        Makes combinations grow from left to right, the combinations of ``[1, 2]`` and
        ``[a, b]`` follow the order ``(1, a), (2, a), (1, b), (2, b)``.

        Returns
        -------
        Combinatory
            This object, so the call can be chained.
        """
        self.direction = Direction.backward
        return self

    def combination(self, index: int) -> Optional[Combination]:
        """
        Returns the combination at the specified index.

        The index is decoded as a mixed-radix number whose place values are the strides of
        the current direction. The cursors are left untouched.

        Parameters:
        -----------
        index : int
            The index of the combination to retrieve.

        Returns:
        --------
        Combination or None
            A lazy view of the combination, or None if the index is out of range.
        """
        if index < 0 or index >= self._size:
            return None
        strides = self._forward_strides if self._direction is Direction.forward else self._backward_strides
        return Combination(self._values, ((index // stride) % len_ for stride, len_ in zip(strides, self._lens)))

    def ref_combinations(self) -> CombinationSequence:
        """
        Gives every combination as a lazy view rather than copying it as
        :meth:`__next__` and :meth:`next_back` do.
        """
        return CombinationSequence(self)

    def next_back(self) -> tuple:
        """
        Gives the combination at the backward cursor as a copy and moves the cursor one step back.

        Raises
        ------
        StopIteration
            When the backward cursor has passed the forward cursor.
        """
        if self._exhausted():
            raise StopIteration
        combination = self.combination(self._backward_cursor)
        if combination is None:
            raise StopIteration
        self._backward_cursor -= 1
        if self._exhausted():
            self._info(f"All {self._size} combinations have been pulled.")
        return tuple(deepcopy(element) for element in combination)

    def __next__(self) -> tuple:
        if self._exhausted():
            raise StopIteration
        combination = self.combination(self._forward_cursor)
        if combination is None:
            raise StopIteration
        self._forward_cursor += 1
        if self._exhausted():
            self._info(f"All {self._size} combinations have been pulled.")
        return tuple(deepcopy(element) for element in combination)

    def __iter__(self) -> "Combinatory":
        return self

    def __reversed__(self) -> Iterator[tuple]:
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return

    def __getitem__(self, index):
        """
        Returns the combination at the specified index, negative indices and slices included.

        Raises:
        -------
        IndexError
            If the index is out of range.
        """
        return self.ref_combinations()[index]

    def __len__(self):
        """
        Returns the total number of combinations.
        """
        return self._size

    def __repr__(self):
        return f"Combinatory(\
            \n    lens={list(self._lens)},\
            \n    size={self._size},\
            \n    direction={self._direction.value},\
            \n    repeat={self._repeat},\
            \n    verbose={self._verbose}\
            \n)"
