# Copyright 2024 TsumiNa.
# SPDX-License-Identifier: Apache-2.0


__all__ = [
    "Combinatory",
    "Combination",
    "CombinationSequence",
    "CombinatorySetting",
    "Direction",
]

from .combinatory import Combinatory
from .setting import CombinatorySetting, Direction
from .view import Combination, CombinationSequence
