# Copyright 2024 TsumiNa.
# SPDX-License-Identifier: Apache-2.0


from enum import Enum

from pydantic import BaseModel, Field, StrictInt


class Direction(str, Enum):
    """
    Growing order of the combinations.

    ``forward`` makes the last dimension vary fastest, ``backward`` the first one.
    """

    forward = "forward"
    backward = "backward"


class CombinatorySetting(BaseModel):
    """
    Combinatory setting model.
    """

    direction: Direction = Field(Direction.forward, description="Decoding order of the combination index")
    repeat: StrictInt = Field(1, ge=1, description="How many times the dimensions are repeated")
    verbose: bool = Field(False, description="Print information while generating")
