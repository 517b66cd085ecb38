from __future__ import annotations
from typing import Tuple
from icohex.defs import Direction, INVALID_VERTEX_NUM

# Direction -> first vertex number for an unrotated cell, indexed by the direction's int value.
# CENTER is never a vertex, and neither is the deleted K axis on a pentagon.
# Order: CENTER, K, J, JK, I, IK, IJ.
DIRECTION_TO_VERTEX_NUM_HEX: Tuple[int, ...] = (
    INVALID_VERTEX_NUM, 3, 1, 2, 5, 4, 0)
DIRECTION_TO_VERTEX_NUM_PENT: Tuple[int, ...] = (
    INVALID_VERTEX_NUM, INVALID_VERTEX_NUM, 1, 2, 4, 3, 0)

# The inverse of the above, indexed by vertex number. Walking these in order walks the neighbors
# counter-clockwise.
VERTEX_NUM_TO_DIRECTION_HEX: Tuple[Direction, ...] = (
    Direction.IJ, Direction.J, Direction.JK, Direction.K, Direction.IK, Direction.I)
VERTEX_NUM_TO_DIRECTION_PENT: Tuple[Direction, ...] = (
    Direction.IJ, Direction.J, Direction.JK, Direction.IK, Direction.I)
