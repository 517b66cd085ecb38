from __future__ import annotations
from enum import IntEnum

FaceIdx = int
BaseCellIdx = int
VertexNum = int

NUM_ICOSA_FACES = 20
NUM_BASE_CELLS = 122
NUM_PENTAGONS = 12

NUM_HEX_VERTS = 6
NUM_PENT_VERTS = 5

# Rotations are always counted in hexagon steps, even on pentagons.
NUM_ROTATIONS = 6

INVALID_VERTEX_NUM = -1


class Direction(IntEnum):
    '''
    Position of a neighboring cell in local ijk coordinates. The digits are the same ones that
    make up a cell's hierarchical path below its base cell.
    '''
    CENTER = 0
    K = 1
    J = 2
    JK = 3
    I = 4
    IK = 5
    IJ = 6


# One past the last real direction. Not a Direction member so that it never sneaks into a
# lookup table by accident.
INVALID_DIGIT = 7

# Pentagon rows skip CENTER and the deleted K axis, so J is stored at index 0.
DIRECTION_INDEX_OFFSET = 2


def is_valid_direction(direction) -> bool:
    '''
    True for any int in CENTER..IJ. bools are not directions.
    '''
    if isinstance(direction, bool) or not isinstance(direction, int):
        return False
    return Direction.CENTER <= direction < INVALID_DIGIT


__all__ = ["BaseCellIdx", "DIRECTION_INDEX_OFFSET", "Direction", "FaceIdx", "INVALID_DIGIT",
           "INVALID_VERTEX_NUM", "NUM_BASE_CELLS", "NUM_HEX_VERTS", "NUM_ICOSA_FACES",
           "NUM_PENTAGONS", "NUM_PENT_VERTS", "NUM_ROTATIONS", "VertexNum", "is_valid_direction"]
