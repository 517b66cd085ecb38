from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple
from icohex.defs import BaseCellIdx, Direction, DIRECTION_INDEX_OFFSET, FaceIdx


class PentagonDirectionFaces(NamedTuple):
    '''
    The icosahedron face reached by each of a pentagon base cell's five neighbor directions. Faces
    are listed in directional order starting at J: (J, JK, I, IK, IJ).
    '''
    base_cell: BaseCellIdx
    faces: Tuple[FaceIdx, FaceIdx, FaceIdx, FaceIdx, FaceIdx]

    def face_for_direction(self, direction: Direction) -> FaceIdx:
        if direction < Direction.J or direction > Direction.IJ:
            raise ValueError(
                f"Pentagon {self.base_cell} has no face in direction {direction!r}.")
        return self.faces[direction - DIRECTION_INDEX_OFFSET]


# fmt: off
PENTAGON_DIRECTION_FACES: Tuple[PentagonDirectionFaces, ...] = (
    PentagonDirectionFaces(4, (4, 0, 2, 1, 3)),
    PentagonDirectionFaces(14, (6, 11, 2, 7, 1)),
    PentagonDirectionFaces(24, (5, 10, 1, 6, 0)),
    PentagonDirectionFaces(38, (7, 12, 3, 8, 2)),
    PentagonDirectionFaces(49, (9, 14, 0, 5, 4)),
    PentagonDirectionFaces(58, (8, 13, 4, 9, 3)),
    PentagonDirectionFaces(63, (11, 6, 15, 10, 16)),
    PentagonDirectionFaces(72, (12, 7, 16, 11, 17)),
    PentagonDirectionFaces(83, (10, 5, 19, 14, 15)),
    PentagonDirectionFaces(97, (13, 8, 17, 12, 18)),
    PentagonDirectionFaces(107, (14, 9, 18, 13, 19)),
    PentagonDirectionFaces(117, (15, 19, 17, 18, 16)),
)
# fmt: on

PENTAGON_DIRECTION_FACES_INDEXED: Mapping[BaseCellIdx, PentagonDirectionFaces] = \
    MappingProxyType({row.base_cell: row for row in PENTAGON_DIRECTION_FACES})

# The two pentagons sitting on the poles. They touch faces in a pattern that always needs an extra
# rotation away from their home face.
POLAR_PENTAGON_BASE_CELLS = frozenset((4, 117))
