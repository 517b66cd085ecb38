from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Mapping

from icohex.cells import Cell, CellQuery
from icohex.defs import (BaseCellIdx, Direction, INVALID_DIGIT, INVALID_VERTEX_NUM,
                         NUM_HEX_VERTS, NUM_PENT_VERTS, NUM_ROTATIONS, VertexNum,
                         is_valid_direction)
from icohex.precomputed.pentagon_faces import (PENTAGON_DIRECTION_FACES_INDEXED,
                                               PentagonDirectionFaces)
from icohex.precomputed.vertex_tables import (DIRECTION_TO_VERTEX_NUM_HEX,
                                              DIRECTION_TO_VERTEX_NUM_PENT,
                                              VERTEX_NUM_TO_DIRECTION_HEX,
                                              VERTEX_NUM_TO_DIRECTION_PENT)

logger = logging.getLogger(__name__)


def pentagon_direction_faces(base_cell: BaseCellIdx) -> PentagonDirectionFaces:
    try:
        return PENTAGON_DIRECTION_FACES_INDEXED[base_cell]
    except KeyError:
        raise ValueError(f"Base cell {base_cell} has no pentagon direction faces.") from None


def vertex_rotations(cell: Cell, query: CellQuery) -> int:
    '''
    Returns the number of 60 degree CCW rotations of the cell's vertex numbers compared to the
    directional layout of its neighbors, in [0, 5].
    '''
    # Step #1 - where the cell sits, and where its base cell lives.
    face = query.projected_face(cell)
    base_cell = query.base_cell(cell)
    leading_digit = query.leading_non_zero_digit(cell)
    home_face = query.base_cell_home_face(base_cell)

    # Step #2 - the base cell's own rotation, as seen from the cell's face.
    ccw_rot60 = query.intrinsic_rotation(base_cell, face)
    if ccw_rot60 < 0 or ccw_rot60 >= NUM_ROTATIONS:
        raise ValueError(
            f"Base cell {base_cell} reported a rotation outside 0..{NUM_ROTATIONS - 1} on face {face} ({ccw_rot60}).")

    # Step #3 - hexagonal base cells need nothing else.
    if not query.is_base_cell_pentagon(base_cell):
        return ccw_rot60

    # Step #4 - pentagons twist once more when seen from another face: always if polar, otherwise
    # only from the face across the IK axis.
    dir_faces = pentagon_direction_faces(base_cell)
    ik_face = dir_faces.face_for_direction(Direction.IK)
    jk_face = dir_faces.face_for_direction(Direction.JK)
    if face != home_face and (query.is_polar_pentagon(base_cell) or face == ik_face):
        ccw_rot60 = (ccw_rot60 + 1) % NUM_ROTATIONS
        logger.debug("pentagon %d seen from face %d: extra CCW rotation", base_cell, face)

    # Step #5 - cells that cross the deleted K subsequence.
    if leading_digit == Direction.JK and face == ik_face:
        # JK into IK: rotate CW
        ccw_rot60 = (ccw_rot60 + NUM_ROTATIONS - 1) % NUM_ROTATIONS
        logger.debug("pentagon %d: JK descendant on IK face %d, CW rotation", base_cell, face)
    elif leading_digit == Direction.IK and face == jk_face:
        # IK into JK: rotate CCW
        ccw_rot60 = (ccw_rot60 + 1) % NUM_ROTATIONS
        logger.debug("pentagon %d: IK descendant on JK face %d, CCW rotation", base_cell, face)

    return ccw_rot60


def vertex_num_for_direction(cell: Cell, direction: int, query: CellQuery) -> VertexNum:
    '''
    Returns the first vertex number for the given direction. The neighbor in that direction lies
    between this vertex and the next one in sequence. INVALID_VERTEX_NUM is returned for CENTER,
    for anything that isn't a direction, and for K on a pentagon.
    '''
    if not is_valid_direction(direction) or direction == Direction.CENTER:
        return INVALID_VERTEX_NUM
    is_pentagon = query.is_pentagon(cell)
    if is_pentagon and direction == Direction.K:
        return INVALID_VERTEX_NUM

    rotations = vertex_rotations(cell, query)

    if is_pentagon:
        return (DIRECTION_TO_VERTEX_NUM_PENT[direction] + NUM_PENT_VERTS - rotations) % NUM_PENT_VERTS
    return (DIRECTION_TO_VERTEX_NUM_HEX[direction] + NUM_HEX_VERTS - rotations) % NUM_HEX_VERTS


def direction_for_vertex_num(cell: Cell, vertex_num: int, query: CellQuery) -> int:
    '''
    Inverse of vertex_num_for_direction(): the direction of the neighbor that lies between this
    vertex and the next one. INVALID_DIGIT is returned for vertex numbers the cell doesn't have.
    '''
    is_pentagon = query.is_pentagon(cell)
    num_verts = NUM_PENT_VERTS if is_pentagon else NUM_HEX_VERTS
    if isinstance(vertex_num, bool) or not isinstance(vertex_num, int) \
            or vertex_num < 0 or vertex_num >= num_verts:
        return INVALID_DIGIT

    rotations = vertex_rotations(cell, query)
    directions = VERTEX_NUM_TO_DIRECTION_PENT if is_pentagon else VERTEX_NUM_TO_DIRECTION_HEX
    return directions[(vertex_num + rotations) % num_verts]


def cell_vertex_layout(cell: Cell, query: CellQuery) -> Mapping[Direction, VertexNum]:
    '''
    Maps every neighbor direction the cell has to its first vertex number, resolving the cell's
    rotation only once.
    '''
    is_pentagon = query.is_pentagon(cell)
    rotations = vertex_rotations(cell, query)
    if is_pentagon:
        table, num_verts = DIRECTION_TO_VERTEX_NUM_PENT, NUM_PENT_VERTS
    else:
        table, num_verts = DIRECTION_TO_VERTEX_NUM_HEX, NUM_HEX_VERTS

    layout = {}
    for direction in Direction:
        v0 = table[direction]
        if v0 == INVALID_VERTEX_NUM:
            continue
        layout[direction] = (v0 + num_verts - rotations) % num_verts
    assert len(layout) == num_verts
    return MappingProxyType(layout)


__all__ = ["cell_vertex_layout", "direction_for_vertex_num", "pentagon_direction_faces",
           "vertex_num_for_direction", "vertex_rotations"]
