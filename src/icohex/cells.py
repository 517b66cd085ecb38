from __future__ import annotations
from types import MappingProxyType
from typing import Hashable, Iterable, Mapping, NamedTuple, Optional, Protocol, Tuple
from icohex.defs import (BaseCellIdx, Direction, FaceIdx, NUM_BASE_CELLS, NUM_ICOSA_FACES,
                         NUM_ROTATIONS, is_valid_direction)
from icohex.precomputed.pentagon_faces import (PENTAGON_DIRECTION_FACES_INDEXED,
                                               POLAR_PENTAGON_BASE_CELLS)

Cell = Hashable


class UnresolvableCellError(LookupError):
    '''
    Raised by a cell query when a cell, base cell, or face can't be resolved. This is always the
    fault of the index that was passed in, never of the vertex numbering.
    '''


class CellQuery(Protocol):
    '''
    The narrow view of the grid that vertex numbering needs. Anything that can answer these
    questions about a cell (a real index decoder, a lookup table, a test stub) will do.
    '''

    def projected_face(self, cell: Cell) -> FaceIdx: ...

    def base_cell(self, cell: Cell) -> BaseCellIdx: ...

    def leading_non_zero_digit(self, cell: Cell) -> Optional[Direction]: ...

    def is_pentagon(self, cell: Cell) -> bool: ...

    def is_base_cell_pentagon(self, base_cell: BaseCellIdx) -> bool: ...

    def is_polar_pentagon(self, base_cell: BaseCellIdx) -> bool: ...

    def base_cell_home_face(self, base_cell: BaseCellIdx) -> FaceIdx: ...

    def intrinsic_rotation(self, base_cell: BaseCellIdx, face: FaceIdx) -> int:
        '''
        Number of 60 degree CCW rotations that turn the base cell's home-face directions into the
        directions of the given face.
        '''
        ...


def leading_non_zero_digit(digits: Iterable[int]) -> Optional[Direction]:
    '''
    Returns the first digit of a hierarchical path that isn't CENTER, or None when the whole path
    is CENTER (including the empty path of a base cell).
    '''
    for digit in digits:
        if digit != Direction.CENTER:
            return Direction(digit)
    return None


class CellRecord(NamedTuple):
    face: FaceIdx
    base_cell: BaseCellIdx
    digits: Tuple[int, ...] = ()


class BaseCellRecord(NamedTuple):
    home_face: FaceIdx
    # face -> CCW rotations. The home face is 0 unless listed otherwise.
    rotations: Mapping[FaceIdx, int]
    is_pentagon: bool = False
    is_polar: Optional[bool] = None


def _check_face(face: FaceIdx, what: str):
    if face < 0 or face >= NUM_ICOSA_FACES:
        raise ValueError(f"{what}: faces outside 0..{NUM_ICOSA_FACES - 1} are not permitted ({face}).")


def _check_base_cell(base_cell: BaseCellIdx, what: str):
    if base_cell < 0 or base_cell >= NUM_BASE_CELLS:
        raise ValueError(
            f"{what}: base cells outside 0..{NUM_BASE_CELLS - 1} are not permitted ({base_cell}).")


class StaticCellQuery:
    '''
    A CellQuery backed by plain tables: cells are resolved through a mapping of cell -> CellRecord
    and base cells through a mapping of base cell -> BaseCellRecord. Everything is checked once up
    front, so lookups afterwards only fail for cells or faces that were never registered.

    A cell is a pentagon when its base cell is one and every digit of its path is CENTER. When a
    pentagon's is_polar is left as None, the well-known polar pentagons are used.
    '''

    def __init__(self,
                 base_cells: Mapping[BaseCellIdx, BaseCellRecord],
                 cells: Mapping[Cell, CellRecord]):
        _base_cells = {}
        for base_cell, record in base_cells.items():
            _check_base_cell(base_cell, "base cell table")
            _check_face(record.home_face, f"base cell {base_cell}")
            rotations = {record.home_face: 0}
            for face, rot in record.rotations.items():
                _check_face(face, f"base cell {base_cell}")
                if rot < 0 or rot >= NUM_ROTATIONS:
                    raise ValueError(
                        f"Base cell {base_cell} has a rotation outside 0..{NUM_ROTATIONS - 1} on face {face} ({rot}).")
                rotations[face] = rot
            is_polar = record.is_polar
            if record.is_pentagon:
                if base_cell not in PENTAGON_DIRECTION_FACES_INDEXED:
                    raise ValueError(f"Base cell {base_cell} is not one of the known pentagons.")
                if is_polar is None:
                    is_polar = base_cell in POLAR_PENTAGON_BASE_CELLS
            elif is_polar:
                raise ValueError(f"Base cell {base_cell} is polar but not a pentagon.")
            _base_cells[base_cell] = record._replace(
                rotations=MappingProxyType(rotations), is_polar=bool(is_polar))

        _cells = {}
        for cell, record in cells.items():
            _check_face(record.face, f"cell {cell!r}")
            if record.base_cell not in _base_cells:
                raise ValueError(f"Cell {cell!r} refers to unknown base cell {record.base_cell}.")
            for digit in record.digits:
                if not is_valid_direction(digit):
                    raise ValueError(f"Cell {cell!r} has an invalid digit in its path ({digit}).")
            _cells[cell] = record._replace(digits=tuple(Direction(d) for d in record.digits))

        self._base_cells: Mapping[BaseCellIdx, BaseCellRecord] = MappingProxyType(_base_cells)
        self._cells: Mapping[Cell, CellRecord] = MappingProxyType(_cells)

    def _cell(self, cell: Cell) -> CellRecord:
        try:
            return self._cells[cell]
        except (KeyError, TypeError) as exc:
            raise UnresolvableCellError(f"Unknown cell {cell!r}.") from exc

    def _base_cell(self, base_cell: BaseCellIdx) -> BaseCellRecord:
        try:
            return self._base_cells[base_cell]
        except (KeyError, TypeError) as exc:
            raise UnresolvableCellError(f"Unknown base cell {base_cell!r}.") from exc

    def projected_face(self, cell: Cell) -> FaceIdx:
        return self._cell(cell).face

    def base_cell(self, cell: Cell) -> BaseCellIdx:
        return self._cell(cell).base_cell

    def leading_non_zero_digit(self, cell: Cell) -> Optional[Direction]:
        return leading_non_zero_digit(self._cell(cell).digits)

    def is_pentagon(self, cell: Cell) -> bool:
        record = self._cell(cell)
        return self._base_cells[record.base_cell].is_pentagon and \
            leading_non_zero_digit(record.digits) is None

    def is_base_cell_pentagon(self, base_cell: BaseCellIdx) -> bool:
        return self._base_cell(base_cell).is_pentagon

    def is_polar_pentagon(self, base_cell: BaseCellIdx) -> bool:
        return self._base_cell(base_cell).is_polar

    def base_cell_home_face(self, base_cell: BaseCellIdx) -> FaceIdx:
        return self._base_cell(base_cell).home_face

    def intrinsic_rotation(self, base_cell: BaseCellIdx, face: FaceIdx) -> int:
        rotations = self._base_cell(base_cell).rotations
        if face not in rotations:
            raise UnresolvableCellError(f"Base cell {base_cell} does not touch face {face}.")
        return rotations[face]

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self._cells)


__all__ = ["BaseCellRecord", "Cell", "CellQuery", "CellRecord", "StaticCellQuery",
           "UnresolvableCellError", "leading_non_zero_digit"]
