import pytest
from icohex.cells import (BaseCellRecord, CellRecord, StaticCellQuery, UnresolvableCellError,
                          leading_non_zero_digit)
from icohex.defs import Direction


def _query(**cells):
    base_cells = {
        7: BaseCellRecord(home_face=3, rotations={4: 2, 8: 5}),
        117: BaseCellRecord(home_face=15, rotations={19: 1}, is_pentagon=True),
        63: BaseCellRecord(home_face=11, rotations={}, is_pentagon=True),
    }
    return StaticCellQuery(base_cells, cells)


# --- leading_non_zero_digit ---

def test_leading_digit():
    assert leading_non_zero_digit(()) is None
    assert leading_non_zero_digit((0, 0, 0)) is None
    assert leading_non_zero_digit((0, 3, 1)) is Direction.JK
    assert leading_non_zero_digit([5]) is Direction.IK
    assert leading_non_zero_digit(iter((0, Direction.K))) is Direction.K


# --- lookups ---

def test_cell_lookups():
    q = _query(a=CellRecord(face=4, base_cell=7, digits=(0, 2, 5)))
    assert q.projected_face("a") == 4
    assert q.base_cell("a") == 7
    assert q.leading_non_zero_digit("a") is Direction.J
    assert not q.is_pentagon("a")
    assert "a" in q
    assert "b" not in q
    assert len(q) == 1


def test_base_cell_lookups():
    q = _query()
    assert q.base_cell_home_face(7) == 3
    assert q.intrinsic_rotation(7, 3) == 0
    assert q.intrinsic_rotation(7, 8) == 5
    assert not q.is_base_cell_pentagon(7)
    assert not q.is_polar_pentagon(7)
    assert q.is_base_cell_pentagon(117)
    assert q.is_polar_pentagon(117)
    assert q.is_base_cell_pentagon(63)
    assert not q.is_polar_pentagon(63)


def test_polar_flag_can_be_overridden():
    q = StaticCellQuery({63: BaseCellRecord(home_face=11, rotations={}, is_pentagon=True,
                                            is_polar=True)}, {})
    assert q.is_polar_pentagon(63)


def test_pentagon_only_without_digits():
    q = _query(
        p=CellRecord(face=15, base_cell=117),
        p_deep=CellRecord(face=15, base_cell=117, digits=(0, 0, 0)),
        child=CellRecord(face=19, base_cell=117, digits=(0, 6)),
        hexagon=CellRecord(face=3, base_cell=7),
    )
    assert q.is_pentagon("p")
    assert q.is_pentagon("p_deep")
    assert not q.is_pentagon("child")
    assert not q.is_pentagon("hexagon")


def test_home_face_rotation_can_be_overridden():
    q = StaticCellQuery({7: BaseCellRecord(home_face=3, rotations={3: 1})}, {})
    assert q.intrinsic_rotation(7, 3) == 1


def test_records_are_read_only():
    source = {4: 2}
    q = StaticCellQuery({7: BaseCellRecord(home_face=3, rotations=source)}, {})
    source[4] = 5
    assert q.intrinsic_rotation(7, 4) == 2


# --- unresolvable ---

def test_unknown_cell():
    q = _query()
    for method in (q.projected_face, q.base_cell, q.leading_non_zero_digit, q.is_pentagon):
        with pytest.raises(UnresolvableCellError):
            method("missing")
    with pytest.raises(UnresolvableCellError):
        q.projected_face(["not", "hashable"])


def test_unknown_base_cell():
    q = _query()
    for method in (q.is_base_cell_pentagon, q.is_polar_pentagon, q.base_cell_home_face):
        with pytest.raises(UnresolvableCellError):
            method(0)
    with pytest.raises(UnresolvableCellError):
        q.intrinsic_rotation(0, 3)


def test_face_not_touched():
    with pytest.raises(UnresolvableCellError, match="face 9"):
        _query().intrinsic_rotation(7, 9)


def test_unresolvable_is_a_lookup_error():
    with pytest.raises(LookupError):
        _query().base_cell("missing")


# --- validation ---

@pytest.mark.parametrize("base_cells, cells", [
    ({122: BaseCellRecord(home_face=0, rotations={})}, {}),
    ({-1: BaseCellRecord(home_face=0, rotations={})}, {}),
    ({0: BaseCellRecord(home_face=20, rotations={})}, {}),
    ({0: BaseCellRecord(home_face=0, rotations={-1: 0})}, {}),
    ({0: BaseCellRecord(home_face=0, rotations={1: 6})}, {}),
    ({0: BaseCellRecord(home_face=0, rotations={1: -1})}, {}),
    # Not one of the twelve pentagons.
    ({0: BaseCellRecord(home_face=0, rotations={}, is_pentagon=True)}, {}),
    ({0: BaseCellRecord(home_face=0, rotations={}, is_polar=True)}, {}),
    ({0: BaseCellRecord(home_face=0, rotations={})}, {"a": CellRecord(face=20, base_cell=0)}),
    ({0: BaseCellRecord(home_face=0, rotations={})}, {"a": CellRecord(face=0, base_cell=1)}),
    ({0: BaseCellRecord(home_face=0, rotations={})},
     {"a": CellRecord(face=0, base_cell=0, digits=(1, 7))}),
])
def test_bad_records(base_cells, cells):
    with pytest.raises(ValueError):
        StaticCellQuery(base_cells, cells)
