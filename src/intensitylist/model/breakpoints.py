"""
Breakpoint Engine
=================
Pure functions that apply range updates to a sorted breakpoint sequence.

A breakpoint (position, intensity) means "the intensity is `intensity` for
every x in [position, next position)". Before the first breakpoint, and
everywhere for an empty sequence, the intensity is 0.

Every function here works on copies: the input sequence is never mutated and
nothing is logged. Rejected input is reported through the result types in
intensitylist.model.results.

Invariants of a normalized sequence:
    1. Positions are strictly increasing.
    2. The sequence is empty or its last intensity is 0.
    3. No two consecutive breakpoints share an intensity.
"""
from __future__ import annotations

import numbers
from bisect import bisect_left
from enum import StrEnum
from operator import itemgetter
from typing import Any, Iterable, List, NamedTuple

import numpy as np

from intensitylist.model.results import (
    InvalidAmount,
    InvalidMode,
    InvalidRange,
    Updated,
    UpdateResult,
)


class UpdateMode(StrEnum):
    ADD = "add"
    SET = "set"


class Breakpoint(NamedTuple):
    position: Any
    intensity: Any


# Working representation: mutable [position, intensity] pairs
_Points = List[List[Any]]

_position = itemgetter(0)


def is_scalar(value: Any) -> bool:
    """True for real numbers that can be ordered (no bools, no NaN)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return bool(value == value)


def is_position(value: Any) -> bool:
    """
    True for values usable as a breakpoint position.

    Numbers, Decimal, datetime and the like qualify: anything that equals
    itself and can be compared with `<`. Bools, None, NaN and containers
    do not.
    """
    if value is None or isinstance(value, (bool, np.bool_)) or np.ndim(value) != 0:
        return False
    try:
        return bool(value == value) and not bool(value < value)
    except (TypeError, ValueError, ArithmeticError):
        return False


def _comparable(a: Any, b: Any) -> bool:
    try:
        a < b
    except TypeError:
        return False
    return True


def check_positions(positions: Iterable[Any]) -> None:
    """
    Check that positions are valid and strictly increasing.

    Raises:
        ValueError: On the first bad or out-of-order position.
    """
    previous = None
    for i, position in enumerate(positions):
        if not is_position(position):
            raise ValueError(f"Breakpoint #{i} has an unorderable position {position!r}.")
        if i > 0 and not (_comparable(previous, position) and previous < position):
            raise ValueError(
                f"Positions must be strictly increasing: {previous!r} followed by {position!r}."
            )
        previous = position


def _thaw(breakpoints: Iterable[Iterable[Any]]) -> _Points:
    return [list(bp) for bp in breakpoints]


def _freeze(points: _Points) -> List[Breakpoint]:
    return [Breakpoint(position, intensity) for position, intensity in points]


def find_index(points: _Points, position: Any) -> int:
    """Index of the breakpoint at `position`, or -1 if there is none."""
    idx = bisect_left(points, position, key=_position)
    if idx < len(points) and points[idx][0] == position:
        return idx
    return -1


def ensure_breakpoint(points: _Points, position: Any) -> int:
    """
    Make sure a breakpoint exists at `position` and return its index.

    A new breakpoint inherits the intensity in effect at `position`, so the
    function described by `points` does not change. `points` must not be
    empty and is modified in place.
    """
    idx = find_index(points, position)
    if idx != -1:
        return idx

    if position < points[0][0]:
        points.insert(0, [position, 0])
        return 0

    if position > points[-1][0]:
        points.append([position, 0])
        return len(points) - 1

    idx = bisect_left(points, position, key=_position)
    points.insert(idx, [position, points[idx - 1][1]])
    return idx


def _add_over(points: _Points, start_idx: int, end_idx: int, amount: Any) -> None:
    for i in range(start_idx, end_idx):
        points[i][1] += amount
    # The tail always describes [last, +inf), which stays at zero
    points[-1][1] = 0


def _set_over(points: _Points, start_idx: int, end_idx: int, amount: Any) -> None:
    points[start_idx][1] = amount
    del points[start_idx + 1:end_idx]


def _normalize_in_place(points: _Points) -> None:
    # 1. Leading zeros carry no information
    lead = 0
    while lead < len(points) and points[lead][1] == 0:
        lead += 1
    del points[:lead]

    # 2. One trailing zero is enough to mark the return to 0
    while len(points) >= 2 and points[-1][1] == 0 and points[-2][1] == 0:
        points.pop()

    # 3. Consecutive duplicates, scanning from the end
    for i in range(len(points) - 1, 0, -1):
        if points[i][1] == points[i - 1][1]:
            del points[i]


def normalize(breakpoints: Iterable[Iterable[Any]]) -> List[Breakpoint]:
    """
    Trim leading zeros, collapse trailing zeros and drop consecutive
    duplicates. Returns a new list.
    """
    points = _thaw(breakpoints)
    _normalize_in_place(points)
    return _freeze(points)


def validate(breakpoints: Iterable[Iterable[Any]]) -> None:
    """
    Check the structural invariants.

    Raises:
        ValueError: On the first violated invariant.
    """
    points = _thaw(breakpoints)
    for i, point in enumerate(points):
        if len(point) != 2:
            raise ValueError(f"Breakpoint #{i} must be a (position, intensity) pair, got {point!r}.")
    check_positions(point[0] for point in points)

    for i, (position, intensity) in enumerate(points):
        if not is_scalar(intensity):
            raise ValueError(f"Breakpoint #{i} has a non-numeric intensity {intensity!r}.")
        if i == 0:
            continue
        previous = points[i - 1]
        if previous[1] == intensity:
            raise ValueError(f"Consecutive breakpoints at {previous[0]!r} and {position!r} share intensity {intensity!r}.")

    if points and points[-1][1] != 0:
        raise ValueError(f"Last breakpoint must have intensity 0, got {points[-1][1]!r}.")


def apply_update(
    breakpoints: Iterable[Iterable[Any]],
    start: Any,
    end: Any,
    amount: Any,
    mode: UpdateMode | str = UpdateMode.ADD,
) -> UpdateResult:
    """
    Apply one range update to a breakpoint sequence.

    Args:
        breakpoints: A normalized breakpoint sequence. Not modified.
        start: Inclusive start of the range.
        end: Exclusive end of the range.
        amount: Delta (ADD) or target value (SET).
        mode: UpdateMode or its string value ("add", "set").

    Returns:
        Updated with the new breakpoints, or a rejection describing why the
        input was refused. Rejections never compute a new state.
    """
    try:
        mode = UpdateMode(mode)
    except (ValueError, TypeError):
        return InvalidMode(f"Unknown update mode {mode!r}, expected one of: {', '.join(UpdateMode)}.")

    if not (is_position(start) and is_position(end) and _comparable(start, end)):
        return InvalidRange(f"Range bounds must be orderable values, got [{start!r}, {end!r}).")
    if end < start:
        return InvalidRange(f"Invalid range [{start!r}, {end!r}): end must not be lower than start.")

    points = _thaw(breakpoints)
    if points and not (_comparable(points[0][0], start) and _comparable(points[0][0], end)):
        return InvalidRange(
            f"Range [{start!r}, {end!r}) cannot be compared with the existing position {points[0][0]!r}."
        )

    if not is_scalar(amount):
        return InvalidAmount(f"Amount must be a real number, got {amount!r}.")

    if start == end:
        return Updated(_freeze(points))
    if mode is UpdateMode.ADD and amount == 0:
        return Updated(_freeze(points))

    if not points:
        points = [[start, amount], [end, 0]]
    else:
        start_idx = ensure_breakpoint(points, start)
        end_idx = ensure_breakpoint(points, end)
        if mode is UpdateMode.ADD:
            _add_over(points, start_idx, end_idx, amount)
        else:
            _set_over(points, start_idx, end_idx, amount)

    _normalize_in_place(points)
    return Updated(_freeze(points))
