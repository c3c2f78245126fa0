"""
Intensity List (Data Model)
===========================
This module defines the stateful owner of a breakpoint sequence.

Why is this file needed?
------------------------
1. State Management: It holds the current breakpoints in one place and is the
   only thing allowed to replace them.
2. Diagnostics: The engine in breakpoints.py returns rejections as values;
   this class reports them on the package logger and keeps the old state.
3. Evaluation: It exposes the step function to numpy and matplotlib callers.

Classes:
    IntensityList: The manager of a piecewise-constant intensity function.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, TYPE_CHECKING

import numpy as np

from intensitylist import config
from intensitylist.model.breakpoints import (
    Breakpoint,
    UpdateMode,
    apply_update,
    check_positions,
    is_scalar,
    normalize,
    validate,
)
from intensitylist.model.results import Updated, UpdateResult

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.axes import Axes

logger = logging.getLogger(__name__)


class IntensityList:
    """
    Piecewise-constant intensity over the real line.

    Stored as breakpoints (position, intensity); the intensity is 0 before
    the first breakpoint and from the last one onwards.
    Not thread-safe: callers must serialize access to one instance.
    """

    def __init__(self) -> None:
        self._breakpoints: List[Breakpoint] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def breakpoints(self) -> List[Breakpoint]:
        """Copy of the current breakpoints, ordered by position."""
        return list(self._breakpoints)

    def __len__(self) -> int:
        return len(self._breakpoints)

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(list(self._breakpoints))

    def __bool__(self) -> bool:
        return bool(self._breakpoints)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntensityList):
            return NotImplemented
        return self._breakpoints == other._breakpoints

    def __repr__(self) -> str:
        pairs = ", ".join(f"[{p!r}, {v!r}]" for p, v in self._breakpoints)
        return f"IntensityList([{pairs}])"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def apply(
        self,
        start: Any,
        end: Any,
        amount: Any,
        mode: UpdateMode | str = UpdateMode.ADD,
    ) -> UpdateResult:
        """
        Apply a range update and return its result.

        On rejection the state is left untouched and the reason is logged
        at ERROR level.
        """
        result = apply_update(self._breakpoints, start, end, amount, mode)
        if isinstance(result, Updated):
            logger.debug(f"{mode} [{start}, {end}) by {amount}: {len(result.breakpoints)} breakpoints.")
            self._breakpoints = list(result.breakpoints)
        else:
            logger.error(result.message)
        return result

    def update(
        self,
        start: Any,
        end: Any,
        amount: Any,
        mode: UpdateMode | str = UpdateMode.ADD,
    ) -> List[Breakpoint]:
        """
        Add `amount` to, or set it over, the range [start, end).

        Args:
            start: Inclusive start of the range.
            end: Exclusive end of the range.
            amount: Delta for ADD, target value for SET.
            mode: UpdateMode or "add" / "set".

        Returns:
            The current breakpoints. Invalid input is logged and leaves them
            unchanged, so compare states (or use apply()) to detect rejection.
        """
        self.apply(start, end, amount, mode)
        return self.breakpoints

    def add(self, start: Any, end: Any, amount: Any) -> List[Breakpoint]:
        return self.update(start, end, amount, UpdateMode.ADD)

    def set(self, start: Any, end: Any, amount: Any) -> List[Breakpoint]:
        return self.update(start, end, amount, UpdateMode.SET)

    def clear(self) -> None:
        self._breakpoints = []

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------
    def to_arrays(self) -> tuple[npt.NDArray[Any], npt.NDArray[Any]]:
        """
        Positions and intensities as two numpy arrays.

        Positions that are not real numbers (datetime, Decimal, ...) are kept
        in an object array so they compare as themselves.
        """
        raw_positions = [bp.position for bp in self._breakpoints]
        dtype = None if all(is_scalar(p) for p in raw_positions) else object
        positions = np.array(raw_positions, dtype=dtype)
        intensities = np.array([bp.intensity for bp in self._breakpoints])
        return positions, intensities

    def intensity_at(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[Any]:
        """
        Evaluate the step function.

        Args:
            x: Position(s), scalar or array.

        Returns:
            Intensity at x, with the same shape as x.
        """
        positions, intensities = self.to_arrays()
        x_arr = np.asarray(x)
        if positions.size == 0:
            values = np.zeros(x_arr.shape)
        else:
            # Index of the last breakpoint at or before x
            idx = np.searchsorted(positions, x_arr, side="right") - 1
            values = np.where(idx >= 0, intensities[np.clip(idx, 0, None)], 0)
        if np.ndim(x) == 0:
            return values.item()
        return values

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, List[Any]]:
        return {
            config.POSITIONS_KEY: [bp.position for bp in self._breakpoints],
            config.INTENSITIES_KEY: [bp.intensity for bp in self._breakpoints],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> IntensityList:
        """
        Build an IntensityList from the output of to_dict().

        Positions are checked on the raw data, then the breakpoints are
        normalized and checked again.

        Raises:
            ValueError: If the keys are missing, the lists differ in length
                        or the breakpoints break an invariant.
        """
        try:
            positions = list(data[config.POSITIONS_KEY])
            intensities = list(data[config.INTENSITIES_KEY])
        except KeyError as e:
            raise ValueError(f"Missing key {e} in intensity data.") from e

        if len(positions) != len(intensities):
            raise ValueError(
                f"Got {len(positions)} positions but {len(intensities)} intensities."
            )

        check_positions(positions)
        breakpoints = normalize(zip(positions, intensities))
        validate(breakpoints)

        intensity_list = IntensityList()
        intensity_list._breakpoints = breakpoints
        logger.debug(f"Loaded {len(breakpoints)} breakpoints.")
        return intensity_list

    def plot(self, ax: Optional[Axes] = None, **kwargs: Any) -> Axes:
        """Draw the step function, see intensitylist.plotting.plot_intensity."""
        from intensitylist.plotting import plot_intensity

        return plot_intensity(self, ax=ax, **kwargs)
