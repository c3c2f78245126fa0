"""
intensitylist
=============
Piecewise-constant intensity functions with range add/set updates.
"""
from intensitylist.model.breakpoints import Breakpoint, UpdateMode, apply_update, normalize, validate
from intensitylist.model.intensity_list import IntensityList
from intensitylist.model.results import (
    InvalidAmount,
    InvalidMode,
    InvalidRange,
    Updated,
    UpdateRejected,
    UpdateResult,
)

__all__ = [
    "Breakpoint",
    "IntensityList",
    "InvalidAmount",
    "InvalidMode",
    "InvalidRange",
    "Updated",
    "UpdateMode",
    "UpdateRejected",
    "UpdateResult",
    "apply_update",
    "normalize",
    "validate",
]
