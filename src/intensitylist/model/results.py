"""
Update Results
==============
Explicit outcome values returned by the mutation engine.

A rejected update is not an exception: the engine returns one of the
UpdateRejected subclasses and leaves the decision (log, ignore, escalate)
to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from intensitylist.model.breakpoints import Breakpoint


@dataclass(frozen=True)
class Updated:
    """The update was accepted. Holds the resulting breakpoints."""
    breakpoints: List[Breakpoint] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class UpdateRejected:
    """Base class for rejected updates."""
    message: str

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{type(self).__name__}: {self.message}"


@dataclass(frozen=True)
class InvalidRange(UpdateRejected):
    """`to < from`, or a bound that is not an orderable scalar."""


@dataclass(frozen=True)
class InvalidMode(UpdateRejected):
    """Mode is neither 'add' nor 'set'."""


@dataclass(frozen=True)
class InvalidAmount(UpdateRejected):
    """Amount is not a real number."""


UpdateResult = Union[Updated, InvalidRange, InvalidMode, InvalidAmount]
