"""A single cell of the month grid."""

from __future__ import annotations

import datetime
import uuid
from dataclasses import dataclass, field

_READ_ONLY = frozenset({"date", "is_current_month", "is_today", "id"})


@dataclass(eq=False)
class CalendarDay:
    """One displayed day: its date plus three independent display flags.

    The flags are taken verbatim from whoever builds the grid. Nothing here
    reads a clock, so ``is_today`` is only as fresh as the builder's "now".
    Only ``is_selected`` may be reassigned, by the owning grid; the other
    fields are fixed once set.
    """

    date: datetime.date
    is_current_month: bool
    is_today: bool
    is_selected: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4, repr=False)

    def __setattr__(self, name: str, value) -> None:
        if name in _READ_ONLY and name in self.__dict__:
            raise AttributeError(f"CalendarDay.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in _READ_ONLY:
            raise AttributeError(f"CalendarDay.{name} is read-only")
        super().__delattr__(name)

    def number(self) -> str:
        """Return the day of month as shown in the cell ("7", not "07")."""
        return str(self.date.day)

    # Cells are identified by id, not by date: the same date may appear in
    # two grids, and a cell stays the same cell when its flags change.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDay):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
