from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CalOptions:
    """Display options of the month calendar (one per CLI invocation)."""
    monday_first: bool = False
    three: bool = False
    year: bool = False
    twelve: bool = False
    months: Optional[int] = None
    highlight: bool = True

    def __post_init__(self) -> None:
        if self.months is not None and self.months < 1:
            raise ValueError("months must be a positive number")
