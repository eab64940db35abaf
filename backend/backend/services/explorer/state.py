from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ALL = "all"


@dataclass
class FilterState:
    era: str = ALL
    focus: str = ALL
    active_project_id: Optional[str] = None

    def reset(self) -> None:
        self.era = ALL
        self.focus = ALL


@dataclass(frozen=True)
class FilterOptions:
    eras: tuple[str, ...]
    focuses: tuple[str, ...]

    def as_dict(self) -> dict:
        return {"eras": [ALL, *self.eras], "focuses": [ALL, *self.focuses]}
