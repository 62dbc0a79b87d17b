"""Weather forecast storage record."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import datetime

# The all-zero identifier is never assigned by the store
EMPTY_ID = uuid.UUID(int=0)


@dataclass
class ForecastDraft:
    """Mutable fields of a forecast, as supplied by a client."""

    date: datetime
    temperature_c: int
    summary: str | None = None


@dataclass
class Forecast:
    """A stored weather forecast. The id is assigned by the store."""

    id: uuid.UUID
    date: datetime
    temperature_c: int
    summary: str | None = None

    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)

    def copy(self) -> Forecast:
        return replace(self)

    def apply(self, draft: ForecastDraft) -> None:
        """Overwrite the mutable fields in place, keeping the identity."""
        self.date = draft.date
        self.temperature_c = draft.temperature_c
        self.summary = draft.summary
