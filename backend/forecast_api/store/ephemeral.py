"""Ephemeral forecast store.

The store emulates a database with a single cache slot:
- The slot holds the whole snapshot (an ordered list of forecasts) and a deadline
- An empty or expired slot is re-seeded with five random forecasts on next access
- Every read and every write pushes the deadline forward (sliding expiration)
- Every write stores the entire snapshot back into the slot

Nothing survives a restart, nothing is shared across processes, and all data is
lost once the sliding window elapses without any access.

Error Handling:
- Operations never raise for missing records or mismatched identifiers
- get_by_id returns None, update/delete return a StoreOutcome
- The API layer maps outcomes to HTTP status codes
"""

from __future__ import annotations

import enum
import logging
import random
import threading
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from forecast_api.models.forecast import EMPTY_ID, Forecast, ForecastDraft

logger = logging.getLogger(__name__)

SUMMARIES = (
    "freezing",
    "bracing",
    "chilly",
    "cool",
    "mild",
    "warm",
    "balmy",
    "hot",
    "sweltering",
    "scorching",
)

SEED_SIZE = 5
# randrange bounds: lower inclusive, upper exclusive
SEED_TEMPERATURE_RANGE = (-20, 55)

DEFAULT_SLIDING_EXPIRATION = timedelta(minutes=5)


class StoreOutcome(enum.Enum):
    """Result of a store write."""

    OK = "ok"
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"


@dataclass
class _CacheEntry:
    records: list[Forecast]
    deadline: datetime


def _utcnow() -> datetime:
    return datetime.now(UTC)


class EphemeralForecastStore:
    """CRUD over a single sliding-expiration snapshot of forecasts.

    Each operation runs its whole load -> mutate -> store cycle under one lock,
    so concurrent writers never overwrite each other's changes.

    Args:
        sliding_expiration: Idle time after which the snapshot is discarded
        clock: Returns the current (timezone-aware) time
        rng: Random source used to seed fresh snapshots
    """

    def __init__(
        self,
        sliding_expiration: timedelta = DEFAULT_SLIDING_EXPIRATION,
        clock: Callable[[], datetime] = _utcnow,
        rng: random.Random | None = None,
    ) -> None:
        if sliding_expiration <= timedelta(0):
            raise ValueError("sliding_expiration must be positive")
        self.sliding_expiration = sliding_expiration
        self._clock = clock
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._entry: _CacheEntry | None = None

    # ------------------------------------------------------------------
    # Cache slot
    # ------------------------------------------------------------------

    def _seed(self, now: datetime) -> list[Forecast]:
        low, high = SEED_TEMPERATURE_RANGE
        return [
            Forecast(
                id=uuid.uuid4(),
                date=now + timedelta(days=index),
                temperature_c=self._rng.randrange(low, high),
                summary=self._rng.choice(SUMMARIES),
            )
            for index in range(1, SEED_SIZE + 1)
        ]

    def _load(self) -> list[Forecast]:
        """Return the live snapshot, seeding it when absent or expired. Caller holds the lock."""
        now = self._clock()
        if self._entry is None or now >= self._entry.deadline:
            if self._entry is not None:
                logger.info("Forecast snapshot expired, seeding a fresh one")
            else:
                logger.info("Seeding forecast snapshot")
            self._entry = _CacheEntry(records=self._seed(now), deadline=now)
        self._entry.deadline = now + self.sliding_expiration
        return self._entry.records

    def _save(self, records: list[Forecast]) -> None:
        """Store the whole snapshot with a renewed deadline. Caller holds the lock."""
        self._entry = _CacheEntry(
            records=records, deadline=self._clock() + self.sliding_expiration
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list_forecasts(self) -> list[Forecast]:
        """Return a copy of the current snapshot."""
        with self._lock:
            return [record.copy() for record in self._load()]

    def get_by_id(self, forecast_id: uuid.UUID) -> Forecast | None:
        """Return the forecast with the given id, or None.

        The empty id never matches a record.
        """
        with self._lock:
            records = self._load()
            if forecast_id == EMPTY_ID:
                return None
            record = _find(records, forecast_id)
            return record.copy() if record is not None else None

    def create(self, draft: ForecastDraft) -> Forecast:
        """Add a forecast under a freshly generated id and return it."""
        with self._lock:
            records = self._load()
            record = Forecast(
                id=uuid.uuid4(),
                date=draft.date,
                temperature_c=draft.temperature_c,
                summary=draft.summary,
            )
            records.append(record)
            self._save(records)
            logger.debug(f"Created forecast {record.id}")
            return record.copy()

    def update(self, forecast_id: uuid.UUID, forecast: Forecast) -> StoreOutcome:
        """Replace the mutable fields of an existing forecast.

        The record keeps its id and its position in the snapshot.

        Returns:
            BAD_REQUEST if forecast_id differs from forecast.id,
            NOT_FOUND if no record has that id, OK otherwise
        """
        if forecast_id != forecast.id:
            return StoreOutcome.BAD_REQUEST
        with self._lock:
            records = self._load()
            record = _find(records, forecast_id)
            if record is None:
                return StoreOutcome.NOT_FOUND
            record.apply(forecast)
            self._save(records)
            logger.debug(f"Updated forecast {forecast_id}")
            return StoreOutcome.OK

    def delete(self, forecast_id: uuid.UUID) -> StoreOutcome:
        """Remove a forecast. Returns NOT_FOUND when it does not exist."""
        with self._lock:
            records = self._load()
            record = _find(records, forecast_id)
            if record is None:
                return StoreOutcome.NOT_FOUND
            records.remove(record)
            self._save(records)
            logger.debug(f"Deleted forecast {forecast_id}")
            return StoreOutcome.OK


def _find(records: list[Forecast], forecast_id: uuid.UUID) -> Forecast | None:
    return next((record for record in records if record.id == forecast_id), None)
