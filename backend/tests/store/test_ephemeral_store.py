"""Tests for the ephemeral forecast store"""

import random
import threading
import uuid
from datetime import UTC, datetime, timedelta

import pytest
from forecast_api.models.forecast import EMPTY_ID, Forecast, ForecastDraft
from forecast_api.store import (
    DEFAULT_SLIDING_EXPIRATION,
    SUMMARIES,
    EphemeralForecastStore,
    StoreOutcome,
)


def snapshot_of(store: EphemeralForecastStore) -> list[tuple]:
    return [
        (record.id, record.date, record.temperature_c, record.summary)
        for record in store.list_forecasts()
    ]


class TestSeeding:
    """Test suite for lazily seeded snapshots"""

    def test_first_list_seeds_five_forecasts(self, store, clock):
        """Test that the first read materializes five records"""
        # Act
        result = store.list_forecasts()

        # Assert
        assert len(result) == 5
        assert len({record.id for record in result}) == 5
        for index, record in enumerate(result, start=1):
            assert record.date == clock.now + timedelta(days=index)
            assert -20 <= record.temperature_c < 55
            assert record.summary in SUMMARIES
            assert record.id != EMPTY_ID

    def test_consecutive_lists_return_same_snapshot(self, store, clock):
        """Test that reads within the window do not regenerate"""
        # Arrange
        first = snapshot_of(store)
        clock.advance(DEFAULT_SLIDING_EXPIRATION - timedelta(seconds=1))

        # Act
        second = snapshot_of(store)

        # Assert
        assert first == second

    def test_snapshot_regenerated_after_idle_window(self, store, clock):
        """Test that an expired snapshot is replaced by five fresh records"""
        # Arrange
        first_ids = {record.id for record in store.list_forecasts()}
        clock.advance(DEFAULT_SLIDING_EXPIRATION)

        # Act
        result = store.list_forecasts()

        # Assert
        assert len(result) == 5
        assert first_ids.isdisjoint(record.id for record in result)

    def test_reads_slide_the_expiry_window(self, store, clock):
        """Test that every read pushes the deadline forward"""
        # Arrange
        first = snapshot_of(store)

        # Act - three reads, each just inside the window of the previous one
        for _ in range(3):
            clock.advance(DEFAULT_SLIDING_EXPIRATION - timedelta(seconds=1))
            assert snapshot_of(store) == first

    def test_writes_slide_the_expiry_window(self, store, clock):
        """Test that a write also pushes the deadline forward"""
        # Arrange
        store.list_forecasts()
        clock.advance(DEFAULT_SLIDING_EXPIRATION - timedelta(seconds=1))
        created = store.create(ForecastDraft(date=clock.now, temperature_c=3))
        clock.advance(DEFAULT_SLIDING_EXPIRATION - timedelta(seconds=1))

        # Act
        result = store.get_by_id(created.id)

        # Assert
        assert result is not None

    def test_created_records_lost_after_expiry(self, store, clock):
        """Test that data does not outlive the idle window"""
        # Arrange
        created = store.create(ForecastDraft(date=clock.now, temperature_c=3))
        clock.advance(DEFAULT_SLIDING_EXPIRATION + timedelta(minutes=1))

        # Act
        result = store.get_by_id(created.id)

        # Assert
        assert result is None
        assert len(store.list_forecasts()) == 5

    def test_custom_sliding_expiration(self, clock):
        """Test a store configured with a shorter window"""
        # Arrange
        store = EphemeralForecastStore(
            sliding_expiration=timedelta(seconds=10), clock=clock
        )
        first = snapshot_of(store)
        clock.advance(timedelta(seconds=10))

        # Act
        second = snapshot_of(store)

        # Assert
        assert {row[0] for row in first}.isdisjoint(row[0] for row in second)

    def test_rejects_non_positive_window(self):
        """Test that a zero window is refused"""
        with pytest.raises(ValueError):
            EphemeralForecastStore(sliding_expiration=timedelta(0))

    def test_default_clock_is_timezone_aware(self):
        """Test that the default store dates its seed records in UTC"""
        store = EphemeralForecastStore(rng=random.Random(0))

        result = store.list_forecasts()

        assert all(record.date.tzinfo is not None for record in result)


class TestGetById:
    """Test suite for single record lookup"""

    def test_get_existing(self, store):
        """Test that a seeded record can be found"""
        # Arrange
        target = store.list_forecasts()[2]

        # Act
        result = store.get_by_id(target.id)

        # Assert
        assert result == target

    def test_get_unknown_returns_none(self, store):
        """Test that an unknown id is not found"""
        assert store.get_by_id(uuid.uuid4()) is None

    def test_get_empty_id_returns_none(self, store):
        """Test that the empty id never matches"""
        assert store.get_by_id(EMPTY_ID) is None

    def test_returned_records_are_copies(self, store):
        """Test that mutating a returned record does not touch the snapshot"""
        # Arrange
        target = store.list_forecasts()[0]
        target.summary = "changed outside the store"

        # Act
        result = store.get_by_id(target.id)

        # Assert
        assert result is not None
        assert result.summary != "changed outside the store"


class TestCreate:
    """Test suite for record creation"""

    def test_create_then_get_round_trip(self, store):
        """Test that a created record is retrievable with the same fields"""
        # Arrange
        date = datetime(2026, 12, 24, 9, 0, tzinfo=UTC)
        draft = ForecastDraft(date=date, temperature_c=20, summary="mild")

        # Act
        created = store.create(draft)
        result = store.get_by_id(created.id)

        # Assert
        assert result is not None
        assert result.id == created.id
        assert result.id != EMPTY_ID
        assert (result.date, result.temperature_c, result.summary) == (
            date,
            20,
            "mild",
        )

    def test_create_appends_to_snapshot(self, store):
        """Test that a created record is added after the seed records"""
        # Arrange
        before = store.list_forecasts()

        # Act
        created = store.create(ForecastDraft(date=before[0].date, temperature_c=1))

        # Assert
        after = store.list_forecasts()
        assert len(after) == len(before) + 1
        assert after[-1].id == created.id

    def test_create_assigns_unique_ids(self, store, clock):
        """Test that every created record gets a new id"""
        ids = {
            store.create(ForecastDraft(date=clock.now, temperature_c=n)).id
            for n in range(10)
        }

        assert len(ids) == 10


class TestUpdate:
    """Test suite for record updates"""

    def test_update_replaces_fields_and_keeps_position(self, store, clock):
        """Test that an update keeps identity and position"""
        # Arrange
        before = store.list_forecasts()
        target = before[1]
        edited = Forecast(
            id=target.id, date=clock.now, temperature_c=-5, summary="freezing"
        )

        # Act
        outcome = store.update(target.id, edited)

        # Assert
        assert outcome is StoreOutcome.OK
        after = store.list_forecasts()
        assert [record.id for record in after] == [record.id for record in before]
        assert after[1] == edited

    def test_update_mismatched_id_is_bad_request(self, store, clock):
        """Test that mismatched ids are rejected without touching the store"""
        # Arrange
        before = snapshot_of(store)
        target_id = before[0][0]
        edited = Forecast(id=uuid.uuid4(), date=clock.now, temperature_c=0)

        # Act
        outcome = store.update(target_id, edited)

        # Assert
        assert outcome is StoreOutcome.BAD_REQUEST
        assert snapshot_of(store) == before

    def test_update_unknown_id_is_not_found(self, store, clock):
        """Test that updating a missing record reports NOT_FOUND"""
        # Arrange
        before = snapshot_of(store)
        missing = uuid.uuid4()

        # Act
        outcome = store.update(
            missing, Forecast(id=missing, date=clock.now, temperature_c=0)
        )

        # Assert
        assert outcome is StoreOutcome.NOT_FOUND
        assert snapshot_of(store) == before


class TestDelete:
    """Test suite for record deletion"""

    def test_delete_existing(self, store):
        """Test that a deleted record disappears"""
        # Arrange
        target = store.list_forecasts()[0]

        # Act
        outcome = store.delete(target.id)

        # Assert
        assert outcome is StoreOutcome.OK
        assert store.get_by_id(target.id) is None
        assert len(store.list_forecasts()) == 4

    def test_delete_unknown_is_not_found(self, store):
        """Test that deleting a missing record leaves the count unchanged"""
        # Arrange
        count = len(store.list_forecasts())

        # Act
        outcome = store.delete(uuid.uuid4())

        # Assert
        assert outcome is StoreOutcome.NOT_FOUND
        assert len(store.list_forecasts()) == count

    def test_create_get_delete_scenario(self, store):
        """Test the full lifecycle of a single record"""
        # Arrange
        date = datetime(2026, 10, 21, tzinfo=UTC)

        # Act
        created = store.create(
            ForecastDraft(date=date, temperature_c=20, summary="mild")
        )
        found = store.get_by_id(created.id)
        outcome = store.delete(created.id)

        # Assert
        assert found is not None
        assert (found.summary, found.temperature_c, found.date) == ("mild", 20, date)
        assert outcome is StoreOutcome.OK
        assert store.get_by_id(created.id) is None


class TestConcurrency:
    """Test suite for concurrent writers"""

    def test_concurrent_creates_are_not_lost(self, store, clock):
        """Test that parallel read-modify-write cycles do not overwrite each other"""
        # Arrange
        store.list_forecasts()
        per_thread = 50

        def worker() -> None:
            for n in range(per_thread):
                store.create(ForecastDraft(date=clock.now, temperature_c=n))

        threads = [threading.Thread(target=worker) for _ in range(8)]

        # Act
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # Assert
        assert len(store.list_forecasts()) == 5 + 8 * per_thread
