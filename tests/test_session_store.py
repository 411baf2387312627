"""Unit tests for the in-memory ride session store."""

from ridemock.config import Settings
from ridemock.domain.entities import RideSession
from ridemock.domain.enums import RideStatus
from ridemock.infrastructure.session_store import RideSessionStore


def _store() -> RideSessionStore:
    return RideSessionStore(Settings(booking_delay_seconds=0))


def test_default_session_exists_before_any_booking():
    store = _store()
    assert store.current.status == RideStatus.DRIVER_ASSIGNED
    assert store.get_or_create() is store.current
    assert len(store) == 0


def test_create_makes_booking_current():
    store = _store()
    ride = store.create("book_1")
    assert store.current is ride
    assert "book_1" in store
    assert store.get_or_create("book_1") is ride


def test_unknown_booking_gets_fresh_session_without_becoming_current():
    store = _store()
    booked = store.create("book_1")
    other = store.get_or_create("book_unknown")
    assert other is not booked
    assert other.status == RideStatus.DRIVER_ASSIGNED
    assert store.current is booked


def test_sessions_advance_independently():
    store = _store()
    first = store.create("book_1")
    second = store.create("book_2")
    for _ in range(3):
        first.advance()
    assert first.status == RideStatus.DRIVER_ARRIVED
    assert second.status == RideStatus.DRIVER_ASSIGNED


def test_reset_targets_current_by_default():
    store = _store()
    ride = store.create("book_1")
    for _ in range(10):
        ride.advance()
    assert ride.status == RideStatus.COMPLETED
    assert store.reset() is ride
    assert ride.status == RideStatus.DRIVER_ASSIGNED


def test_location_comes_from_settings():
    store = RideSessionStore(Settings(mock_lat=1.5, mock_lng=2.5))
    snap = store.create("book_1").current()
    assert (snap.location.lat, snap.location.lng) == (1.5, 2.5)


def test_unknown_ids_do_not_grow_booking_map():
    store = _store()
    store.create("book_1")
    for i in range(50):
        store.get_or_create(f"junk{i}").advance()
    assert len(store) == 1
    assert "junk0" not in store


def test_unbooked_sessions_are_capped_lru():
    store = RideSessionStore(Settings(max_unbooked_sessions=5))
    for i in range(50):
        store.get_or_create(f"junk{i}")
    assert store.unbooked_count == 5


def test_unbooked_session_keeps_progress_while_cached():
    store = _store()
    for _ in range(3):
        store.get_or_create("walk_up").advance()
    assert store.get_or_create("walk_up").status == RideStatus.DRIVER_ARRIVED


def test_booking_an_unbooked_id_moves_it_to_booking_map():
    store = _store()
    store.get_or_create("book_9")
    store.create("book_9")
    assert "book_9" in store
    assert store.unbooked_count == 0


def test_booking_id_format():
    booking_id = _store().new_booking_id()
    assert booking_id.startswith("book_")
    assert booking_id[len("book_"):].isdigit()


def test_booking_ids_are_unique():
    store = _store()
    ids = {store.new_booking_id() for _ in range(50)}
    assert len(ids) == 50


def test_default_location_matches_settings_default():
    snap = RideSession().current()
    settings = Settings()
    assert (snap.location.lat, snap.location.lng) == (settings.mock_lat, settings.mock_lng)
