from datetime import date

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.models.user import User
from app.store import BookingStore
from app.utils.exceptions import StoreError


async def _book(store, vehicle_id, start, end, first_name="Jane", last_name="Doe"):
    user = await store.create_user(first_name, last_name)
    return await store.create_booking(user.id, vehicle_id, start, end)


@pytest.mark.asyncio
async def test_find_user_exact_match(db_session, catalog):
    store = BookingStore(db_session)

    user = await store.find_user("Alister", "Hosamani")
    assert user is not None
    assert user.first_name == "Alister"

    assert await store.find_user("alister", "hosamani") is None
    assert await store.find_user("Alister", "Someone") is None


@pytest.mark.asyncio
async def test_create_user_reuses_existing_name_pair(db_session):
    store = BookingStore(db_session)

    first = await store.create_user("Jane", "Doe")
    second = await store.create_user("Jane", "Doe")

    assert first.id == second.id
    count = await db_session.scalar(select(func.count()).select_from(User))
    assert count == 1


@pytest.mark.asyncio
async def test_lock_vehicle_reports_existence(db_session, catalog):
    store = BookingStore(db_session)

    assert await store.lock_vehicle(catalog["vehicles"]["Honda City"]) is True
    assert await store.lock_vehicle(999) is False


@pytest.mark.asyncio
async def test_create_booking_round_trips_dates(db_session, catalog):
    store = BookingStore(db_session)
    vehicle_id = catalog["vehicles"]["Honda City"]

    booking = await _book(store, vehicle_id, date(2024, 1, 10), date(2024, 1, 15))

    assert booking.id is not None
    found = await store.find_overlapping_booking(vehicle_id, date(2024, 1, 12), date(2024, 1, 12))
    assert found.id == booking.id
    assert found.start_date == date(2024, 1, 10)
    assert found.end_date == date(2024, 1, 15)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "start,end,conflicts",
    [
        (date(2024, 1, 15), date(2024, 1, 20), True),   # starts on the last day
        (date(2024, 1, 5), date(2024, 1, 10), True),    # ends on the first day
        (date(2024, 1, 11), date(2024, 1, 13), True),   # inside
        (date(2024, 1, 1), date(2024, 1, 31), True),    # covers
        (date(2024, 1, 10), date(2024, 1, 15), True),   # identical
        (date(2024, 1, 16), date(2024, 1, 20), False),  # day after
        (date(2024, 1, 1), date(2024, 1, 9), False),    # day before
    ],
)
async def test_find_overlapping_booking_closed_intervals(db_session, catalog, start, end, conflicts):
    store = BookingStore(db_session)
    vehicle_id = catalog["vehicles"]["Hyundai Creta"]
    await _book(store, vehicle_id, date(2024, 1, 10), date(2024, 1, 15))

    found = await store.find_overlapping_booking(vehicle_id, start, end)

    assert (found is not None) is conflicts


@pytest.mark.asyncio
async def test_find_overlapping_booking_ignores_other_vehicles(db_session, catalog):
    store = BookingStore(db_session)
    await _book(store, catalog["vehicles"]["Hyundai Creta"], date(2024, 1, 10), date(2024, 1, 15))

    found = await store.find_overlapping_booking(
        catalog["vehicles"]["Toyota Fortuner"], date(2024, 1, 10), date(2024, 1, 15)
    )

    assert found is None


@pytest.mark.asyncio
async def test_list_vehicle_types_filters_by_wheel_count(db_session, catalog):
    store = BookingStore(db_session)

    four = await store.list_vehicle_types(4)
    two = await store.list_vehicle_types(2)

    assert {t.name for t in four} == {"SUV", "Sedan", "Hatchback"}
    assert all(t.wheel_count == 4 for t in four)
    assert [t.name for t in two] == ["Cruiser"]


@pytest.mark.asyncio
async def test_list_vehicles_filters_by_type(db_session, catalog):
    store = BookingStore(db_session)

    suvs = await store.list_vehicles(catalog["types"]["SUV"])

    assert {v.model_name for v in suvs} == {"Hyundai Creta", "Toyota Fortuner"}
    assert await store.list_vehicles(999) == []


@pytest.mark.asyncio
async def test_driver_errors_become_store_error():
    class LockedSession:
        async def execute(self, *args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    store = BookingStore(LockedSession())

    with pytest.raises(StoreError) as exc_info:
        await store.find_user("Jane", "Doe")
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_transaction_rolls_back_on_error(session_maker, catalog):
    vehicle_id = catalog["vehicles"]["Honda City"]

    async with session_maker() as session:
        store = BookingStore(session)
        with pytest.raises(RuntimeError):
            async with store.transaction():
                await _book(store, vehicle_id, date(2024, 2, 1), date(2024, 2, 3), "Temp", "Renter")
                raise RuntimeError("abort")

    async with session_maker() as session:
        store = BookingStore(session)
        assert await store.find_user("Temp", "Renter") is None
        assert await store.find_overlapping_booking(vehicle_id, date(2024, 2, 1), date(2024, 2, 3)) is None
