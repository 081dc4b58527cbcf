import pytest
from pydantic import ValidationError

from hotel_reviews_api.app.schemas.hotel import HotelCreate
from hotel_reviews_api.app.schemas.user import UserUpsert
from hotel_reviews_api.app.storage import MemoryEntityStore, SQLiteEntityStore

from tests.factories import make_hotel, make_review, make_user


def test_lookups_return_none_when_missing(store):
    assert store.get_user("nobody") is None
    assert store.get_hotel(1) is None
    assert store.find_hotel_by_name_location("Grand", "Paris") is None
    assert store.list_hotels() == []
    assert store.list_reviews() == []


def test_upsert_user_keeps_created_at_and_refreshes_fields(store):
    first = make_user(store, "U1", email="a@example.com", first_name="Ada")
    second = store.upsert_user(UserUpsert(id="U1", email="b@example.com", last_name="King"))

    assert second.created_at == first.created_at
    assert second.updated_at >= first.updated_at
    assert second.email == "b@example.com"
    assert second.first_name is None
    assert second.last_name == "King"
    assert store.get_user("U1") == second


def test_hotel_ids_are_sequential_in_creation_order(store):
    hotels = [make_hotel(store, name=f"Hotel {i}") for i in range(5)]

    assert [hotel.id for hotel in hotels] == [1, 2, 3, 4, 5]
    assert [hotel.id for hotel in store.list_hotels()] == [1, 2, 3, 4, 5]
    assert store.get_hotel(3).name == "Hotel 2"


def test_create_hotel_sets_created_at(store):
    hotel = make_hotel(store)

    assert hotel.created_at is not None
    assert (hotel.name, hotel.location, hotel.latitude, hotel.longitude) == (
        "Grand",
        "Paris",
        "48.8",
        "2.3",
    )


def test_create_hotel_does_not_deduplicate(store):
    # Soft uniqueness is the repository's job; the store always inserts.
    first = make_hotel(store)
    second = make_hotel(store)
    assert first.id != second.id


def test_find_hotel_by_name_location_ignores_case(store):
    hotel = make_hotel(store, name="Grand Hôtel", location="Paris")
    make_hotel(store, name="Grand Hôtel", location="Lyon")

    assert store.find_hotel_by_name_location("GRAND HÔTEL", "paris").id == hotel.id
    assert store.find_hotel_by_name_location("Grand", "Paris") is None
    assert store.find_hotel_by_name_location("Grand Hôtel", "Nice") is None


def test_create_review_assigns_defaults(store):
    make_user(store)
    hotel = make_hotel(store)

    review = make_review(store, hotel.id, user_id="U1", rating=4)

    assert review.id == 1
    assert review.user_id == "U1"
    assert review.hotel_id == hotel.id
    assert review.rating == 4
    assert review.likes == 0
    assert review.comments == 0
    assert review.created_at is not None
    assert make_review(store, hotel.id).id == 2
    assert [r.id for r in store.list_reviews()] == [1, 2]


def test_create_review_accepts_dangling_references(store):
    review = make_review(store, hotel_id=99, user_id="ghost")
    assert store.list_reviews() == [review]


def test_memory_store_counters_start_at_configured_values():
    store = MemoryEntityStore(initial_hotel_id=10, initial_review_id=100)

    assert make_hotel(store).id == 10
    assert make_hotel(store, name="Other").id == 11
    assert make_review(store, 10).id == 100


def test_sqlite_store_persists_between_instances(tmp_path):
    path = str(tmp_path / "persist.db")
    first = SQLiteEntityStore(path)
    make_user(first)
    hotel = make_hotel(first)
    make_review(first, hotel.id)

    second = SQLiteEntityStore(path)

    assert second.get_user("U1") is not None
    assert second.get_hotel(hotel.id) == hotel
    assert len(second.list_reviews()) == 1
    assert make_hotel(second, name="Next").id == hotel.id + 1


def test_read_models_are_accepted_as_write_input(store):
    hotel = make_hotel(store)
    copy = store.create_hotel(hotel)

    assert copy.id == hotel.id + 1
    assert (copy.name, copy.location) == (hotel.name, hotel.location)
    assert copy.created_at >= hotel.created_at

    user = make_user(store, "U1", email="a@example.com")
    again = store.upsert_user(user)

    assert again.created_at == user.created_at
    assert again.email == "a@example.com"
    assert [h.id for h in store.list_hotels()] == [hotel.id, copy.id]


def test_failed_hotel_creation_does_not_consume_an_id():
    store = MemoryEntityStore()

    with pytest.raises(ValidationError):
        store.create_hotel(
            HotelCreate.model_construct(name="Grand", location="Paris", latitude=None, longitude=None)
        )

    assert make_hotel(store).id == 1
