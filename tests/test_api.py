import pytest
from fastapi.testclient import TestClient

from hotel_reviews_api.app.core.config import Settings
from hotel_reviews_api.app.main import build_store, create_app
from hotel_reviews_api.app.storage import MemoryEntityStore, SQLiteEntityStore

from tests.factories import login, make_review


GRAND = {"name": "Grand", "location": "Paris", "latitude": "48.8", "longitude": "2.3"}


def post_review(client, headers, **overrides):
    body = {"hotelId": 1, "rating": 5, "comment": "great", "videoUrl": "v1"}
    body.update(overrides)
    return client.post("/api/v1/reviews", json=body, headers=headers)


def test_token_login_upserts_user(client, repository):
    headers = login(client, "U1", email="u1@example.com", firstName="Una")

    response = client.get("/api/v1/auth/user", headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "U1"
    assert body["email"] == "u1@example.com"
    assert body["firstName"] == "Una"
    assert "createdAt" in body and "updatedAt" in body
    assert repository.get_user("U1").first_name == "Una"


def test_auth_user_requires_token(client):
    response = client.get("/api/v1/auth/user")
    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated"


def test_invalid_token_is_rejected(client):
    response = client.get("/api/v1/auth/user", headers={"Authorization": "Bearer not.a.token"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"


def test_token_for_unknown_user_is_rejected(app_settings):
    first = create_app(app_settings, repository=None)
    second = create_app(app_settings, repository=None)
    with TestClient(first) as client_a, TestClient(second) as client_b:
        headers = login(client_a, "U1")
        response = client_b.get("/api/v1/auth/user", headers=headers)

    assert response.status_code == 401
    assert response.json()["detail"] == "User no longer exists"


def test_create_hotel_requires_authentication(client):
    assert client.post("/api/v1/hotels", json=GRAND).status_code == 401


def test_create_hotel_then_duplicate(client):
    headers = login(client)

    created = client.post("/api/v1/hotels", json=GRAND, headers=headers)
    duplicate = client.post(
        "/api/v1/hotels",
        json={**GRAND, "name": "GRAND", "location": "paris"},
        headers=headers,
    )

    assert created.status_code == 201
    assert created.json()["id"] == 1
    assert duplicate.status_code == 200
    assert duplicate.json() == created.json()
    assert len(client.get("/api/v1/hotels").json()) == 1


@pytest.mark.parametrize("field", ["name", "location", "latitude", "longitude"])
def test_create_hotel_validates_payload(client, field):
    headers = login(client)
    body = {**GRAND, field: ""}

    assert client.post("/api/v1/hotels", json=body, headers=headers).status_code == 422


def test_get_hotel(client):
    headers = login(client)
    client.post("/api/v1/hotels", json=GRAND, headers=headers)
    post_review(client, headers, rating=5)
    post_review(client, headers, rating=3)

    response = client.get("/api/v1/hotels/1")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Grand"
    assert body["averageRating"] == 4
    assert body["reviewCount"] == 2
    assert [r["rating"] for r in body["reviews"]] == [5, 3]
    assert body["reviews"][0]["user"]["id"] == "U1"


def test_get_hotel_not_found(client):
    response = client.get("/api/v1/hotels/99")
    assert response.status_code == 404
    assert response.json()["detail"] == "Hotel not found"


def test_create_review(client):
    headers = login(client, "U7")
    client.post("/api/v1/hotels", json=GRAND, headers=headers)

    response = post_review(client, headers, rating=4)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["userId"] == "U7"
    assert body["hotelId"] == 1
    assert body["videoUrl"] == "v1"
    assert body["likes"] == 0
    assert body["comments"] == 0


def test_create_review_for_unknown_hotel(client):
    headers = login(client)
    assert post_review(client, headers, hotelId=5).status_code == 404


def test_create_review_requires_authentication(client):
    assert post_review(client, {}).status_code == 401


@pytest.mark.parametrize(
    "overrides",
    [{"rating": 0}, {"rating": 6}, {"comment": "   "}, {"videoUrl": ""}, {"hotelId": "x"}],
)
def test_create_review_validates_payload(client, overrides):
    headers = login(client)
    client.post("/api/v1/hotels", json=GRAND, headers=headers)

    assert post_review(client, headers, **overrides).status_code == 422


def test_create_review_accepts_snake_case_keys(client):
    headers = login(client)
    client.post("/api/v1/hotels", json=GRAND, headers=headers)
    body = {"hotel_id": 1, "rating": 2, "comment": "meh", "video_url": "v9"}

    response = client.post("/api/v1/reviews", json=body, headers=headers)

    assert response.status_code == 201
    assert response.json()["videoUrl"] == "v9"


def test_top_reviews(client):
    headers = login(client)
    client.post("/api/v1/hotels", json=GRAND, headers=headers)
    for rating in (1, 4, 5, 2):
        post_review(client, headers, rating=rating)

    response = client.get("/api/v1/reviews/top", params={"limit": 2})

    assert response.status_code == 200
    body = response.json()
    assert [r["rating"] for r in body] == [5, 4]
    assert body[0]["hotel"]["name"] == "Grand"
    assert body[0]["user"]["id"] == "U1"


def test_top_reviews_rejects_bad_limit(client):
    assert client.get("/api/v1/reviews/top", params={"limit": 0}).status_code == 422


def test_top_destinations_scenario(client):
    headers = login(client)
    client.post("/api/v1/hotels", json=GRAND, headers=headers)
    client.post(
        "/api/v1/hotels",
        json={"name": "Nowhere Inn", "location": "Oslo", "latitude": "59.9", "longitude": "10.7"},
        headers=headers,
    )
    post_review(client, headers, rating=5)
    post_review(client, headers, rating=3)

    response = client.get("/api/v1/destinations/top", params={"limit": 10})

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    assert body[0]["name"] == "Paris"
    assert body[0]["reviewCount"] == 2
    assert body[0]["imageUrl"] == "https://img.test/?q=Paris"
    assert [h["id"] for h in body[0]["topHotels"]] == [1]
    assert body[0]["topHotels"][0]["averageRating"] == 4


def test_dangling_review_yields_server_error(client, store):
    headers = login(client)
    client.post("/api/v1/hotels", json=GRAND, headers=headers)
    make_review(store, hotel_id=1, user_id="ghost")

    hotels = client.get("/api/v1/hotels")
    hotel = client.get("/api/v1/hotels/1")
    top = client.get("/api/v1/reviews/top")
    destinations = client.get("/api/v1/destinations/top")

    assert hotels.status_code == 500
    assert hotels.json()["detail"] == "Failed to fetch hotels"
    assert hotel.status_code == 500
    assert hotel.json()["detail"] == "Failed to fetch hotel"
    assert top.status_code == 500
    assert top.json()["detail"] == "Failed to fetch top reviews"
    assert destinations.status_code == 500
    assert destinations.json()["detail"] == "Failed to fetch top destinations"


def test_build_store_selects_backend(tmp_path):
    assert isinstance(build_store(Settings(storage_backend="memory")), MemoryEntityStore)
    sqlite_store = build_store(
        Settings(storage_backend="sqlite", database_url=str(tmp_path / "app.db"))
    )
    assert isinstance(sqlite_store, SQLiteEntityStore)
    with pytest.raises(ValueError):
        build_store(Settings(storage_backend="redis"))
