"""End-to-end tests for accounts, courses, categories and promotions."""

from datetime import timedelta
from uuid import uuid4

import pytest

from empire.domain.model.common import utcnow
from tests.factories import (
    bearer,
    make_category,
    promote_to_admin,
    register_and_login,
    seed,
)
from tests.harness import create_client_fixture

# E2E fixture - real app, in-memory persistence
api = create_client_fixture()


@pytest.fixture
def admin(api):
    """Client plus an admin token and a plain user token."""
    client, persistence = api
    admin_token = register_and_login(client, "admin@example.com")
    promote_to_admin(persistence, "admin@example.com")
    user_token = register_and_login(client, "user@example.com")
    return client, persistence, admin_token, user_token


def _account_payload(slug, prices, category_id=None):
    return {
        "slug": slug,
        "name_en": slug.title(),
        "name_vi": slug.title(),
        "category_id": category_id,
        "variants": [
            {
                "name_en": f"Plan {price}",
                "name_vi": f"Goi {price}",
                "price_usd": price,
                "price_vnd": price * 25000,
            }
            for price in prices
        ],
        "gallery_images": [{"image_url": "https://img.example.com/1.png"}],
    }


def _course_payload(slug, price_usd=10.0):
    return {
        "slug": slug,
        "title_en": slug.title(),
        "title_vi": slug.title(),
        "instructor": "Jane Doe",
        "price_usd": price_usd,
        "price_vnd": price_usd * 25000,
    }


class TestAccounts:
    """End-to-end tests for account listings."""

    def test_mutations_check_session_then_role(self, admin):
        client, _, _, user_token = admin
        payload = _account_payload("netflix", [9.99])

        anonymous = client.post("/accounts", json=payload)
        user = client.post("/accounts", json=payload, headers=bearer(user_token))

        assert anonymous.status_code == 401
        assert user.status_code == 403

    def test_admin_creates_and_public_lists_cheapest_variant(self, admin):
        # Arrange
        client, persistence, admin_token, _ = admin
        category = make_category("streaming", "Streaming")
        seed(persistence.categories, category)

        # Act
        created = client.post(
            "/accounts",
            json=_account_payload("netflix", [19.99, 9.99, 14.99], str(category.id)),
            headers=bearer(admin_token),
        )
        listing = client.get("/accounts", params={"category": "streaming"})

        # Assert
        assert created.status_code == 201
        account = created.json()["account"]
        assert len(account["variants"]) == 3
        assert account["images"][0]["order_index"] == 0
        [item] = listing.json()["accounts"]
        assert item["min_price"] == 9.99
        assert item["min_variant_id"] == account["variants"][1]["id"]
        assert item["category"]["slug"] == "streaming"

    def test_price_filter_and_sort(self, admin):
        client, _, admin_token, _ = admin
        for slug, price in [("a", 5), ("b", 25), ("c", 15)]:
            client.post(
                "/accounts",
                json=_account_payload(slug, [price]),
                headers=bearer(admin_token),
            )

        response = client.get(
            "/accounts",
            params={"minPrice": "10", "maxPrice": "", "sort": "price-desc"},
        )

        assert [a["slug"] for a in response.json()["accounts"]] == ["b", "c"]

    def test_invalid_payload_is_bad_request(self, admin):
        client, _, admin_token, _ = admin

        missing = client.post(
            "/accounts", json={"slug": "x"}, headers=bearer(admin_token)
        )
        bad_slug = client.post(
            "/accounts",
            json=_account_payload("Not A Slug", [1]),
            headers=bearer(admin_token),
        )
        unknown_category = client.post(
            "/accounts",
            json=_account_payload("ok", [1], str(uuid4())),
            headers=bearer(admin_token),
        )

        assert missing.status_code == 400
        assert bad_slug.status_code == 400
        assert unknown_category.status_code == 400

    def test_admin_updates_gets_and_deletes(self, admin):
        client, _, admin_token, user_token = admin
        account_id = client.post(
            "/accounts",
            json=_account_payload("spotify", [3]),
            headers=bearer(admin_token),
        ).json()["account"]["id"]

        updated = client.put(
            f"/accounts/{account_id}",
            json=_account_payload("spotify-family", [6, 8]),
            headers=bearer(admin_token),
        )
        fetched_by_user = client.get(
            f"/accounts/{account_id}", headers=bearer(user_token)
        )
        fetched = client.get(f"/accounts/{account_id}", headers=bearer(admin_token))
        deleted = client.delete(f"/accounts/{account_id}", headers=bearer(admin_token))
        gone = client.get(f"/accounts/{account_id}", headers=bearer(admin_token))

        assert updated.status_code == 200
        assert updated.json()["account"]["slug"] == "spotify-family"
        assert fetched_by_user.status_code == 403
        assert len(fetched.json()["account"]["variants"]) == 2
        assert deleted.json() == {"success": True}
        assert gone.status_code == 404


class TestCategories:
    def test_public_list(self, api):
        client, persistence = api
        seed(
            persistence.categories,
            make_category("software", "Software"),
            make_category("games", "Games"),
        )

        response = client.get("/categories")

        assert response.status_code == 200
        assert [c["slug"] for c in response.json()["categories"]] == [
            "games",
            "software",
        ]


class TestCourses:
    """End-to-end tests for courses."""

    def test_cursor_pagination(self, admin):
        # Arrange
        client, _, admin_token, _ = admin
        for i in range(3):
            client.post(
                "/courses",
                json=_course_payload(f"course-{i}"),
                headers=bearer(admin_token),
            )

        # Act
        first = client.get("/courses", params={"limit": 2}).json()
        second = client.get(
            "/courses", params={"limit": 2, "cursor": first["nextCursor"]}
        ).json()

        # Assert
        assert first["hasMore"] is True
        assert len(first["items"]) == 2
        assert second["hasMore"] is False
        assert second["nextCursor"] is None
        slugs = [c["slug"] for c in first["items"] + second["items"]]
        assert sorted(slugs) == ["course-0", "course-1", "course-2"]

    def test_public_get_and_admin_mutations(self, admin):
        client, _, admin_token, user_token = admin

        forbidden = client.post(
            "/courses", json=_course_payload("nope"), headers=bearer(user_token)
        )
        created = client.post(
            "/courses", json=_course_payload("django"), headers=bearer(admin_token)
        )
        course_id = created.json()["course"]["id"]
        fetched = client.get(f"/courses/{course_id}")
        updated = client.put(
            f"/courses/{course_id}",
            json=_course_payload("django-pro", 49),
            headers=bearer(admin_token),
        )
        deleted = client.delete(f"/courses/{course_id}", headers=bearer(admin_token))

        assert forbidden.status_code == 403
        assert created.status_code == 201
        assert fetched.json()["course"]["slug"] == "django"
        assert updated.json()["course"]["price_usd"] == 49
        assert deleted.status_code == 200
        assert client.get(f"/courses/{course_id}").status_code == 404


class TestPromotions:
    """End-to-end tests for promotions."""

    def test_admin_creates_and_public_lists_with_status(self, admin):
        # Arrange
        client, _, admin_token, user_token = admin
        now = utcnow()
        payload = {
            "code": "welcome",
            "name_en": "Welcome",
            "name_vi": "Chao mung",
            "discount_percent": 15,
            "start_date": (now + timedelta(days=1)).isoformat(),
            "end_date": (now + timedelta(days=10)).isoformat(),
        }

        # Act
        forbidden = client.post("/promotions", json=payload, headers=bearer(user_token))
        created = client.post("/promotions", json=payload, headers=bearer(admin_token))
        duplicate = client.post(
            "/promotions", json=payload, headers=bearer(admin_token)
        )
        listing = client.get("/promotions")

        # Assert
        assert forbidden.status_code == 403
        assert created.status_code == 201
        assert created.json()["promotion"]["code"] == "WELCOME"
        assert created.json()["promotion"]["status"] == "scheduled"
        assert duplicate.status_code == 400
        assert [p["code"] for p in listing.json()["promotions"]] == ["WELCOME"]

    def test_missing_fields_are_bad_request(self, admin):
        client, _, admin_token, _ = admin

        response = client.post(
            "/promotions", json={"code": "X"}, headers=bearer(admin_token)
        )

        assert response.status_code == 400
        assert "Missing required fields" in response.json()["detail"]

    def test_update_and_delete(self, admin):
        client, _, admin_token, _ = admin
        now = utcnow()
        created = client.post(
            "/promotions",
            json={
                "code": "flash",
                "name_en": "Flash",
                "name_vi": "Flash",
                "discount_percent": 30,
                "start_date": (now - timedelta(days=1)).isoformat(),
                "end_date": (now + timedelta(days=1)).isoformat(),
            },
            headers=bearer(admin_token),
        ).json()["promotion"]

        updated = client.put(
            f"/promotions/{created['id']}",
            json={"end_date": (now - timedelta(hours=1)).isoformat()},
            headers=bearer(admin_token),
        )
        deleted = client.delete(
            f"/promotions/{created['id']}", headers=bearer(admin_token)
        )

        assert created["status"] == "active"
        assert updated.json()["promotion"]["status"] == "expired"
        assert deleted.status_code == 200
        assert client.get("/promotions").json()["promotions"] == []
