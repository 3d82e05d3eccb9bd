import threading
from datetime import datetime

import pytest

from app.db.errors import (
    AvailabilityError,
    DuplicateKeyError,
    FieldError,
    ForeignKeyError,
    IntegrityViolation,
)
from app.db.mock_db import MemoryStore, Table

ART = {"name": "Art & Crafts", "color": "#3B82F6", "text_color": "#1E40AF", "bg_color": "#DBEAFE"}
STUDIO = {"name": "Downtown Studio", "address": "123 Main St"}


def make_class(**overrides):
    cls = {
        "title": "Pottery Workshop for Beginners",
        "description": "Hands-on pottery.",
        "price": 6500,
        "price_unit": "per person",
        "total_spots": 12,
        "available_spots": 8,
        "image_url": "https://example.com/pottery.jpg",
        "date": "Wed, June 15",
        "time": "6:00 PM - 8:00 PM",
        "category_id": 1,
        "location_id": 1,
    }
    cls.update(overrides)
    return cls


@pytest.fixture
def table():
    return Table("things", ("name", "size"), defaults={"size": 0}, unique=("name",))


# ─── Table ───────────────────────────────────────────────────────────

def test_insert_then_get_returns_fields_plus_id(table):
    row = table.insert({"name": "a", "size": 3})
    assert row == {"name": "a", "size": 3, "id": 1}
    assert table.get(1) == row


def test_insert_fills_defaults(table):
    assert table.insert({"name": "a"})["size"] == 0


def test_ids_are_never_reused(table):
    first = table.insert({"name": "a"})
    assert table.delete(first["id"])
    second = table.insert({"name": "b"})
    assert second["id"] == 2
    assert table.get(1) is None


def test_delete_missing_row_returns_false(table):
    assert table.delete(42) is False


def test_all_preserves_insertion_order(table):
    for name in ("c", "a", "b"):
        table.insert({"name": name})
    assert [row["name"] for row in table.all()] == ["c", "a", "b"]


def test_update_only_touches_given_fields(table):
    table.insert({"name": "a", "size": 3})
    updated = table.update(1, {"size": 5})
    assert updated == {"name": "a", "size": 5, "id": 1}


def test_update_missing_row_returns_none(table):
    assert table.update(7, {"size": 1}) is None


def test_unknown_fields_are_rejected(table):
    with pytest.raises(FieldError):
        table.insert({"name": "a", "colour": "red"})
    table.insert({"name": "a"})
    with pytest.raises(FieldError):
        table.update(1, {"id": 99})
    assert table.get(1)["id"] == 1


def test_missing_required_field_is_rejected():
    table = Table("things", ("name", "size"))
    with pytest.raises(FieldError) as exc:
        table.insert({"name": "a"})
    assert exc.value.fields == ["size"]


def test_unique_field_checked_on_insert_and_update(table):
    table.insert({"name": "a"})
    table.insert({"name": "b"})
    with pytest.raises(DuplicateKeyError):
        table.insert({"name": "a"})
    with pytest.raises(DuplicateKeyError):
        table.update(2, {"name": "a"})
    # Re-saving a row's own value is not a collision
    assert table.update(1, {"name": "a"})["name"] == "a"


def test_returned_rows_are_copies(table):
    row = table.insert({"name": "a"})
    row["name"] = "changed"
    table.get(1)["size"] = 100
    assert table.get(1) == {"name": "a", "size": 0, "id": 1}


# ─── Classes & enrichment ────────────────────────────────────────────

def test_get_class_embeds_category_and_location(empty_store):
    empty_store.categories.insert(ART)
    empty_store.locations.insert(STUDIO)
    empty_store.create_class(make_class())

    cls = empty_store.get_class(1)
    assert cls["category"]["name"] == "Art & Crafts"
    assert cls["location"]["name"] == "Downtown Studio"
    assert cls["total_spots"] == 12
    assert cls["available_spots"] == 8


def test_enrichment_reflects_latest_related_row(empty_store):
    empty_store.categories.insert(ART)
    empty_store.locations.insert(STUDIO)
    empty_store.create_class(make_class())

    empty_store.categories.update(1, {"name": "Ceramics"})
    assert empty_store.get_class(1)["category"]["name"] == "Ceramics"
    assert empty_store.list_classes()[0]["category"] == empty_store.categories.get(1)


def test_dangling_reference_raises_integrity_violation(store):
    store.locations.delete(1)
    with pytest.raises(IntegrityViolation):
        store.get_class(1)
    with pytest.raises(IntegrityViolation):
        store.list_classes()


def test_create_class_rejects_missing_category(empty_store):
    empty_store.locations.insert(STUDIO)
    with pytest.raises(ForeignKeyError):
        empty_store.create_class(make_class())
    assert len(empty_store.classes) == 0


def test_get_missing_class_returns_none(store):
    assert store.get_class(999) is None


def test_search_matches_title_or_description_case_insensitively(store):
    results = store.search_classes("pottery")
    assert [cls["title"] for cls in results] == ["Pottery Workshop for Beginners"]
    assert [cls["id"] for cls in store.search_classes("HTML")] == [4]
    assert store.search_classes("zzz-no-match") == []


def test_filter_by_category_keeps_insertion_order(store):
    results = store.classes_by_category(1)
    assert [cls["id"] for cls in results] == [1, 5, 6]
    assert all(cls["category_id"] == 1 for cls in results)


def test_filter_by_location(store):
    assert [cls["id"] for cls in store.classes_by_location(3)] == [3]


def test_list_classes_combines_filters(store):
    assert [cls["id"] for cls in store.list_classes(category_id=1, search="sketch")] == [5]
    assert store.list_classes(category_id=2, location_id=1) == []


def test_update_availability_only_changes_available_spots(store):
    before = store.classes.get(1)
    updated = store.update_class_availability(1, 5)
    assert updated["available_spots"] == 5
    assert updated["total_spots"] == before["total_spots"]
    assert {k: v for k, v in updated.items() if k != "available_spots"} == \
        {k: v for k, v in before.items() if k != "available_spots"}


@pytest.mark.parametrize("spots", [-1, 13])
def test_update_availability_out_of_bounds(store, spots):
    with pytest.raises(AvailabilityError):
        store.update_class_availability(1, spots)
    assert store.classes.get(1)["available_spots"] == 8


def test_update_availability_missing_class(store):
    assert store.update_class_availability(999, 1) is None


def test_update_class_cannot_shrink_total_below_available(store):
    with pytest.raises(AvailabilityError):
        store.update_class(1, {"total_spots": 4})
    assert store.update_class(1, {"total_spots": 8})["total_spots"] == 8


def test_update_class_checks_new_references(store):
    with pytest.raises(ForeignKeyError):
        store.update_class(1, {"location_id": 99})
    assert store.update_class(1, {"location_id": 2})["location_id"] == 2


# ─── Services, portfolio, blog ───────────────────────────────────────

def test_service_slug_lookup(store):
    assert store.get_service_by_slug("branding")["name"] == "Branding"
    assert store.get_service_by_slug("nope") is None


def test_duplicate_service_slug_rejected(store):
    with pytest.raises(DuplicateKeyError):
        store.services.insert({
            "name": "Other", "slug": "branding", "description": "",
            "icon": "x", "detailed_description": "",
        })


def test_portfolio_items_embed_service(store):
    items = store.portfolio_by_service(2)
    assert [item["client"] for item in items] == ["Hopline Brewing"]
    assert items[0]["service"]["slug"] == "branding"
    assert items[0]["testimonial"] == ""


def test_portfolio_rejects_unknown_service(store):
    with pytest.raises(ForeignKeyError):
        store.update_portfolio_item(1, {"service_id": 42})


def test_blog_filters_and_slug(store):
    assert [p["slug"] for p in store.list_blog_posts(category="branding")] == [
        "what-a-brand-guide-should-contain"
    ]
    assert len(store.list_blog_posts(search="website")) == 1
    post = store.get_blog_post_by_slug("five-signs-your-website-needs-a-refresh")
    assert isinstance(post["published_at"], datetime)
    with pytest.raises(FieldError):
        store.blog_posts.update(post["id"], {"published_at": datetime(2020, 1, 1)})


# ─── Users & messages ────────────────────────────────────────────────

def test_users_default_to_non_admin(empty_store):
    user = empty_store.create_user({"username": "sam", "password": "hash"})
    assert user["is_admin"] is False
    assert empty_store.get_user_by_username("sam") == user
    assert empty_store.get_user_by_username("nobody") is None
    with pytest.raises(DuplicateKeyError):
        empty_store.create_user({"username": "sam", "password": "other"})


def test_message_created_at_is_set_once(empty_store):
    message = empty_store.create_message({
        "first_name": "Ann", "last_name": "Lee", "email": "ann@example.com",
        "subject": "Hi", "message": "Hello there",
    })
    assert isinstance(message["created_at"], datetime)
    with pytest.raises(FieldError):
        empty_store.messages.update(message["id"], {"created_at": datetime(2000, 1, 1)})
    assert empty_store.get_all_messages() == [message]


def test_stores_are_independent():
    first, second = MemoryStore(), MemoryStore()
    first.categories.insert(ART)
    assert len(second.categories) == 0


# ─── Concurrency ─────────────────────────────────────────────────────

def _run_threads(targets):
    errors = []

    def guarded(target):
        try:
            target()
        except Exception as exc:  # collected and asserted on below
            errors.append(exc)

    threads = [threading.Thread(target=guarded, args=(target,)) for target in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return errors


def test_reads_during_inserts_see_a_consistent_table():
    table = Table("things", ("name",))
    done = threading.Event()

    def writer():
        for n in range(2000):
            table.insert({"name": f"thing-{n}"})
        done.set()

    def reader():
        while not done.is_set():
            rows = table.all()
            assert [row["id"] for row in rows] == list(range(1, len(rows) + 1))
            table.find(lambda row: row["name"].endswith("7"))

    errors = _run_threads([writer, reader, reader, reader])
    assert errors == []
    assert len(table) == 2000


def test_concurrent_inserts_get_distinct_ids():
    table = Table("things", ("name",), unique=("name",))

    def writer(prefix):
        return lambda: [table.insert({"name": f"{prefix}-{n}"}) for n in range(500)]

    errors = _run_threads([writer(prefix) for prefix in "abcd"])
    assert errors == []
    ids = sorted(row["id"] for row in table.all())
    assert ids == list(range(1, 2001))
