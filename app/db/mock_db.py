"""In-memory data store.

Every entity lives in a ``Table``: a dict keyed by an auto-incrementing id
that is never reused. ``MemoryStore`` groups one table per entity and adds
the queries the API needs, including the "with details" views that embed a
class's category and location, or a portfolio item's service.

State lasts for the lifetime of the process. One store is built at start-up
and handed to the app; nothing here is a module-level singleton.
"""
import logging
import threading
from copy import deepcopy
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from app.db.errors import (
    AvailabilityError,
    DuplicateKeyError,
    FieldError,
    ForeignKeyError,
    IntegrityViolation,
)

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class Table:
    """One entity type. Every read and write holds the table's lock."""

    def __init__(
        self,
        name: str,
        fields: Iterable[str],
        defaults: Optional[Row] = None,
        unique: Iterable[str] = (),
        immutable: Iterable[str] = (),
    ):
        self.name = name
        self.fields = frozenset(fields)
        self.defaults = defaults or {}
        self.unique = tuple(unique)
        self.immutable = frozenset(immutable)
        self._rows: Dict[int, Row] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    def _check_known(self, data: Row) -> None:
        unknown = set(data) - self.fields
        if unknown:
            raise FieldError(self.name, unknown, "unknown")

    # Caller holds the lock.
    def _check_unique(self, data: Row, exclude_id: Optional[int] = None) -> None:
        for field in self.unique:
            if field not in data:
                continue
            for row_id, row in self._rows.items():
                if row_id != exclude_id and row[field] == data[field]:
                    raise DuplicateKeyError(self.name, field, data[field])

    def insert(self, data: Row) -> Row:
        self._check_known(data)
        row = {**deepcopy(self.defaults), **deepcopy(data)}
        missing = self.fields - set(row)
        if missing:
            raise FieldError(self.name, missing, "missing")

        with self._lock:
            self._check_unique(row)
            row["id"] = self._next_id
            self._next_id += 1
            self._rows[row["id"]] = row
            logger.debug("Inserted %s %s", self.name, row["id"])
            return deepcopy(row)

    def get(self, row_id: int) -> Optional[Row]:
        with self._lock:
            row = self._rows.get(row_id)
            return deepcopy(row) if row is not None else None

    def exists(self, row_id: int) -> bool:
        with self._lock:
            return row_id in self._rows

    def all(self) -> List[Row]:
        with self._lock:
            return [deepcopy(row) for row in self._rows.values()]

    def find(self, predicate: Callable[[Row], bool]) -> List[Row]:
        with self._lock:
            return [deepcopy(row) for row in self._rows.values() if predicate(row)]

    def find_one(self, field: str, value: Any) -> Optional[Row]:
        with self._lock:
            for row in self._rows.values():
                if row.get(field) == value:
                    return deepcopy(row)
        return None

    def update(self, row_id: int, changes: Row) -> Optional[Row]:
        """Merge ``changes`` onto the row. Fields not in ``changes`` are untouched."""
        with self._lock:
            row = self._rows.get(row_id)
            if row is None:
                return None
            self._check_known(changes)
            frozen = self.immutable & set(changes)
            if frozen:
                raise FieldError(self.name, frozen, "immutable")
            self._check_unique(changes, exclude_id=row_id)

            row.update(deepcopy(changes))
            logger.debug("Updated %s %s: %s", self.name, row_id, sorted(changes))
            return deepcopy(row)

    def delete(self, row_id: int) -> bool:
        with self._lock:
            if self._rows.pop(row_id, None) is None:
                return False
        logger.debug("Deleted %s %s", self.name, row_id)
        return True


def _contains(row: Row, query: str, fields: Iterable[str]) -> bool:
    needle = query.lower()
    return any(needle in (row.get(field) or "").lower() for field in fields)


class MemoryStore:
    def __init__(self):
        self.users = Table(
            "users",
            ("username", "password", "is_admin"),
            defaults={"is_admin": False},
            unique=("username",),
        )
        self.categories = Table(
            "categories", ("name", "color", "text_color", "bg_color")
        )
        self.locations = Table(
            "locations", ("name", "address"), defaults={"address": None}
        )
        self.classes = Table(
            "classes",
            (
                "title", "description", "price", "price_unit", "total_spots",
                "available_spots", "image_url", "date", "time",
                "category_id", "location_id",
            ),
        )
        self.services = Table(
            "services",
            ("name", "slug", "description", "icon", "detailed_description"),
            unique=("slug",),
        )
        self.portfolio_items = Table(
            "portfolio_items",
            (
                "title", "description", "image_url", "client", "service_id",
                "result", "testimonial", "testimonial_author",
            ),
            defaults={"testimonial": "", "testimonial_author": ""},
        )
        self.team_members = Table(
            "team_members", ("name", "role", "bio", "image_url")
        )
        self.testimonials = Table(
            "testimonials",
            ("name", "company", "testimonial", "image_url"),
            defaults={"image_url": ""},
        )
        self.messages = Table(
            "messages",
            ("first_name", "last_name", "email", "subject", "message", "created_at"),
            immutable=("created_at",),
        )
        self.blog_posts = Table(
            "blog_posts",
            (
                "title", "slug", "content", "excerpt", "image_url",
                "published_at", "author", "category", "tags",
            ),
            defaults={"tags": []},
            unique=("slug",),
            immutable=("published_at",),
        )

    # ─── Users ───────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> Optional[Row]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[Row]:
        return self.users.find_one("username", username)

    def create_user(self, data: Row) -> Row:
        return self.users.insert(data)

    # ─── Enrichment ──────────────────────────────────────────────────

    def _with_class_details(self, cls: Row) -> Row:
        category = self.categories.get(cls["category_id"])
        location = self.locations.get(cls["location_id"])
        if category is None or location is None:
            logger.error(
                "Class %s points at category %s / location %s, one of which is gone",
                cls["id"], cls["category_id"], cls["location_id"],
            )
            raise IntegrityViolation(f"Missing category or location for class {cls['id']}")
        return {**cls, "category": category, "location": location}

    def _with_service(self, item: Row) -> Row:
        service = self.services.get(item["service_id"])
        if service is None:
            logger.error(
                "Portfolio item %s points at missing service %s",
                item["id"], item["service_id"],
            )
            raise IntegrityViolation(f"Missing service for portfolio item {item['id']}")
        return {**item, "service": service}

    def _check_reference(self, table: Table, owner: str, field: str, data: Row) -> None:
        if field in data and not table.exists(data[field]):
            raise ForeignKeyError(owner, field, data[field])

    # ─── Classes ─────────────────────────────────────────────────────

    def get_class(self, class_id: int) -> Optional[Row]:
        cls = self.classes.get(class_id)
        if cls is None:
            return None
        return self._with_class_details(cls)

    def list_classes(
        self,
        category_id: Optional[int] = None,
        location_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[Row]:
        def keep(cls: Row) -> bool:
            if category_id is not None and cls["category_id"] != category_id:
                return False
            if location_id is not None and cls["location_id"] != location_id:
                return False
            if search and not _contains(cls, search, ("title", "description")):
                return False
            return True

        return [self._with_class_details(cls) for cls in self.classes.find(keep)]

    def classes_by_category(self, category_id: int) -> List[Row]:
        return self.list_classes(category_id=category_id)

    def classes_by_location(self, location_id: int) -> List[Row]:
        return self.list_classes(location_id=location_id)

    def search_classes(self, query: str) -> List[Row]:
        return self.list_classes(search=query)

    def _check_spots(self, class_id: Optional[int], available: int, total: int) -> None:
        if not 0 <= available <= total:
            raise AvailabilityError(class_id, available, total)

    def create_class(self, data: Row) -> Row:
        self._check_reference(self.categories, "classes", "category_id", data)
        self._check_reference(self.locations, "classes", "location_id", data)
        if "available_spots" in data and "total_spots" in data:
            self._check_spots(None, data["available_spots"], data["total_spots"])
        return self.classes.insert(data)

    def update_class(self, class_id: int, changes: Row) -> Optional[Row]:
        current = self.classes.get(class_id)
        if current is None:
            return None
        self._check_reference(self.categories, "classes", "category_id", changes)
        self._check_reference(self.locations, "classes", "location_id", changes)
        merged = {**current, **changes}
        self._check_spots(class_id, merged["available_spots"], merged["total_spots"])
        return self.classes.update(class_id, changes)

    def update_class_availability(self, class_id: int, available_spots: int) -> Optional[Row]:
        current = self.classes.get(class_id)
        if current is None:
            return None
        self._check_spots(class_id, available_spots, current["total_spots"])
        return self.classes.update(class_id, {"available_spots": available_spots})

    def delete_class(self, class_id: int) -> bool:
        return self.classes.delete(class_id)

    # ─── Services & portfolio ────────────────────────────────────────

    def get_service_by_slug(self, slug: str) -> Optional[Row]:
        return self.services.find_one("slug", slug)

    def get_portfolio_item(self, item_id: int) -> Optional[Row]:
        item = self.portfolio_items.get(item_id)
        if item is None:
            return None
        return self._with_service(item)

    def list_portfolio(self, service_id: Optional[int] = None) -> List[Row]:
        items = self.portfolio_items.find(
            lambda item: service_id is None or item["service_id"] == service_id
        )
        return [self._with_service(item) for item in items]

    def portfolio_by_service(self, service_id: int) -> List[Row]:
        return self.list_portfolio(service_id=service_id)

    def create_portfolio_item(self, data: Row) -> Row:
        self._check_reference(self.services, "portfolio_items", "service_id", data)
        return self.portfolio_items.insert(data)

    def update_portfolio_item(self, item_id: int, changes: Row) -> Optional[Row]:
        if not self.portfolio_items.exists(item_id):
            return None
        self._check_reference(self.services, "portfolio_items", "service_id", changes)
        return self.portfolio_items.update(item_id, changes)

    # ─── Blog ────────────────────────────────────────────────────────

    def create_blog_post(self, data: Row) -> Row:
        return self.blog_posts.insert({**data, "published_at": datetime.now(timezone.utc)})

    def get_blog_post_by_slug(self, slug: str) -> Optional[Row]:
        return self.blog_posts.find_one("slug", slug)

    def list_blog_posts(
        self, category: Optional[str] = None, search: Optional[str] = None
    ) -> List[Row]:
        def keep(post: Row) -> bool:
            if category is not None and post["category"].lower() != category.lower():
                return False
            if search and not _contains(post, search, ("title", "excerpt")):
                return False
            return True

        return self.blog_posts.find(keep)

    # ─── Messages ────────────────────────────────────────────────────

    def create_message(self, data: Row) -> Row:
        message = self.messages.insert({**data, "created_at": datetime.now(timezone.utc)})
        logger.info("New contact message %s from %s", message["id"], message["email"])
        return message

    def get_all_messages(self) -> List[Row]:
        return self.messages.all()
