import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..db import make_session_factory
from .filters import SqlBuilder

logger = logging.getLogger(__name__)

# Columns add_property may write; everything else in the input is ignored
PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province",
    "post_code",
)

RESERVATIONS_SQL = """
SELECT reservations.id, reservations.property_id, properties.title, properties.cost_per_night,
       reservations.start_date, reservations.end_date, avg(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = :guest_id
GROUP BY properties.id, reservations.id
ORDER BY reservations.start_date
LIMIT :limit
"""

PROPERTIES_SELECT = """
SELECT properties.*, avg(property_reviews.rating) AS average_rating
FROM properties
JOIN property_reviews ON properties.id = property_reviews.property_id
"""


def _fields(data: Any) -> Mapping[str, Any]:
    """Read-only view of a pydantic input model or a plain mapping."""
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=True)
    return data


def _to_cents(amount: Any) -> int:
    return round(float(amount) * 100)


class QueryGateway:
    """
    Runs the LightBnB queries against an injected SQLAlchemy engine.

    Lookups with no match return None or an empty list. Any driver error is
    logged and re-raised as-is; the caller decides what the user sees.
    """

    def __init__(self, engine: Engine, default_limit: int = 10):
        self.engine = engine
        self.default_limit = default_limit
        self.SessionLocal = make_session_factory(engine)

    def close(self) -> None:
        self.engine.dispose()

    def _execute(self, operation: str, sql: str, params: Mapping[str, Any], commit: bool = False) -> list[dict]:
        db = self.SessionLocal()
        try:
            result = db.execute(text(sql), dict(params))
            rows = [dict(row) for row in result.mappings()]
            if commit:
                db.commit()
            return rows
        except SQLAlchemyError as e:
            logger.error(f"{operation} failed: {e}")
            raise
        finally:
            db.close()

    # ==== Users ====

    def get_user_with_email(self, email: str) -> Optional[dict]:
        rows = self._execute("get_user_with_email", "SELECT * FROM users WHERE email = :p1", {"p1": email})
        return rows[0] if rows else None

    def get_user_with_id(self, user_id: int) -> Optional[dict]:
        rows = self._execute("get_user_with_id", "SELECT * FROM users WHERE id = :p1", {"p1": user_id})
        return rows[0] if rows else None

    def add_user(self, user) -> dict:
        """Insert a user and return the stored row, generated id included."""
        data = _fields(user)
        rows = self._execute(
            "add_user",
            "INSERT INTO users (name, email, password) VALUES (:p1, :p2, :p3) RETURNING *",
            {"p1": data.get("name"), "p2": data.get("email"), "p3": data.get("password")},
            commit=True,
        )
        return rows[0]

    # ==== Reservations ====

    def get_all_reservations(self, guest_id: int, limit: int | None = None) -> list[dict]:
        if limit is None:
            limit = self.default_limit
        return self._execute("get_all_reservations", RESERVATIONS_SQL, {"guest_id": guest_id, "limit": limit})

    # ==== Properties ====

    def build_property_search(self, options=None, limit: int | None = None) -> SqlBuilder:
        """
        Assemble the property search for the given filters.

        Recognized options: city (substring), owner_id, minimum_price_per_night
        and maximum_price_per_night (whole units, compared in cents) and
        minimum_rating (checked against the average after grouping). Missing
        or falsy options add nothing.
        """
        opts = _fields(options)
        if limit is None:
            limit = self.default_limit
        qb = SqlBuilder(PROPERTIES_SELECT)

        if opts.get("city"):
            qb.where("properties.city LIKE {}", f"%{opts['city']}%")

        if opts.get("owner_id"):
            qb.where("properties.owner_id = {}", opts["owner_id"])

        min_price = opts.get("minimum_price_per_night")
        max_price = opts.get("maximum_price_per_night")
        if min_price and max_price:
            qb.where("properties.cost_per_night BETWEEN {} AND {}", _to_cents(min_price), _to_cents(max_price))
        elif min_price:
            qb.where("properties.cost_per_night >= {}", _to_cents(min_price))
        elif max_price:
            qb.where("properties.cost_per_night <= {}", _to_cents(max_price))

        qb.group_by("properties.id")

        if opts.get("minimum_rating"):
            qb.having("avg(property_reviews.rating) >= {}", opts["minimum_rating"])

        qb.order_by("properties.cost_per_night")
        qb.limit(limit)
        return qb

    def get_all_properties(self, options=None, limit: int | None = None) -> list[dict]:
        qb = self.build_property_search(options, limit)
        sql = qb.render()
        logger.debug("get_all_properties: %s %s", sql, qb.params)
        return self._execute("get_all_properties", sql, qb.params)

    def add_property(self, prop) -> dict:
        """Insert a property from its known columns and return the stored row."""
        data = _fields(prop)
        columns = [c for c in PROPERTY_COLUMNS if c in data]
        sql = "INSERT INTO properties ({}) VALUES ({}) RETURNING *".format(
            ", ".join(columns),
            ", ".join(f":{c}" for c in columns),
        )
        rows = self._execute("add_property", sql, {c: data[c] for c in columns}, commit=True)
        return rows[0]
