from datetime import date

import pytest

from lightbnb.db import init_db, make_engine, make_session_factory
from lightbnb.models import User, Property, Reservation, PropertyReview
from lightbnb.services.gateway import QueryGateway

# ---------- FIXTURES ----------

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def engine():
    engine = make_engine(TEST_DATABASE_URL)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def gateway(engine):
    return QueryGateway(engine)


@pytest.fixture
def seeded(engine):
    """
    Three users, five properties (one without reviews) and five reservations.

    Average ratings: Cozy Cabin 4.0, Downtown Loft 2.0, Lakeside Cottage 5.0,
    Old Stone Castle 4.0, Unreviewed Condo has none.
    """
    Session = make_session_factory(engine)
    db = Session()
    alice = User(name="Alice Owner", email="alice@example.com", password="hashed-a")
    bob = User(name="Bob Guest", email="bob@example.com", password="hashed-b")
    cara = User(name="Cara Guest", email="cara@example.com", password="hashed-c")
    db.add_all([alice, bob, cara])
    db.flush()

    cabin = Property(owner_id=alice.id, title="Cozy Cabin", city="Vancouver", cost_per_night=4000)
    loft = Property(owner_id=alice.id, title="Downtown Loft", city="Vancouver", cost_per_night=10000)
    cottage = Property(owner_id=alice.id, title="Lakeside Cottage", city="Toronto", cost_per_night=15000)
    castle = Property(owner_id=cara.id, title="Old Stone Castle", city="Montreal", cost_per_night=30000)
    condo = Property(owner_id=alice.id, title="Unreviewed Condo", city="Vancouver", cost_per_night=5000)
    db.add_all([cabin, loft, cottage, castle, condo])
    db.flush()

    stays = [
        (bob, loft, date(2024, 3, 1), 2),
        (bob, cabin, date(2024, 1, 10), 5),
        (bob, cottage, date(2024, 2, 5), 5),
        (bob, castle, date(2024, 4, 1), 4),
        (cara, cabin, date(2024, 5, 1), 3),
    ]
    for guest, prop, start, rating in stays:
        reservation = Reservation(guest_id=guest.id, property_id=prop.id, start_date=start, end_date=date(start.year, start.month, start.day + 3))
        db.add(reservation)
        db.flush()
        db.add(PropertyReview(guest_id=guest.id, property_id=prop.id, reservation_id=reservation.id, rating=rating))
    db.commit()

    ids = {
        "alice": alice.id, "bob": bob.id, "cara": cara.id,
        "cabin": cabin.id, "loft": loft.id, "cottage": cottage.id, "castle": castle.id, "condo": condo.id,
    }
    db.close()
    return ids
