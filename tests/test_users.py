import logging

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from lightbnb.db import make_engine
from lightbnb.schemas import UserIn
from lightbnb.services.gateway import QueryGateway


def test_get_user_with_email(gateway, seeded):
    user = gateway.get_user_with_email("bob@example.com")
    assert user["id"] == seeded["bob"]
    assert user["name"] == "Bob Guest"


def test_unknown_email_returns_none(gateway, seeded):
    assert gateway.get_user_with_email("nobody@example.com") is None


def test_get_user_with_id(gateway, seeded):
    user = gateway.get_user_with_id(seeded["alice"])
    assert user["email"] == "alice@example.com"
    assert gateway.get_user_with_id(9999) is None


def test_add_user_then_fetch_by_id(gateway):
    created = gateway.add_user(UserIn(name="Dee", email="dee@example.com", password="hashed-d"))
    assert created["id"] is not None

    fetched = gateway.get_user_with_id(created["id"])
    assert fetched == {"id": created["id"], "name": "Dee", "email": "dee@example.com", "password": "hashed-d"}


def test_add_user_accepts_plain_mapping(gateway):
    created = gateway.add_user({"name": "Eve", "email": "eve@example.com", "password": "x"})
    assert gateway.get_user_with_email("eve@example.com")["id"] == created["id"]


def test_duplicate_email_surfaces_driver_error(gateway, seeded, caplog):
    with caplog.at_level(logging.ERROR, logger="lightbnb.services.gateway"):
        with pytest.raises(IntegrityError):
            gateway.add_user({"name": "Bob Again", "email": "bob@example.com", "password": "y"})
    assert "add_user failed" in caplog.text


def test_missing_table_is_logged_and_reraised(caplog):
    # Fresh database with no schema
    bare = QueryGateway(make_engine("sqlite://"))
    with caplog.at_level(logging.ERROR, logger="lightbnb.services.gateway"):
        with pytest.raises(OperationalError):
            bare.get_user_with_email("bob@example.com")
    assert "get_user_with_email failed" in caplog.text
    bare.close()
