"""Tests for user validation and the user service."""
import asyncio
import threading
from datetime import date, datetime, timezone

import pytest

from ticket_api.app.core.exceptions import (
    DecodeError,
    DuplicateIdentifier,
    InvalidAge,
    InvalidIdentifier,
    InvalidPassport,
    InvalidPathParameter,
    NotFound,
)
from ticket_api.app.schemas.user import UserCreate
from ticket_api.app.services.user_service import (
    UserService,
    decode_user,
    is_valid_passport,
    parse_user_id,
    validate_user,
)


def make_payload(**overrides):
    data = {"id": 1, "name": "Ann", "sureName": "Lee", "passportNumber": "123456789", "age": 30}
    data.update(overrides)
    return UserCreate(**data)


@pytest.mark.parametrize(
    "passport, expected",
    [
        ("123456789", True),
        ("000000000", True),
        ("12345678", False),
        ("1234567890", False),
        ("12345678a", False),
        ("12345678\n", False),
        ("", False),
    ],
)
def test_is_valid_passport(passport, expected):
    assert is_valid_passport(passport) is expected


def test_validation_order(store):
    # Everything is wrong: the identifier is reported first.
    with pytest.raises(InvalidIdentifier):
        validate_user(make_payload(id=0, age=0, passportNumber="x"), store)
    with pytest.raises(InvalidAge):
        validate_user(make_payload(age=0, passportNumber="x"), store)
    with pytest.raises(InvalidPassport):
        validate_user(make_payload(passportNumber="x"), store)


def test_negative_values_rejected(store):
    with pytest.raises(InvalidIdentifier):
        validate_user(make_payload(id=-3), store)
    with pytest.raises(InvalidAge):
        validate_user(make_payload(age=-1), store)


def test_name_and_surname_are_not_validated(store):
    validate_user(make_payload(name="", sureName=""), store)


def test_parse_user_id():
    assert parse_user_id("42") == 42
    assert parse_user_id("+7") == 7
    assert parse_user_id("-7") == -7
    for raw in ("abc", "1.5", " 1", "1_000", ""):
        with pytest.raises(InvalidPathParameter):
            parse_user_id(raw)


def test_create_user_attaches_ticket(store):
    service = UserService(store)
    user = asyncio.run(service.create_user(make_payload(age=61), today=date(2024, 5, 1)))
    assert user.price == 40.0
    assert user.date_of_ticket_expiry == datetime(2024, 5, 4, tzinfo=timezone.utc)
    assert store.get(1) == user


def test_duplicate_leaves_store_unchanged(store):
    service = UserService(store)
    first = asyncio.run(service.create_user(make_payload()))
    with pytest.raises(DuplicateIdentifier):
        asyncio.run(service.create_user(make_payload(name="Bob", age=80)))
    assert store.list() == [first]


def test_get_missing_user(store):
    with pytest.raises(NotFound):
        asyncio.run(UserService(store).get_user(5))


def test_concurrent_creates_with_same_id(store):
    service = UserService(store)
    results = []

    def worker():
        try:
            asyncio.run(service.create_user(make_payload()))
            results.append("created")
        except DuplicateIdentifier:
            results.append("duplicate")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count("created") == 1
    assert results.count("duplicate") == 7
    assert len(store) == 1


def test_decode_user_accepts_json_bytes():
    user = decode_user(b'{"id": 3, "sureName": "Lee", "passportNumber": "123456789", "age": 40, "price": 1}')
    assert user.id == 3
    assert user.sure_name == "Lee"
    assert user.name == ""


def test_decode_user_nulls_become_defaults():
    user = decode_user(b'{"id": null, "name": null, "age": null}')
    assert user.id == 0
    assert user.name == ""
    assert user.age == 0
    assert decode_user(b"null").id == 0


@pytest.mark.parametrize(
    "body",
    [b"", b"{not json", b"[1, 2]", b'{"id": "1"}', b'{"passportNumber": 123456789}', b'{"id": 1.5}'],
)
def test_decode_user_rejects_bad_bodies(body):
    with pytest.raises(DecodeError) as excinfo:
        decode_user(body)
    assert str(excinfo.value).startswith("Request body could not be decoded: ")


def test_decode_user_bounds_integers():
    decode_user(b'{"id": 9223372036854775807, "age": 1}')
    with pytest.raises(DecodeError):
        decode_user(b'{"id": 9223372036854775808}')
    with pytest.raises(DecodeError):
        decode_user(b'{"age": -9223372036854775809}')


def test_parse_user_id_bounds():
    assert parse_user_id("9223372036854775807") == 2**63 - 1
    assert parse_user_id("-9223372036854775808") == -(2**63)
    for raw in ("9223372036854775808", "-9223372036854775809", "99999999999999999999999"):
        with pytest.raises(InvalidPathParameter):
            parse_user_id(raw)
