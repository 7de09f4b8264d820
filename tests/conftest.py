"""
Shared test fixtures and sample structures for the opticheck test suite.
"""

from dataclasses import dataclass

import attrs
import pytest
from pydantic import BaseModel


class Address(BaseModel):
    city: str
    zip: str | None = None


class UserModel(BaseModel):
    name: str
    age: int | None = None
    address: Address | None = None


@attrs.frozen
class AttrsUser:
    name: str
    age: int | None = None


@dataclass(frozen=True)
class DataUser:
    name: str
    age: int | None = None


@pytest.fixture
def user_dict():
    """Nested dict user with one missing and one None field.

    Usage:
        def test_something(user_dict):
            assert user_dict["name"] == "Alice"
    """
    return {
        "name": "Alice",
        "age": 30,
        "email": None,
        "address": {"city": "Paris", "zip": "75001"},
    }


@pytest.fixture
def user_model():
    return UserModel(name="Alice", age=30, address=Address(city="Paris"))


@pytest.fixture
def attrs_user():
    return AttrsUser(name="Alice", age=30)


@pytest.fixture
def data_user():
    return DataUser(name="Alice", age=30)
