"""Shared fixtures for validation-chain tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(email="user@example.com", password="somepassword")


@pytest.fixture
def missing_email() -> Credentials:
    return Credentials(email="", password="somepassword")


@pytest.fixture
def empty_credentials() -> Credentials:
    return Credentials(email="", password="")
