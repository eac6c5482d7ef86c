"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A valid registration payload (wire format)
- A valid domain registration request
"""

import pytest

from src.domain.account import RegistrationRequest


@pytest.fixture
def valid_payload() -> dict[str, str]:
    """Registration body with every field inside its bounds."""
    return {
        "firstName": "Ann",
        "lastName": "Lee",
        "username": "annlee",
        "email": "ann.lee@example.com",
        "password": "Str0ngPass!",
    }


@pytest.fixture
def valid_request() -> RegistrationRequest:
    """Domain registration request with every field inside its bounds."""
    return RegistrationRequest(
        first_name="Ann",
        last_name="Lee",
        username="annlee",
        email="ann.lee@example.com",
        password="Str0ngPass!",
    )
