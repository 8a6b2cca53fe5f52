"""
Pytest configuration and shared fixtures for etag_middleware tests.
"""


import pytest


@pytest.fixture
def hello_body() -> bytes:
    """Provide the response body used throughout the scenarios."""
    return b"hello"


@pytest.fixture
def strong_hello_etag() -> str:
    """CRC-32 of b"hello" in strong form."""
    return '"3610a686"'


@pytest.fixture
def weak_hello_etag() -> str:
    """CRC-32 of b"hello" in weak form."""
    return 'W/"3610a686"'
