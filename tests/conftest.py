import pytest

from tests.helpers import random_response, random_secret, random_site_key


@pytest.fixture
def secret() -> str:
    return random_secret()


@pytest.fixture
def response_token() -> str:
    return random_response()


@pytest.fixture
def site_key() -> str:
    return random_site_key()
