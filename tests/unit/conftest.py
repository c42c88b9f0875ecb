"""Pytest configuration and shared fixtures for unit tests."""

import pytest
import responses as responses_lib

from tests.unit.fixtures import (
    FIRST_PAGE_URL,
    PAGE_2_URL,
    PAGE_3_URL,
    FakeGateway,
    make_page,
    make_result,
)


@pytest.fixture(autouse=True)
def _no_api_url_override(monkeypatch):
    """Keep ``RICKANDMORTY_API_URL`` from the environment out of the tests."""
    monkeypatch.delenv("RICKANDMORTY_API_URL", raising=False)


@pytest.fixture
def first_page_payload():
    """First page with one record and only a ``next`` link."""
    return make_page(
        [
            {
                "id": 1,
                "name": "Rick",
                "status": "Alive",
                "species": "Human",
                "type": None,
                "gender": "Male",
                "image": "https://img/1.jpeg",
            }
        ],
        next=PAGE_2_URL,
    )


@pytest.fixture
def second_page_payload():
    """Middle page: both links set."""
    return make_page(
        [make_result(21, "Aqua Morty"), make_result(22, "Aqua Rick")],
        next=PAGE_3_URL,
        prev=FIRST_PAGE_URL,
    )


@pytest.fixture
def last_page_payload():
    """Last page: only a ``prev`` link."""
    return make_page(
        [make_result(41, "Toxic Rick", type="Rick's Toxic Side")],
        prev=PAGE_2_URL,
    )


@pytest.fixture
def fake_gateway(first_page_payload, second_page_payload, last_page_payload):
    return FakeGateway(
        {
            FIRST_PAGE_URL: first_page_payload,
            PAGE_2_URL: second_page_payload,
            PAGE_3_URL: last_page_payload,
        }
    )


@pytest.fixture
def mocked_responses():
    """Activate ``responses`` for the duration of a test."""
    with responses_lib.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps
