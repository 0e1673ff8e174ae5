"""
Shared fixtures for the Story Spoiler tests
"""
import json

import pytest
import requests

from story_spoiler import config
from story_spoiler.models import StoryRunState
from story_spoiler.services.story_client import StorySpoilerClient, StorySpoilerAPIError


@pytest.fixture(scope="session")
def api_client():
    """Log in once and share the authenticated client across the run"""
    try:
        client = StorySpoilerClient.login(config.BASE_URL, config.USERNAME, config.PASSWORD)
    except StorySpoilerAPIError as e:
        pytest.skip(f"Login to {config.BASE_URL} failed: {e}")

    yield client
    client.close()


@pytest.fixture(scope="session")
def run_state():
    """Story id carried from the create test to the edit and delete tests"""
    return StoryRunState()


def build_response(status_code, payload=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = config.BASE_URL
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode()
    else:
        response._content = json.dumps(payload).encode()
        response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def make_response():
    """Factory for canned requests.Response objects"""
    return build_response
