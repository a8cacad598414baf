from unittest import mock

import pytest


@pytest.fixture
def gateway_post(settings):
    """``requests.post`` as seen by the gateway client, with a key configured."""
    settings.AI_GATEWAY_API_KEY = "test-key"
    settings.AI_GATEWAY_MAX_RETRIES = 0
    with mock.patch("reviews.llm_client.requests.post") as post:
        yield post
