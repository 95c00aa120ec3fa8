"""
Pytest configuration for integration tests
"""

import json
import pytest


@pytest.fixture
def api(client):
    """Small JSON helper around the test client."""

    class Api:
        def post(self, url, payload):
            return client.post(url, data=json.dumps(payload), content_type='application/json')

        def get(self, url):
            return client.get(url)

    return Api()
