"""
Pytest configuration for the Simple Server API.

Provides a ``TestClient`` bound to the application instance.  The
client is used as a context manager so that startup hooks run.
"""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from simple_server_api.app.main import app


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
