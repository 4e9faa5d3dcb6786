"""Pytest fixtures for testing."""

import json
import logging
from typing import Any

import pytest
from fastapi.testclient import TestClient

from json_response.core.config import Settings
from main import create_app


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, env="dev", log_level="DEBUG")


@pytest.fixture
def client(settings: Settings, restore_root_logger) -> TestClient:
    return TestClient(create_app(settings))


def parse_body(response) -> dict[str, Any]:
    """Decode the JSON body of a starlette Response."""
    return json.loads(response.body.decode("utf-8"))
