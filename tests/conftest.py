"""Pytest configuration and fixtures."""

import os

import pytest
import pytest_asyncio

from uiengine.clients import ActionClient
from uiengine.core import Settings, get_settings
from uiengine.runtime import ActionDispatcher, ReportLog
from uiengine.schema import DocumentLoader, validate_or_raise
from uiengine.templates import get_template


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["UI_LOG_LEVEL"] = "DEBUG"
    os.environ["UI_ENABLE_CACHE"] = "false"


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def loader():
    """Loader with caching on, independent of the environment."""
    return DocumentLoader(Settings(enable_cache=True, cache_size=8))


@pytest.fixture
def reports():
    """Report sink that keeps everything."""
    return ReportLog()


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def action_client():
    """Action HTTP client, closed after the test."""
    client = ActionClient(timeout=5.0)
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def dispatcher(action_client):
    """Dispatcher over the test HTTP client."""
    return ActionDispatcher(action_client)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def text_document():
    """Single static text node."""
    return {"root": {"id": "r", "type": "text", "text": "Hi"}}


@pytest.fixture
def log_document():
    """Input plus a button that logs the input's value."""
    return {
        "root": {
            "id": "root",
            "type": "container",
            "children": [
                {"id": "name", "type": "input"},
                {
                    "id": "go",
                    "type": "button",
                    "text": "Go",
                    "action": {"type": "log", "payload": {"n": {"component": "name", "path": "value"}}},
                },
            ],
        }
    }


@pytest.fixture
def api_document():
    """Input plus an api_call button with global headers and a token."""
    return {
        "name": "API",
        "config": {
            "authToken": "secret",
            "endpoints": {"save": "https://api.example.com/save"},
            "headers": {"X-Client": "uiengine"},
        },
        "root": {
            "id": "root",
            "type": "container",
            "direction": "row",
            "children": [
                {"id": "title", "type": "input", "value": "draft"},
                {
                    "id": "save",
                    "type": "button",
                    "text": "Save",
                    "action": {
                        "type": "api_call",
                        "endpoint": "save",
                        "payload": {
                            "title": {"component": "title", "path": "value"},
                            "source": "editor",
                        },
                        "successMessage": "Saved",
                    },
                },
            ],
        },
    }


@pytest.fixture
def chat_document():
    """Bundled chat template, validated."""
    return validate_or_raise(get_template("chat"))
