import os
import sys

import pytest

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from school_console.config import Settings
from school_console.interfaces.app import ConsoleApp
from school_console.main import build_context


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Настройка тестового окружения"""
    # Без искусственной задержки и с дешёвым хешированием
    monkeypatch.setenv("STORE_LATENCY_MS", "0")
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "1000")


@pytest.fixture
def test_settings(setup_test_environment):
    # читает переменные окружения, выставленные выше
    return Settings(SEED_DEMO_DATA=True)


@pytest.fixture
def context(test_settings):
    ctx = build_context(test_settings)
    yield ctx
    ctx.notifications.close()


@pytest.fixture
def facade(context):
    return context.facade


@pytest.fixture
def store(facade):
    return facade.store


@pytest.fixture
def notifications(context):
    return context.notifications


@pytest.fixture
def app(context):
    return ConsoleApp(context)
