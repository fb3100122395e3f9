"""Shared fixtures."""
import pytest
from config import reset_config_manager
from patterns.singleton import SingletonMeta
from utils.logging_config import LoggerFactory


@pytest.fixture(autouse=True)
def isolated_state():
    """Give every test fresh singletons, config and logging handlers."""
    SingletonMeta.clear()
    reset_config_manager()
    LoggerFactory.reset()
    yield
    SingletonMeta.clear()
    reset_config_manager()
    LoggerFactory.reset()
