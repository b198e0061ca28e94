import logging
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for CI environments where
# Python might not automatically include it (e.g., some GitHub
# Actions runners invoking pytest differently).
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from site_config.config_loader import CONFIG_PATH_ENV, ConfigLoader, load_site_config
from site_config.schemas import SiteConfig
from tests.factories.config_factories import fixture_path
from utils.logging import shutdown_logging


@pytest.fixture(autouse=True)
def reset_config_loader(monkeypatch):
    """Ensure ConfigLoader state and SITE_CONFIG_PATH do not leak between tests."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def restore_root_logging():
    """Undo setup_logging() so later tests keep pytest's own handlers."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    shutdown_logging()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def url_contacts_path() -> str:
    """First version of the site file: contacts stored as full URLs."""
    return fixture_path("site_url_contacts.yaml")


@pytest.fixture
def handle_contacts_path() -> str:
    """Second version of the site file: contacts stored as bare handles."""
    return fixture_path("site_handle_contacts.yaml")


@pytest.fixture
def url_contacts_config(url_contacts_path) -> SiteConfig:
    return load_site_config(url_contacts_path)


@pytest.fixture
def handle_contacts_config(handle_contacts_path) -> SiteConfig:
    return load_site_config(handle_contacts_path)
