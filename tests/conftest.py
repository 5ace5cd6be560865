"""
Shared pytest fixtures for the theme settings tests.
"""
import pytest
from fastapi.testclient import TestClient

from rotorwash.config.settings import Settings
from rotorwash.core.exceptions import PersistenceUnavailableError
from rotorwash.main import create_app
from rotorwash.repositories.option_backends import InMemoryOptionBackend
from rotorwash.schemas.settings import FieldDefinition, FieldKind, SettingsSection
from rotorwash.services.settings import FieldRegistry, SettingsPageComposer, SettingsStore

OPTION_NAME = "rw_theme_settings"


class UnavailableBackend:
    """Backend whose storage is always down."""

    def __init__(self):
        self.writes = 0

    def get(self, name):
        raise PersistenceUnavailableError("read", name)

    def set(self, name, value):
        self.writes += 1
        raise PersistenceUnavailableError("write", name)


@pytest.fixture
def facebook_section():
    """Section with one text field and one select field with no default."""
    return SettingsSection(
        id="facebook",
        title="Facebook Settings",
        description="Facebook settings.\n\nMultiple admin values must be comma-separated.",
        fields=(
            FieldDefinition(key="fb_app_id", label="Facebook App ID", default=""),
            FieldDefinition(
                key="currency",
                label="Currency",
                kind=FieldKind.SELECT,
                options=(("USD", "USD", "$"), ("EUR", "EUR", "€"), ("GBP", "GBP", "£")),
            ),
        ),
    )


@pytest.fixture
def registry(facebook_section):
    return FieldRegistry([facebook_section]).freeze()


@pytest.fixture
def backend():
    return InMemoryOptionBackend()


@pytest.fixture
def store(backend, registry):
    return SettingsStore(backend, registry)


@pytest.fixture
def composer(store, registry):
    return SettingsPageComposer(store, registry, OPTION_NAME, page_title="Settings for RotorWash")


@pytest.fixture
def app_settings():
    return Settings(
        OPTION_BACKEND="memory",
        OPTION_NAME=OPTION_NAME,
        THEME_NAME="RotorWash",
        SITE_NAME="Copter Labs",
        SITE_DESCRIPTION="Web design & development",
        SITE_URL="https://example.com",
        DEFAULT_OG_IMAGE="https://example.com/default.jpg",
        ENVIRONMENT="testing",
    )


@pytest.fixture
def app_backend():
    return InMemoryOptionBackend()


@pytest.fixture
def client(app_settings, app_backend):
    app = create_app(app_settings, backend=app_backend, configure_logging=False)
    with TestClient(app) as test_client:
        yield test_client
