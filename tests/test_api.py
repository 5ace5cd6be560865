import pytest
from fastapi.testclient import TestClient
from starlette.datastructures import FormData

from rotorwash.api.v1.settings import parse_form_input
from rotorwash.core.exceptions import PersistenceUnavailableError
from rotorwash.main import create_app

from tests.conftest import OPTION_NAME, UnavailableBackend


def _field(key):
    return f"{OPTION_NAME}[{key}]"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_responses_carry_request_id_and_security_headers(client):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "X-Process-Time" in response.headers


def test_settings_page_renders_theme_sections(client):
    response = client.get("/settings")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<h2>Settings for RotorWash</h2>" in response.text
    assert '<h3 id="rw-facebook-settings">Facebook Settings</h3>' in response.text
    assert f'name="{_field("paypal_currency")}"' in response.text


def test_valid_submission_is_saved(client, app_backend):
    response = client.post(
        "/settings",
        data={_field("fb_app_id"): " 12345 ", _field("paypal_currency"): "EUR"},
    )

    assert response.status_code == 200
    assert "Settings saved." in response.text
    stored = app_backend.get(OPTION_NAME)
    assert stored["fb_app_id"] == "12345"
    assert stored["paypal_currency"] == "EUR"


def test_invalid_submission_is_rejected(client, app_backend):
    response = client.post(
        "/settings",
        data={_field("fb_app_id"): "12345", _field("paypal_currency"): "XXX"},
    )

    assert response.status_code == 422
    assert "Choose Your Currency: invalid option" in response.text
    assert 'value="12345"' in response.text
    assert app_backend.get(OPTION_NAME) is None


def test_submission_with_storage_down_returns_503(app_settings):
    app = create_app(app_settings, backend=UnavailableBackend(), configure_logging=False)
    with TestClient(app) as client:
        page = client.get("/settings")
        response = client.post("/settings", data={_field("fb_app_id"): "12345"})

    assert page.status_code == 200
    assert "Default values are shown." in page.text
    assert response.status_code == 503
    assert "Your changes were not saved." in response.text


def test_footer_includes_sdk_once_app_id_is_saved(client):
    assert client.get("/theme/footer").text == ""

    client.post("/settings", data={_field("fb_app_id"): "121970801204701"})
    response = client.get("/theme/footer")

    assert '<div id="fb-root"></div>' in response.text
    assert "appId=121970801204701" in response.text


def test_head_describes_site_by_default(client):
    response = client.get("/theme/head")

    assert response.status_code == 200
    assert '<meta property="og:type" content="website" />' in response.text
    assert '<meta property="og:title" content="Copter Labs" />' in response.text
    assert 'property="fb:admins"' not in response.text


def test_head_describes_single_post(client):
    client.post("/settings", data={_field("fb_admins"): "633550295"})
    response = client.get(
        "/theme/head",
        params={
            "post_id": 7,
            "title": "Hello World",
            "permalink": "https://example.com/hello-world",
            "content": "<p>First post.</p>",
        },
    )

    assert '<meta property="og:type" content="article" />' in response.text
    assert '<meta property="og:url" content="https://example.com/hello-world" />' in response.text
    assert '<meta property="og:description" content="First post." />' in response.text
    assert '<meta property="fb:admins" content="633550295" />' in response.text


def test_donate_button(client):
    assert client.get("/theme/donate").text == ""

    client.post(
        "/settings",
        data={_field("paypal_addr"): "donate@example.com", _field("paypal_currency"): "GBP"},
    )
    response = client.get("/theme/donate", params={"post_id": 7})

    assert 'name="business" value="donate@example.com"' in response.text
    assert 'name="item_number" value="7"' in response.text
    assert 'name="currency_code" value="GBP"' in response.text


@pytest.mark.parametrize(
    "items, expected",
    [
        ([(_field("fb_app_id"), "1")], {"fb_app_id": "1"}),
        ([("fb_app_id", "1")], {"fb_app_id": "1"}),
        ([("other_option[fb_app_id]", "1")], {}),
        ([(_field(""), "1")], {}),
        ([(_field("fb_app_id"), "1"), (_field("fb_app_id"), "2")], {"fb_app_id": "2"}),
    ],
)
def test_parse_form_input(items, expected):
    assert parse_form_input(FormData(items), OPTION_NAME) == expected


def test_escaped_app_errors_are_rendered_as_json(app_settings):
    app = create_app(app_settings, backend=UnavailableBackend(), configure_logging=False)

    @app.get("/boom")
    def boom():
        raise PersistenceUnavailableError("read", OPTION_NAME)

    with TestClient(app) as client:
        response = client.get("/boom")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "PERSISTENCE_UNAVAILABLE"


def test_unreachable_database_still_serves_the_page(app_settings, tmp_path):
    config = app_settings.model_copy(
        update={
            "OPTION_BACKEND": "sql",
            "DATABASE_URL": f"sqlite:///{tmp_path / 'missing' / 'options.db'}",
        }
    )
    app = create_app(config, configure_logging=False)

    with TestClient(app) as client:
        page = client.get("/settings")
        response = client.post("/settings", data={_field("fb_app_id"): "12345"})

    assert page.status_code == 200
    assert "Default values are shown." in page.text
    assert response.status_code == 503
