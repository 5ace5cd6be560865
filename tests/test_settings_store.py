from rotorwash.core.exceptions import ValidationError
from rotorwash.repositories.option_backends import InMemoryOptionBackend
from rotorwash.schemas.settings import FieldDefinition, SettingsSection
from rotorwash.services.settings import FieldRegistry, SettingsStore

from tests.conftest import OPTION_NAME, UnavailableBackend


def test_load_missing_option_returns_defaults(store):
    blob = store.load(OPTION_NAME)

    assert blob == {"fb_app_id": "", "currency": ""}
    assert blob.fallback is False


def test_load_ignores_undeclared_stored_keys(registry):
    backend = InMemoryOptionBackend({OPTION_NAME: {"fb_app_id": "42", "legacy_key": "x"}})
    blob = SettingsStore(backend, registry).load(OPTION_NAME)

    assert blob == {"fb_app_id": "42", "currency": ""}


def test_load_does_not_write(store, backend):
    store.load(OPTION_NAME)
    assert backend.get(OPTION_NAME) is None


def test_invalid_select_value_is_rejected_and_nothing_is_written(store):
    store.save(OPTION_NAME, {"fb_app_id": "1", "currency": "GBP"})
    before = store.load(OPTION_NAME)

    result = store.save(OPTION_NAME, {"fb_app_id": "999", "currency": "YEN"})

    assert not result.is_success
    assert result.errors == [ValidationError("currency", "invalid option", "YEN")]
    assert store.load(OPTION_NAME) == before


def test_all_invalid_fields_are_reported_together(registry):
    section = SettingsSection(
        id="more",
        title="More",
        fields=(
            FieldDefinition(key="size", label="Size", kind="select", options=(("s", "Small"), ("l", "Large"))),
        ),
    )
    registry = FieldRegistry([*registry.get_sections(), section])
    store = SettingsStore(InMemoryOptionBackend(), registry)

    result = store.save(OPTION_NAME, {"currency": "XXX", "size": "xl"})

    assert sorted(e.field for e in result.validation_errors) == ["currency", "size"]
    assert all(e.reason == "invalid option" for e in result.validation_errors)


def test_round_trip_with_absent_fields_falling_back(store):
    result = store.save(OPTION_NAME, {"currency": "EUR"})

    assert result.is_success
    assert store.load(OPTION_NAME) == {"fb_app_id": "", "currency": "EUR"}


def test_text_values_are_trimmed(store):
    store.save(OPTION_NAME, {"fb_app_id": "  12345 \n"})
    assert store.load(OPTION_NAME)["fb_app_id"] == "12345"


def test_resaving_loaded_blob_is_a_no_op(store, backend):
    store.save(OPTION_NAME, {"fb_app_id": "12345", "currency": "USD"})
    first = store.load(OPTION_NAME)

    result = store.save(OPTION_NAME, store.load(OPTION_NAME))

    assert result.is_success
    assert store.load(OPTION_NAME) == first


def test_resaving_defaults_keeps_select_unset(store):
    result = store.save(OPTION_NAME, store.load(OPTION_NAME))

    assert result.is_success
    assert store.load(OPTION_NAME)["currency"] == ""


def test_save_replaces_the_whole_blob(store):
    store.save(OPTION_NAME, {"fb_app_id": "12345", "currency": "USD"})
    store.save(OPTION_NAME, {"currency": "GBP"})

    assert store.load(OPTION_NAME) == {"fb_app_id": "", "currency": "GBP"}


def test_scoped_save_keeps_values_of_other_sections(facebook_section):
    other = SettingsSection(
        id="paypal",
        title="PayPal",
        fields=(FieldDefinition(key="paypal_addr", label="PayPal Email"),),
    )
    store = SettingsStore(InMemoryOptionBackend(), FieldRegistry([facebook_section, other]))
    store.save(OPTION_NAME, {"fb_app_id": "12345", "paypal_addr": "me@example.com"})

    store.save(OPTION_NAME, {"paypal_addr": "you@example.com"}, sections=[other])

    assert store.load(OPTION_NAME) == {
        "fb_app_id": "12345",
        "currency": "",
        "paypal_addr": "you@example.com",
    }


def test_unknown_submitted_keys_are_ignored(store, backend):
    result = store.save(OPTION_NAME, {"fb_app_id": "1", "evil": "<script>"})

    assert result.is_success
    assert "evil" not in backend.get(OPTION_NAME)


def test_unavailable_backend_falls_back_to_defaults(registry):
    store = SettingsStore(UnavailableBackend(), registry)
    blob = store.load(OPTION_NAME)

    assert blob.fallback is True
    assert blob == registry.defaults()


def test_facebook_scenario(store):
    rejected = store.save(OPTION_NAME, {"fb_app_id": "12345", "currency": "XXX"})

    assert len(rejected.errors) == 1
    assert rejected.errors[0].field == "currency"
    assert store.load(OPTION_NAME) == {"fb_app_id": "", "currency": ""}

    accepted = store.save(OPTION_NAME, {"fb_app_id": "12345", "currency": "EUR"})

    assert accepted.is_success
    assert store.load(OPTION_NAME) == {"fb_app_id": "12345", "currency": "EUR"}


def test_rejection_serializes_each_error(store):
    result = store.save(OPTION_NAME, {"currency": "XXX"})

    payload = result.to_dict()

    assert payload["success"] is False
    assert [e["code"] for e in payload["errors"]] == ["INVALID_OPTION"]
    assert payload["errors"][0]["details"]["field"] == "currency"


def test_non_mapping_stored_value_loads_as_defaults(registry, caplog):
    class CorruptBackend(InMemoryOptionBackend):
        def get(self, name):
            return ["fb_app_id", "12345"]

    store = SettingsStore(CorruptBackend(), registry)

    blob = store.load(OPTION_NAME)

    assert blob == registry.defaults()
    assert blob.fallback is False
    assert "not a mapping" in caplog.text
