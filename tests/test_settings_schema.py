import pytest
from jsonschema import ValidationError

from cinefeed.settings.schema import DEFAULT_SETTINGS, merge_with_defaults, validate_settings


def test_defaults_validate():
    validate_settings(DEFAULT_SETTINGS)


def test_merge_keeps_untouched_nested_defaults():
    merged = merge_with_defaults({"feed": {"deduplicate": True}})

    assert merged["feed"]["deduplicate"] is True
    assert merged["feed"]["sentinel_threshold"] == 1.0
    assert merged["api"] == DEFAULT_SETTINGS["api"]


def test_merge_does_not_mutate_defaults():
    merge_with_defaults({"api": {"key": "secret"}})

    assert DEFAULT_SETTINGS["api"]["key"] == ""


@pytest.mark.parametrize(
    "payload",
    [
        {"schema": "other@1"},
        {"api": {"timeout_sec": 0}},
        {"feed": {"sentinel_threshold": 0}},
        {"watch_later": [{"title": "no id"}]},
    ],
)
def test_invalid_settings_rejected(payload):
    with pytest.raises(ValidationError):
        merge_with_defaults(payload)
