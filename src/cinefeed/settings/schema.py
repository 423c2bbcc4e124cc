"""Schema helpers for the application settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import API_BASE_URL, API_LANGUAGE, REQUEST_TIMEOUT_SEC, SENTINEL_THRESHOLD

_ITEM_LIST = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["id"],
        "properties": {"id": {"type": ["integer", "string"]}},
        "additionalProperties": True,
    },
}

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "cinefeed/settings.schema.json",
    "type": "object",
    "required": ["schema", "api", "feed"],
    "properties": {
        "schema": {"const": "cinefeed/settings@1"},
        "api": {
            "type": "object",
            "properties": {
                "base_url": {"type": "string", "minLength": 1},
                "key": {"type": "string"},
                "language": {"type": "string"},
                "timeout_sec": {"type": "number", "exclusiveMinimum": 0},
            },
            "additionalProperties": True,
        },
        "feed": {
            "type": "object",
            "properties": {
                "sentinel_threshold": {
                    "type": "number",
                    "exclusiveMinimum": 0,
                    "maximum": 1,
                },
                "deduplicate": {"type": "boolean"},
            },
            "additionalProperties": True,
        },
        "starred": _ITEM_LIST,
        "watch_later": _ITEM_LIST,
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "cinefeed/settings@1",
    "api": {
        "base_url": API_BASE_URL,
        "key": "",
        "language": API_LANGUAGE,
        "timeout_sec": REQUEST_TIMEOUT_SEC,
    },
    "feed": {
        "sentinel_threshold": SENTINEL_THRESHOLD,
        "deduplicate": False,
    },
    "starred": [],
    "watch_later": [],
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)
_NESTED_SECTIONS = ("api", "feed")


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in _NESTED_SECTIONS and isinstance(value, dict):
                target = merged.setdefault(key, {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
