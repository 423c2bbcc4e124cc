from unittest.mock import MagicMock

from cinefeed.appctx import AppContext
from cinefeed.application.services.task_runner import InlineTaskRunner
from cinefeed.domain.models import Query


def _settings(values):
    settings = MagicMock()
    settings.get.side_effect = lambda key, default=None: values.get(key, default)
    return settings


def test_create_wires_feed_to_store(client, make_batch):
    client.pages[("dune", 1)] = make_batch(1, 3, total=9)
    context = AppContext.create(InlineTaskRunner(), settings=_settings({}), client=client)

    context.search.search("dune")

    assert context.result_store.snapshot().query == Query("dune")
    assert len(context.feed.items.value) == 3
    assert context.feed.has_more.value is True


def test_create_applies_feed_settings(client):
    settings = _settings({"feed.deduplicate": True, "feed.sentinel_threshold": 0.5})

    context = AppContext.create(InlineTaskRunner(), settings=settings, client=client)

    assert context.sentinel.threshold == 0.5
    assert context.feed._deduplicate is True


def test_create_builds_client_from_settings(monkeypatch):
    captured = {}

    class RecordingClient:
        def __init__(self, api_key, **kwargs):
            captured["api_key"] = api_key
            captured.update(kwargs)

        def close(self):
            captured["closed"] = True

    monkeypatch.setattr("cinefeed.appctx.ContentApiClient", RecordingClient)
    settings = _settings(
        {"api.base_url": "https://api.test/3", "api.language": "fr-FR", "api.timeout_sec": 3}
    )
    settings.api_key.return_value = "k"

    context = AppContext.create(InlineTaskRunner(), settings=settings)
    context.dispose()

    assert captured["api_key"] == "k"
    assert captured["base_url"] == "https://api.test/3"
    assert captured["language"] == "fr-FR"
    assert captured["timeout"] == 3.0
    assert captured["closed"] is True


def test_dispose_detaches_viewmodels(client):
    context = AppContext.create(InlineTaskRunner(), settings=_settings({}), client=client)

    context.dispose()
    context.search.search("after")

    assert context.feed.query.value == Query()
