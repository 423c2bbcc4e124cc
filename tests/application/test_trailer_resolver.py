from unittest.mock import MagicMock

import pytest

from cinefeed.application.services.trailer_resolver import TrailerResolver, select_trailer_key
from cinefeed.domain.models import Item, Video
from cinefeed.errors import DecodeFailure, NetworkFailure
from cinefeed.errors.handler import ErrorSeverity


def test_select_prefers_first_trailer():
    videos = [
        Video(key="teaser", type="Teaser"),
        Video(key="t1", type="Trailer"),
        Video(key="t2", type="Trailer"),
    ]

    assert select_trailer_key(videos) == "t1"


def test_select_falls_back_to_first_video():
    videos = [Video(key="clip", type="Clip"), Video(key="bts", type="Behind the Scenes")]

    assert select_trailer_key(videos) == "clip"


def test_select_empty():
    assert select_trailer_key([]) is None


def test_resolve_fetches_every_time(client):
    client.videos[42] = [Video(key="k", type="Trailer")]
    resolver = TrailerResolver(client)

    assert resolver.resolve(Item(id=42)) == "k"
    assert resolver.resolve(Item(id=42)) == "k"
    assert client.video_calls == [42, 42]


@pytest.mark.parametrize("error", [NetworkFailure("offline"), DecodeFailure("garbage")])
def test_resolve_absorbs_fetch_errors(client, error):
    client.videos[1] = error
    handler = MagicMock()
    resolver = TrailerResolver(client, handler)

    assert resolver.resolve(Item(id=1)) is None
    handler.handle.assert_called_once_with(error, ErrorSeverity.WARNING, {"item_id": 1})


def test_resolve_without_handler_logs(client, caplog):
    client.videos[1] = NetworkFailure("offline")
    resolver = TrailerResolver(client)

    with caplog.at_level("WARNING"):
        assert resolver.resolve(Item(id=1)) is None

    assert "offline" in caplog.text
