import pytest

from cinefeed.domain.models import Item, Query, ResultBatch
from cinefeed.errors import DecodeFailure


class TestQuery:
    def test_whitespace_is_stripped(self):
        assert Query("  alien ") == Query("alien")

    def test_empty_is_discover(self):
        assert Query().is_discover
        assert Query.from_text(None).is_discover
        assert Query.from_text("   ").is_discover
        assert not Query("heat").is_discover

    def test_str(self):
        assert str(Query()) == "<discover>"
        assert str(Query("heat")) == "heat"


class TestItem:
    def test_from_payload(self):
        item = Item.from_payload(
            {"id": 603, "title": "The Matrix", "overview": "Neo.", "vote_average": 8.2, "adult": False}
        )

        assert item.id == 603
        assert item.title == "The Matrix"
        assert item.vote_average == 8.2
        assert item.raw["adult"] is False

    def test_missing_fields_default(self):
        item = Item.from_payload({"id": 1})

        assert item.title == ""
        assert item.poster_path is None

    @pytest.mark.parametrize("payload", [None, [], {"title": "no id"}])
    def test_malformed(self, payload):
        with pytest.raises(DecodeFailure):
            Item.from_payload(payload)

    def test_raw_ignored_for_equality(self):
        assert Item(id=1, title="A", raw={"x": 1}) == Item(id=1, title="A")

    def test_to_payload_prefers_raw(self):
        payload = {"id": 7, "title": "Up", "genre_ids": [16]}

        assert Item.from_payload(payload).to_payload() == payload
        assert Item(id=8, title="Heat").to_payload()["title"] == "Heat"


def test_empty_batch():
    assert ResultBatch().is_empty
    assert ResultBatch().total_available == 0
