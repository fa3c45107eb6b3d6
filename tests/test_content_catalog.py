import pytest

from concentration.components.content_catalog import DEFAULT_CONTENTS, ContentCatalog
from concentration.errors import InsufficientContentError
from concentration.systems.board_generator import pair_count


def test_default_catalog_covers_largest_board():
    catalog = ContentCatalog()
    assert len(catalog) == 15
    assert len(catalog) >= max(pair_count(level) for level in range(1, 31))
    assert len(set(catalog.entries)) == len(catalog)


def test_take_returns_prefix_in_catalog_order():
    catalog = ContentCatalog()
    assert catalog.take(4) == list(DEFAULT_CONTENTS[:4])
    assert catalog.take(0) == []
    assert catalog.take(15) == list(DEFAULT_CONTENTS)


def test_take_beyond_catalog_raises():
    catalog = ContentCatalog(entries=["a", "b", "c"])
    with pytest.raises(InsufficientContentError) as info:
        catalog.take(4)
    assert info.value.requested == 4
    assert info.value.available == 3


def test_duplicate_entries_rejected():
    with pytest.raises(ValueError):
        ContentCatalog(entries=["a", "b", "a"])
