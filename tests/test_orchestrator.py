import asyncio
import os
from datetime import date

import pytest

from config import Settings
from errors import DateParseError, FetchWindowError, RateLimitError, StoreError
from pipeline.orchestrator import NeoWatcher
from providers.base import BaseAdapter
from store import ObservedStore


class FakeAdapter(BaseAdapter):
    def __init__(self, batches):
        self.batches = list(batches)
        self.calls = []

    async def fetch_objects(self, session, start_date, end_date):
        self.calls.append((start_date, end_date))
        batch = self.batches.pop(0)
        if isinstance(batch, Exception):
            raise batch
        return batch


class FlakyStore(ObservedStore):
    def __init__(self, path, failures=1):
        super().__init__(path)
        self.failures = failures

    def save(self, objects):
        if objects and self.failures:
            self.failures -= 1
            raise StoreError("medium unavailable")
        super().save(objects)


def ids(objects):
    return [o.neo_reference_id for o in objects]


@pytest.fixture
def settings():
    return Settings(first_offset=-7, offset=1, orbiting_body="Earth")


@pytest.fixture
def store(tmp_path):
    return ObservedStore(str(tmp_path / "observed.json"))


def make_watcher(adapter, store, settings):
    return NeoWatcher(adapter, store, settings, today=lambda: date(2016, 9, 7))


def test_end_to_end_ordering_and_growth(make_object, store, settings):
    a = make_object("A", approach_date="2016-09-08")
    b = make_object("B", approach_date="2016-09-07")
    c = make_object("C", approach_date="2016-09-09")
    d = make_object("D", approach_date="2016-09-10")
    adapter = FakeAdapter([[a, b, c], [a, d]])
    watcher = make_watcher(adapter, store, settings)

    novel = asyncio.run(watcher.fetch_novel_hazards(None, 3))
    assert ids(novel) == ["B", "A", "C"]
    assert sorted(store.ids()) == ["A", "B", "C"]

    novel = asyncio.run(watcher.fetch_novel_hazards(None, 3))
    assert ids(novel) == ["D"]
    assert sorted(store.ids()) == ["A", "B", "C", "D"]


def test_identical_data_reported_once(make_object, store, settings):
    batch = [make_object("A"), make_object("B", approach_date="2016-09-09")]
    watcher = make_watcher(FakeAdapter([batch, batch]), store, settings)
    assert asyncio.run(watcher.fetch_novel_hazards(None, 1))
    assert asyncio.run(watcher.fetch_novel_hazards(None, 1)) == []


def test_store_prefix_and_size(make_object, store, settings):
    store.save([make_object("Z")])
    previous = store.load()
    watcher = make_watcher(FakeAdapter([[make_object("Z"), make_object("Y")]]), store, settings)
    novel = asyncio.run(watcher.fetch_novel_hazards(None, 1))
    merged = store.load()
    assert merged[: len(previous)] == previous
    assert len(merged) == len(previous) + len(novel)


def test_non_hazardous_never_reported(make_object, store, settings):
    batch = [make_object("safe", hazardous=False), make_object("mars", body="Mars")]
    watcher = make_watcher(FakeAdapter([batch]), store, settings)
    assert asyncio.run(watcher.fetch_novel_hazards(None, 1)) == []
    assert store.ids() == []


@pytest.mark.parametrize("offset", [8, -8, 100])
def test_invalid_window_rejected_before_fetch(offset, store, settings):
    adapter = FakeAdapter([])
    watcher = make_watcher(adapter, store, settings)
    with pytest.raises(FetchWindowError):
        asyncio.run(watcher.fetch_novel_hazards(None, offset))
    assert adapter.calls == []
    assert not os.path.exists(store.path)


@pytest.mark.parametrize("offset", [-7, 0, 7])
def test_valid_window_accepted(offset, store, settings):
    adapter = FakeAdapter([[]])
    watcher = make_watcher(adapter, store, settings)
    assert asyncio.run(watcher.fetch_novel_hazards(None, offset)) == []
    assert len(adapter.calls) == 1


def test_first_fetch_and_fetch_use_configured_offsets(store, settings):
    adapter = FakeAdapter([[], []])
    watcher = make_watcher(adapter, store, settings)
    asyncio.run(watcher.first_fetch(None))
    asyncio.run(watcher.fetch(None))
    assert adapter.calls == [("2016-08-31", "2016-09-07"), ("2016-09-07", "2016-09-08")]


def test_parse_error_leaves_store_untouched(make_object, store, settings):
    store.save([make_object("A")])
    batch = [make_object("B"), make_object("C", approach_date="2016-9-x")]
    watcher = make_watcher(FakeAdapter([batch]), store, settings)
    with pytest.raises(DateParseError):
        asyncio.run(watcher.fetch_novel_hazards(None, 1))
    assert store.ids() == ["A"]


def test_rate_limit_propagates_without_side_effect(store, settings):
    watcher = make_watcher(FakeAdapter([RateLimitError("quota")]), store, settings)
    with pytest.raises(RateLimitError):
        asyncio.run(watcher.fetch_novel_hazards(None, 1))
    assert not os.path.exists(store.path)


def test_failed_save_reports_again_next_time(make_object, tmp_path, settings):
    store = FlakyStore(str(tmp_path / "observed.json"))
    batch = [make_object("A")]
    watcher = make_watcher(FakeAdapter([batch, batch]), store, settings)
    with pytest.raises(StoreError):
        asyncio.run(watcher.fetch_novel_hazards(None, 1))
    assert store.ids() == []
    assert ids(asyncio.run(watcher.fetch_novel_hazards(None, 1))) == ["A"]
