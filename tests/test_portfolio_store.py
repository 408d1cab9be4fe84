"""Tests for the session portfolio store."""

from __future__ import annotations

import threading

from civicfolio.models import ImportBatch, Portfolio, PortfolioMeta
from civicfolio.services.importers import DataKind, import_file
from civicfolio.services.seed import build_baseline_portfolio
from civicfolio.services.store import PortfolioStore
from civicfolio.utils import utcnow


def _batch(text: str, kind: DataKind) -> ImportBatch:
    result = import_file(text, kind)
    assert result.success
    return result.to_batch()


def test_merge_appends_after_existing_in_batch_order(store, actions_csv):
    before = [a.id for a in store.current().actions]
    batch = _batch(actions_csv, DataKind.ACTION)

    store.merge_imported(batch)

    after = [a.id for a in store.current().actions]
    assert len(after) == len(before) + 2
    assert after[: len(before)] == before
    assert after[len(before):] == [a.id for a in batch.actions]


def test_merge_does_not_dedupe(store, actors_csv):
    batch = _batch(actors_csv, DataKind.ACTOR)
    start = len(store.current().actors)

    store.merge_imported(batch)
    store.merge_imported(batch)

    assert len(store.current().actors) == start + 2


def test_merge_replaces_snapshot(store, assets_csv):
    snapshot = store.current()

    store.merge_imported(_batch(assets_csv, DataKind.ASSET))

    assert store.current() is not snapshot
    assert len(snapshot.assets) == len(store.current().assets) - 1


def test_reset_restores_seed_snapshot(store, actions_csv, actors_csv):
    store.merge_imported(_batch(actions_csv, DataKind.ACTION))
    store.merge_imported(_batch(actors_csv, DataKind.ACTOR))

    store.reset_to_baseline()

    assert store.current().model_dump() == build_baseline_portfolio().model_dump()
    assert store.current().model_dump() == store.baseline().model_dump()
    assert store.imported().is_empty()


def test_reset_discards_replaced_portfolio(store):
    now = utcnow()
    store.replace(Portfolio(id="other", name="Other", meta=PortfolioMeta(created_at=now, updated_at=now)))
    assert store.current().id == "other"

    store.reset_to_baseline()

    assert store.current().id == "portfolio-1"


def test_baseline_is_isolated_from_caller_mutation(baseline):
    store = PortfolioStore(baseline)
    baseline.actions.clear()

    store.reset_to_baseline()

    assert len(store.current().actions) == 5


def test_imported_tracks_merges_per_collection(store, actions_csv, assets_csv):
    store.merge_imported(_batch(actions_csv, DataKind.ACTION))
    store.merge_imported(_batch(assets_csv, DataKind.ASSET))

    assert store.imported().counts() == {"actions": 2, "actors": 0, "assets": 1, "connections": 0}

    store.clear_imported()

    assert store.imported().is_empty()
    assert len(store.current().actions) == 5


def test_concurrent_merges_keep_every_entity(store, actors_csv):
    batch = _batch(actors_csv, DataKind.ACTOR)
    start = len(store.current().actors)

    threads = [threading.Thread(target=store.merge_imported, args=(batch,)) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.current().actors) == start + 8


def test_baseline_returns_independent_copy(store):
    copy = store.baseline()
    copy.actions.clear()

    assert len(store.baseline().actions) == 5
    store.reset_to_baseline()
    assert len(store.current().actions) == 5
