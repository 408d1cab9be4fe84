"""Tests for template downloads and CSV export."""

from __future__ import annotations

import pytest

from civicfolio.services.export_csv import (
    HEADERS,
    TEMPLATES,
    export_entities_csv,
    template_filename,
    write_template,
)
from civicfolio.services.import_csv import tokenize
from civicfolio.services.importers import DataKind, import_csv_path


def test_template_headers_match_importable_columns():
    assert HEADERS[DataKind.ACTION] == [
        "name", "description", "status", "sector", "impactArea",
        "budget", "startDate", "endDate", "targetOutcomes",
    ]
    assert HEADERS[DataKind.CONNECTION][0] == "sourceId"


def test_templates_have_header_and_one_row():
    for text in TEMPLATES.values():
        assert len(tokenize(text)) == 2


def test_template_filename_accepts_plural():
    assert template_filename("actors") == "actors_template.csv"
    assert template_filename(DataKind.ASSET) == "assets_template.csv"


def test_write_template(tmp_path):
    path = write_template(DataKind.CONNECTION, tmp_path / "nested" / "conn.csv")

    assert path.read_text(encoding="utf-8") == TEMPLATES[DataKind.CONNECTION]


@pytest.mark.parametrize(
    "kind, attr",
    [
        (DataKind.ACTION, "actions"),
        (DataKind.ACTOR, "actors"),
        (DataKind.ASSET, "assets"),
        (DataKind.CONNECTION, "connections"),
    ],
)
def test_export_can_be_imported_again(tmp_path, baseline, kind, attr):
    entities = getattr(baseline, attr)
    out = export_entities_csv(kind=kind, entities=entities, output_path=tmp_path / f"{attr}.csv")

    result = import_csv_path(out, kind)

    assert result.success
    assert [e.name if hasattr(e, "name") else e.source_id for e in result.produced] == [
        e.name if hasattr(e, "name") else e.source_id for e in entities
    ]


def test_exported_action_fields(tmp_path, baseline):
    out = export_entities_csv(kind="actions", entities=baseline.actions[:1], output_path=tmp_path / "a.csv")

    action = import_csv_path(out, DataKind.ACTION).produced[0]
    original = baseline.actions[0]
    assert action.budget == original.budget
    assert action.target_outcomes == original.target_outcomes
    assert action.timeline.start_date == original.timeline.start_date
    assert action.status is original.status


def test_line_breaks_in_values_do_not_round_trip(tmp_path, baseline):
    asset = baseline.assets[0].model_copy(update={"description": "line one\nline two"})
    out = export_entities_csv(kind=DataKind.ASSET, entities=[asset], output_path=tmp_path / "assets.csv")

    result = import_csv_path(out, DataKind.ASSET)

    assert result.success
    assert result.count == 2
    assert result.produced[0].description != asset.description
