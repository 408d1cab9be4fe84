"""Headless smoke tests for the desktop views and controllers."""

from __future__ import annotations

from pathlib import Path

import flet as ft

from civicfolio.desktop import controllers
from civicfolio.desktop.app import ROUTE_BUILDERS, build_router
from civicfolio.desktop.charts import (
    network_png,
    render_network_safely,
    render_timeline_safely,
    timeline_png,
)
from civicfolio.desktop.views import dashboard, data_import
from civicfolio.services.export_csv import TEMPLATES
from civicfolio.services.graph import build_graph
from civicfolio.services.importers import DataKind
from civicfolio.services.timeline import derive_timeline


def _walk(control):
    yield control
    for attr in ("controls", "content", "actions", "leading", "title", "subtitle", "trailing"):
        child = getattr(control, attr, None)
        if isinstance(child, list):
            for item in child:
                if isinstance(item, ft.Control):
                    yield from _walk(item)
        elif isinstance(child, ft.Control):
            yield from _walk(child)


def _texts(view: ft.View) -> list[str]:
    return [c.value for c in _walk(view) if isinstance(c, ft.Text) and isinstance(c.value, str)]


def test_view_builders_render(app_ctx, dummy_page):
    for build in (dashboard.build_dashboard_view, data_import.build_data_import_view):
        view = build(app_ctx, dummy_page)
        assert isinstance(view, ft.View)
        assert view.route


def test_dashboard_shows_metrics_and_milestones(app_ctx, dummy_page):
    texts = _texts(dashboard.build_dashboard_view(app_ctx, dummy_page))

    assert "Sustainable City Transformation" in texts
    assert "$15,000,000 total funding" in texts
    assert "Recent Milestones" in texts
    assert "System Launch" in texts


def test_dashboard_renders_empty_portfolio(app_ctx, dummy_page):
    app_ctx.store.replace(
        app_ctx.store.current().model_copy(
            update={"actions": [], "actors": [], "assets": [], "connections": [], "impacts": []}
        )
    )

    texts = _texts(dashboard.build_dashboard_view(app_ctx, dummy_page))

    assert "No milestones yet" in texts


def test_network_render_failure_is_degraded(baseline):
    def broken_renderer(_graph):
        raise RuntimeError("engine init failed")

    image = render_network_safely(build_graph(baseline), renderer=broken_renderer)

    assert image.available is False
    assert image.error == "engine init failed"


def test_chart_pngs_are_written(baseline):
    assert network_png(build_graph(baseline)).stat().st_size > 0
    assert timeline_png(derive_timeline(baseline)).stat().st_size > 0


def _images(view: ft.View) -> list[ft.Image]:
    return [c for c in _walk(view) if isinstance(c, ft.Image)]


def test_dashboard_shows_timeline_axis_image(app_ctx, dummy_page):
    images = _images(dashboard.build_dashboard_view(app_ctx, dummy_page))

    assert [image.height for image in images] == [360, 140]
    assert all(Path(image.src).stat().st_size > 0 for image in images)


def test_empty_dashboard_has_no_timeline_image(app_ctx, dummy_page):
    app_ctx.store.replace(app_ctx.store.current().model_copy(update={"actions": []}))

    images = _images(dashboard.build_dashboard_view(app_ctx, dummy_page))

    assert [image.height for image in images] == [360]


def test_timeline_render_failure_is_degraded(app_ctx, dummy_page, monkeypatch, baseline):
    def broken_renderer(_summary):
        raise RuntimeError("axis init failed")

    image = render_timeline_safely(derive_timeline(baseline), renderer=broken_renderer)
    assert image.available is False
    assert image.error == "axis init failed"

    monkeypatch.setattr(
        dashboard,
        "render_timeline_safely",
        lambda summary: render_timeline_safely(summary, renderer=broken_renderer),
    )
    texts = _texts(dashboard.build_dashboard_view(app_ctx, dummy_page))
    assert "Visualization unavailable" in texts
    assert "axis init failed" in texts


def test_zero_span_timeline_still_renders(baseline):
    action = baseline.actions[0]
    one_milestone = action.timeline.model_copy(update={"milestones": action.timeline.milestones[:1]})
    summary = derive_timeline(
        baseline.model_copy(update={"actions": [action.model_copy(update={"timeline": one_milestone})]})
    )

    assert summary.span_days == 0
    assert summary.position(summary.milestones[0].due_date) is None
    assert render_timeline_safely(summary).available


def test_apply_import_merges_and_records_zone(app_ctx, write_csv):
    path = write_csv("actions.csv", TEMPLATES[DataKind.ACTION])

    result = controllers.apply_import(app_ctx, DataKind.ACTION, path)

    assert result.success
    assert app_ctx.import_results[DataKind.ACTION] is result
    assert app_ctx.import_results[DataKind.ACTOR] is None
    assert len(app_ctx.store.current().actions) == 6


def test_failed_import_leaves_store_and_other_zones(app_ctx, write_csv):
    good = write_csv("actors.csv", TEMPLATES[DataKind.ACTOR])
    bad = write_csv("assets.csv", "name,type\n")
    controllers.apply_import(app_ctx, DataKind.ACTOR, good)
    snapshot = app_ctx.store.current()

    result = controllers.apply_import(app_ctx, DataKind.ASSET, bad)

    assert result.success is False
    assert app_ctx.store.current() is snapshot
    assert app_ctx.import_results[DataKind.ACTOR].success is True


def test_import_view_shows_zone_outcomes(app_ctx, dummy_page, write_csv):
    controllers.apply_import(app_ctx, DataKind.ASSET, write_csv("bad.csv", ""))
    controllers.apply_import(app_ctx, DataKind.ACTOR, write_csv("a.csv", TEMPLATES[DataKind.ACTOR]))

    texts = _texts(data_import.build_data_import_view(app_ctx, dummy_page))

    assert "Successfully imported 1 actors" in texts
    assert any(t.startswith("Import failed:") for t in texts)


def test_clear_imported_restores_baseline(app_ctx, dummy_page, write_csv):
    controllers.apply_import(app_ctx, DataKind.ACTION, write_csv("a.csv", TEMPLATES[DataKind.ACTION]))

    controllers.clear_imported(app_ctx, dummy_page)

    assert len(app_ctx.store.current().actions) == 5
    assert all(result is None for result in app_ctx.import_results.values())
    assert dummy_page.route == "/data-import"


def test_save_template(app_ctx, tmp_path):
    path = controllers.save_template(app_ctx, "connections", tmp_path / "c.csv")

    assert path.read_text(encoding="utf-8") == TEMPLATES[DataKind.CONNECTION]


def test_shortcut_navigates(dummy_page):
    assert controllers.handle_shortcut(dummy_page, "2", True, False) is True
    assert dummy_page.route == "/data-import"
    assert controllers.handle_shortcut(dummy_page, "x", True, False) is False


def test_attach_file_picker_adds_overlay(app_ctx, dummy_page):
    picker = controllers.attach_file_picker(app_ctx, dummy_page)

    assert app_ctx.file_picker is picker
    assert picker in dummy_page.overlay


def test_start_import_without_picker_warns(app_ctx, dummy_page):
    controllers.start_import(app_ctx, dummy_page, DataKind.ACTOR)

    assert dummy_page.snack_bar is not None
    assert app_ctx.file_picker_mode is None


def test_router_serves_every_route(app_ctx, dummy_page):
    router = build_router(app_ctx, dummy_page)

    for route in ROUTE_BUILDERS:
        router.show(route)
        assert dummy_page.views[-1].route in {"/dashboard", "/data-import"}


def test_main_entrypoint_runs(monkeypatch):
    """Ensure desktop entrypoint registers target without launching window."""
    captured = {}

    def fake_app(target):
        captured["target"] = target
        return None

    monkeypatch.setattr(ft, "app", fake_app)
    from civicfolio.desktop import app as app_module

    app_module.run()
    assert captured.get("target") == app_module.main
