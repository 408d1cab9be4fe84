"""Controller helpers for desktop navigation and primary actions."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import flet as ft

from ..devtools import dev_log
from ..logging_config import get_logger
from ..services import export_csv, importers
from ..services.importers import DataKind, ImportResult
from .navigation_helpers import handle_navigation_selection, resolve_shortcut_route

if TYPE_CHECKING:
    from .context import AppContext

logger = get_logger(__name__)

_IMPORT_PREFIX = "import:"
_TEMPLATE_PREFIX = "template:"


def _show_snack(page: ft.Page, message: str) -> None:
    """Display a snack bar message."""

    page.snack_bar = ft.SnackBar(content=ft.Text(message))
    page.snack_bar.open = True
    page.update()


def _ctx_config(ctx: AppContext | object) -> object | None:
    """Return config attribute if present to keep dev logging resilient in tests."""

    return getattr(ctx, "config", None)


def navigate(page: ft.Page, route: str) -> None:
    """Navigate to a route and update the page."""

    clean = route if route.startswith("/") else f"/{route}"
    page.go(clean)
    page.update()


def handle_nav_selection(page: ft.Page, selected_index: int) -> None:
    """Delegate navigation rail selection to the helpers and update."""

    handle_navigation_selection(page, selected_index)
    page.update()


def handle_shortcut(page: ft.Page, key: str, ctrl: bool, shift: bool) -> bool:
    """Resolve shortcut navigation; returns True when a route was triggered."""

    route = resolve_shortcut_route(key, ctrl, shift)
    if route:
        navigate(page, route)
        return True
    return False


def apply_import(ctx: AppContext, kind: Union[DataKind, str], csv_path: Path) -> ImportResult:
    """Import one file into one upload zone and merge it on success.

    The zone's outcome replaces its previous one; other zones are untouched.
    A failed import leaves the store as it was.
    """

    result = importers.import_csv_path(Path(csv_path), kind)
    zone = result.kind or importers.resolve_kind(kind)
    ctx.import_results[zone] = result
    if result.success:
        ctx.store.merge_imported(result.to_batch())
    dev_log(
        _ctx_config(ctx),
        "Import finished",
        context={"kind": zone.value, "path": csv_path, "success": result.success, "count": result.count},
    )
    return result


def save_template(ctx: AppContext, kind: Union[DataKind, str], output_path: Path) -> Path:
    """Write the example CSV for ``kind``."""

    written = export_csv.write_template(kind, Path(output_path))
    dev_log(_ctx_config(ctx), "Template saved", context={"kind": str(kind), "path": written})
    return written


def clear_imported(ctx: AppContext, page: ft.Page) -> None:
    """Revert to the baseline portfolio and forget every zone's outcome."""

    ctx.store.clear_imported()
    ctx.clear_import_results()
    _show_snack(page, "Imported data cleared")
    navigate(page, "/data-import")


def _mode_kind(mode: Optional[str], prefix: str) -> Optional[DataKind]:
    if not mode or not mode.startswith(prefix):
        return None
    return importers.resolve_kind(mode[len(prefix):])


def attach_file_picker(ctx: AppContext, page: ft.Page) -> ft.FilePicker:
    """Create and attach a shared file picker for imports and template downloads."""

    def _on_result(e: ft.FilePickerResultEvent) -> None:
        mode = ctx.file_picker_mode
        ctx.file_picker_mode = None

        template_kind = _mode_kind(mode, _TEMPLATE_PREFIX)
        if template_kind is not None:
            if not e.path:
                dev_log(_ctx_config(ctx), "Template download canceled", context={"mode": mode})
                return
            try:
                written = save_template(ctx, template_kind, Path(e.path))
            except OSError as exc:
                dev_log(_ctx_config(ctx), "Template save failed", exc=exc, context={"path": e.path})
                _show_snack(page, f"Could not save template: {exc}")
                return
            _show_snack(page, f"Template saved to {written}")
            return

        import_kind = _mode_kind(mode, _IMPORT_PREFIX)
        selected = e.files[0] if e.files else None
        if import_kind is None or not selected or not selected.path:
            dev_log(_ctx_config(ctx), "File picker dismissed or missing path", context={"mode": mode})
            return

        result = apply_import(ctx, import_kind, Path(selected.path))
        _show_snack(page, result.message)
        navigate(page, "/data-import")

    picker = ft.FilePicker(on_result=_on_result)
    ctx.file_picker = picker
    ctx.file_picker_mode = None
    if page.overlay is None:
        page.overlay = [picker]
    else:
        page.overlay.append(picker)
    page.update()
    return picker


def _ensure_picker(ctx: AppContext, page: ft.Page) -> Optional[ft.FilePicker]:
    """Ensure a file picker exists before attempting to use it."""

    if ctx.file_picker is None:
        _show_snack(page, "File picker is not available.")
        return None
    return ctx.file_picker


def start_import(ctx: AppContext, page: ft.Page, kind: DataKind) -> None:
    """Open the picker for one upload zone."""

    picker = _ensure_picker(ctx, page)
    if picker is None:
        return
    ctx.file_picker_mode = f"{_IMPORT_PREFIX}{kind.value}"
    dev_log(_ctx_config(ctx), "Opening import picker", context={"kind": kind.value})
    picker.pick_files(
        allow_multiple=False,
        allowed_extensions=["csv"],
    )


def start_template_download(ctx: AppContext, page: ft.Page, kind: DataKind) -> None:
    """Ask where to save the example CSV for ``kind``."""

    picker = _ensure_picker(ctx, page)
    if picker is None:
        return
    ctx.file_picker_mode = f"{_TEMPLATE_PREFIX}{kind.value}"
    picker.save_file(
        dialog_title=f"Save {kind.value} template",
        file_name=export_csv.template_filename(kind),
        allowed_extensions=["csv"],
    )
