"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import flet as ft

from ..config import BaseConfig
from ..services.importers import DataKind, ImportResult
from ..services.seed import build_baseline_portfolio, build_empty_portfolio
from ..services.store import PortfolioStore


@dataclass
class AppContext:
    """Centralized application context with services and state."""

    # Configuration
    config: BaseConfig

    # Session state
    store: PortfolioStore

    # UI State
    theme_mode: ft.ThemeMode

    # Page reference (set after initialization)
    page: Optional[ft.Page] = None
    file_picker: Optional[ft.FilePicker] = None
    file_picker_mode: Optional[str] = None
    dev_mode: bool = False

    # Latest outcome per upload zone; zones never share an outcome
    import_results: dict[DataKind, Optional[ImportResult]] = field(
        default_factory=lambda: {kind: None for kind in DataKind}
    )

    def clear_import_results(self) -> None:
        for kind in DataKind:
            self.import_results[kind] = None


def create_store(config: BaseConfig) -> PortfolioStore:
    """Build a store seeded with the baseline portfolio, or an empty one."""

    baseline = build_baseline_portfolio() if config.LOAD_BASELINE else build_empty_portfolio()
    return PortfolioStore(baseline)


def create_app_context(
    config: Optional[BaseConfig] = None, store: Optional[PortfolioStore] = None
) -> AppContext:
    """Create and initialize the application context."""

    if config is None:
        config = BaseConfig()

    if store is None:
        store = create_store(config)

    return AppContext(
        config=config,
        dev_mode=config.DEV_MODE,
        store=store,
        theme_mode=ft.ThemeMode.LIGHT,
    )
