"""Pytest configuration and shared fixtures for CivicFolio tests.

This module provides configuration, store and CSV fixtures plus a headless page
stand-in for exercising importers, services and desktop views without touching
the real data directory.
"""

from __future__ import annotations

from pathlib import Path

import flet as ft
import pytest

from civicfolio.config import TestConfig
from civicfolio.desktop.context import create_app_context
from civicfolio.models import Portfolio
from civicfolio.services.seed import build_baseline_portfolio
from civicfolio.services.store import PortfolioStore

# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def config(tmp_path, monkeypatch) -> TestConfig:
    """Test configuration rooted in a temporary data directory."""

    monkeypatch.setenv("CIVICFOLIO_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.setenv("CIVICFOLIO_DEV_MODE", "false")
    monkeypatch.setenv("CIVICFOLIO_LOAD_BASELINE", "true")
    monkeypatch.delenv("CIVICFOLIO_LOG_LEVEL", raising=False)
    return TestConfig()


# =============================================================================
# Portfolio Fixtures
# =============================================================================


@pytest.fixture
def baseline() -> Portfolio:
    """A fresh copy of the seed portfolio."""

    return build_baseline_portfolio()


@pytest.fixture
def store(baseline) -> PortfolioStore:
    """A store seeded with the baseline portfolio."""

    return PortfolioStore(baseline)


@pytest.fixture
def app_ctx(config, store):
    """Desktop application context wired to the test config and store."""

    return create_app_context(config, store=store)


# =============================================================================
# CSV Fixtures
# =============================================================================


ACTIONS_CSV = (
    "name,description,status,sector,impactArea,budget,startDate,endDate,targetOutcomes\n"
    '"Bike Lanes","Protected lanes downtown",in_progress,Transportation,Mobility,120000,'
    '2024-02-01,2024-11-30,"Safer streets;Less traffic"\n'
    '"Tree Planting",,completed,Environmental,,5000,2023-04-01,2023-06-30,\n'
)

ACTORS_CSV = (
    "name,type,sector,role,capacity,influence,email,phone,website\n"
    '"Transit Authority",government,Transportation,Operator,9,8,ops@transit.gov,,\n'
)

ASSETS_CSV = (
    "name,type,description,value,availability,owner,location\n"
    '"Climate Fund",funding,"Green bond proceeds",750000,limited,"City Treasury",Downtown\n'
)


@pytest.fixture
def actions_csv() -> str:
    return ACTIONS_CSV


@pytest.fixture
def actors_csv() -> str:
    return ACTORS_CSV


@pytest.fixture
def assets_csv() -> str:
    return ASSETS_CSV


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a file under ``tmp_path`` and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# =============================================================================
# Desktop Fixtures
# =============================================================================


class DummyPage:
    """Minimal stand-in for flet.Page used in view builders and router tests."""

    def __init__(self):
        self.views: list[ft.View] = []
        self.route: str = ""
        self.snack_bar = None
        self.overlay: list[ft.Control] = []
        self.navigated_to: list[str] = []

    def go(self, route: str):
        self.route = route
        self.navigated_to.append(route)

    def update(self):
        return None

    # hook attributes accessed by AppBar / NavRail
    padding = 0
    window_width = 1280
    window_height = 800
    window_min_width = 1024
    window_min_height = 600
    theme_mode = ft.ThemeMode.LIGHT


@pytest.fixture
def dummy_page() -> DummyPage:
    return DummyPage()
