"""Chart helpers for Flet views."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Callable, Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from civicfolio.logging_config import get_logger
from civicfolio.services.graph import Graph
from civicfolio.services.reports import build_network_figure, build_timeline_figure
from civicfolio.services.timeline import TimelineSummary

logger = get_logger(__name__)

NetworkRenderer = Callable[[Graph], Figure]
TimelineRenderer = Callable[[TimelineSummary], Figure]


@dataclass(frozen=True)
class ChartImage:
    """Outcome of drawing a dashboard chart.

    Exactly one of ``path`` and ``error`` is set; ``error`` carries the
    underlying message for the "visualization unavailable" notice.
    """

    path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.path is not None


def _save_png(fig: Figure) -> Path:
    with NamedTemporaryFile(delete=False, suffix=".png") as tmp:
        fig.savefig(tmp.name, bbox_inches="tight", dpi=100)
        path = Path(tmp.name)
    plt.close(fig)
    return path


def _render_safely(draw: Callable[[], Figure], fallback: str) -> ChartImage:
    try:
        return ChartImage(path=_save_png(draw()))
    except Exception as exc:
        logger.error(fallback, exc_info=True)
        plt.close("all")
        return ChartImage(error=str(exc) or fallback)


def network_png(graph: Graph, *, renderer: NetworkRenderer = build_network_figure) -> Path:
    """Render the relationships network and return the PNG path."""

    return _save_png(renderer(graph))


def render_network_safely(
    graph: Graph, *, renderer: NetworkRenderer = build_network_figure
) -> ChartImage:
    """Render the network; any rendering failure becomes a degraded result."""

    return _render_safely(lambda: renderer(graph), "Failed to load network visualization")


def timeline_png(summary: TimelineSummary, *, renderer: TimelineRenderer = build_timeline_figure) -> Path:
    """Render the milestone axis and return the PNG path."""

    return _save_png(renderer(summary))


def render_timeline_safely(
    summary: TimelineSummary, *, renderer: TimelineRenderer = build_timeline_figure
) -> ChartImage:
    """Render every milestone at its position on the date axis, degrading on failure."""

    return _render_safely(lambda: renderer(summary), "Failed to load timeline visualization")
