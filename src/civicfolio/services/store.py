"""Session-scoped portfolio state.

A ``PortfolioStore`` is created once per application session and handed to its
consumers (desktop context, CLI); there is no module-level singleton. Reads
return the current immutable snapshot; the three mutators swap in a new
snapshot under a single-writer lock so appends stay in call order.
"""

from __future__ import annotations

import logging
import threading

from ..models import ImportBatch, Portfolio

logger = logging.getLogger(__name__)


class PortfolioStore:
    """Holds the current :class:`Portfolio` and the baseline it resets to."""

    def __init__(self, baseline: Portfolio):
        self._baseline = baseline.model_copy(deep=True)
        self._current = baseline.model_copy(deep=True)
        self._imported = ImportBatch()
        self._lock = threading.Lock()

    def current(self) -> Portfolio:
        return self._current

    def baseline(self) -> Portfolio:
        """A copy of the reset target."""

        return self._baseline.model_copy(deep=True)

    def imported(self) -> ImportBatch:
        """Entities merged since the last reset, per collection, in merge order."""

        with self._lock:
            return ImportBatch(
                actions=list(self._imported.actions),
                actors=list(self._imported.actors),
                assets=list(self._imported.assets),
                connections=list(self._imported.connections),
            )

    def merge_imported(self, batch: ImportBatch) -> None:
        """Append each list of ``batch`` to its collection; no dedup, no id checks."""

        with self._lock:
            previous = self._current
            self._current = previous.model_copy(
                update={
                    "actions": [*previous.actions, *batch.actions],
                    "actors": [*previous.actors, *batch.actors],
                    "assets": [*previous.assets, *batch.assets],
                    "connections": [*previous.connections, *batch.connections],
                }
            )
            self._imported.extend(batch)
        logger.info("Merged imported data", extra={"counts": batch.counts()})

    def reset_to_baseline(self) -> None:
        """Discard everything merged or replaced and restore the seed snapshot."""

        with self._lock:
            self._current = self._baseline.model_copy(deep=True)
            self._imported = ImportBatch()
        logger.info("Portfolio reset to baseline")

    def clear_imported(self) -> None:
        """Drop imported data; same full overwrite as :meth:`reset_to_baseline`."""

        self.reset_to_baseline()

    def replace(self, portfolio: Portfolio) -> None:
        """Unconditionally overwrite the current portfolio; the baseline is untouched."""

        with self._lock:
            self._current = portfolio
            self._imported = ImportBatch()
        logger.info("Portfolio replaced", extra={"portfolio_id": portfolio.id})
