"""Service module exports."""

from . import (
    export_csv,
    graph,
    import_csv,
    importers,
    reports,
    seed,
    store,
    timeline,
)

__all__ = [
    "export_csv",
    "graph",
    "import_csv",
    "importers",
    "reports",
    "seed",
    "store",
    "timeline",
]
