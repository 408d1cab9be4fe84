"""Entity mappers and the per-file import orchestrator.

Each upload carries exactly one data kind. Rows are never rejected: every data
row yields one entity, with the documented default standing in for any cell
that is missing, blank or unparseable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from ..errors import InvalidArgument, MalformedInput, error_code
from ..models import (
    Action,
    ActionStatus,
    ActionTimeline,
    Actor,
    ActorType,
    Asset,
    AssetType,
    Availability,
    Connection,
    ContactInfo,
    EntityKind,
    ImportBatch,
    RelationshipType,
    parse_enum,
)
from ..utils import generate_id, today, utcnow
from .import_csv import (
    HeaderIndex,
    Row,
    coerce_amount,
    coerce_date,
    coerce_scale,
    split_list,
    tokenize,
)

logger = logging.getLogger(__name__)

MALFORMED_MESSAGE = "CSV file must have at least a header row and one data row"


class DataKind(str, Enum):
    """The four upload zones."""

    ACTION = "action"
    ACTOR = "actor"
    ASSET = "asset"
    CONNECTION = "connection"

    @property
    def plural(self) -> str:
        return f"{self.value}s"


def resolve_kind(raw: Union[DataKind, str]) -> DataKind:
    """Accept a DataKind, its value (``"actor"``) or its plural (``"actors"``)."""

    if isinstance(raw, DataKind):
        return raw
    candidate = str(raw).strip()
    for kind in DataKind:
        if candidate in (kind.value, kind.plural):
            return kind
    raise InvalidArgument(f"Invalid data type: {raw!r}")


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------


def map_actions(header: Sequence[str], data_rows: Sequence[Row]) -> list[Action]:
    cols = HeaderIndex.from_header(header)
    actions: list[Action] = []
    for row in data_rows:
        now = utcnow()
        actions.append(
            Action(
                id=generate_id(),
                name=cols.text(row, "name", "Unnamed Action"),
                description=cols.text(row, "description"),
                target_outcomes=split_list(cols.cell(row, "targetOutcomes")),
                status=parse_enum(ActionStatus, cols.cell(row, "status"), ActionStatus.NOT_STARTED),
                timeline=ActionTimeline(
                    start_date=coerce_date(cols.cell(row, "startDate"), today),
                    end_date=coerce_date(cols.cell(row, "endDate"), today),
                    milestones=[],
                ),
                sector=cols.text(row, "sector", "General"),
                impact_area=cols.text(row, "impactArea", "General"),
                budget=coerce_amount(cols.cell(row, "budget")),
                created_at=now,
                updated_at=now,
            )
        )
    return actions


def map_actors(header: Sequence[str], data_rows: Sequence[Row]) -> list[Actor]:
    cols = HeaderIndex.from_header(header)
    actors: list[Actor] = []
    for row in data_rows:
        now = utcnow()
        actors.append(
            Actor(
                id=generate_id(),
                name=cols.text(row, "name", "Unnamed Actor"),
                type=parse_enum(ActorType, cols.cell(row, "type"), ActorType.CIVIL_SOCIETY),
                sector=cols.text(row, "sector", "General"),
                role=cols.text(row, "role", "Stakeholder"),
                contact_info=ContactInfo(
                    email=cols.optional_text(row, "email"),
                    phone=cols.optional_text(row, "phone"),
                    website=cols.optional_text(row, "website"),
                ),
                capacity=coerce_scale(cols.cell(row, "capacity")),
                influence=coerce_scale(cols.cell(row, "influence")),
                created_at=now,
                updated_at=now,
            )
        )
    return actors


def map_assets(header: Sequence[str], data_rows: Sequence[Row]) -> list[Asset]:
    cols = HeaderIndex.from_header(header)
    assets: list[Asset] = []
    for row in data_rows:
        now = utcnow()
        assets.append(
            Asset(
                id=generate_id(),
                name=cols.text(row, "name", "Unnamed Asset"),
                type=parse_enum(AssetType, cols.cell(row, "type"), AssetType.KNOWLEDGE),
                description=cols.text(row, "description"),
                value=coerce_amount(cols.cell(row, "value")),
                availability=parse_enum(
                    Availability, cols.cell(row, "availability"), Availability.AVAILABLE
                ),
                owner=cols.optional_text(row, "owner"),
                location=cols.optional_text(row, "location"),
                created_at=now,
                updated_at=now,
            )
        )
    return assets


def map_connections(header: Sequence[str], data_rows: Sequence[Row]) -> list[Connection]:
    """Map connection rows; ``sourceId``/``targetId`` are kept verbatim as references."""

    cols = HeaderIndex.from_header(header)
    connections: list[Connection] = []
    for row in data_rows:
        connections.append(
            Connection(
                id=generate_id(),
                source_id=cols.text(row, "sourceId"),
                source_type=parse_enum(EntityKind, cols.cell(row, "sourceType"), EntityKind.ACTION),
                target_id=cols.text(row, "targetId"),
                target_type=parse_enum(EntityKind, cols.cell(row, "targetType"), EntityKind.ACTOR),
                relationship_type=parse_enum(
                    RelationshipType, cols.cell(row, "relationshipType"), RelationshipType.SYNERGY
                ),
                strength=coerce_scale(cols.cell(row, "strength")),
                description=cols.optional_text(row, "description"),
                created_at=utcnow(),
            )
        )
    return connections


Mapper = Callable[[Sequence[str], Sequence[Row]], list]

MAPPERS: dict[DataKind, Mapper] = {
    DataKind.ACTION: map_actions,
    DataKind.ACTOR: map_actors,
    DataKind.ASSET: map_assets,
    DataKind.CONNECTION: map_connections,
}


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


@dataclass
class ImportResult:
    """Outcome of importing one file for one data kind."""

    kind: Optional[DataKind]
    success: bool
    message: str
    produced: list
    errors: Optional[list[str]] = None
    error_code: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.produced)

    def to_batch(self) -> ImportBatch:
        """Wrap the produced entities in a batch ready for ``PortfolioStore.merge_imported``."""

        batch = ImportBatch()
        if not self.success or self.kind is None:
            return batch
        if self.kind is DataKind.ACTION:
            batch.actions.extend(self.produced)
        elif self.kind is DataKind.ACTOR:
            batch.actors.extend(self.produced)
        elif self.kind is DataKind.ASSET:
            batch.assets.extend(self.produced)
        else:
            batch.connections.extend(self.produced)
        return batch


def _decode(content: Union[bytes, str]) -> str:
    if isinstance(content, str):
        return content.removeprefix("\ufeff")
    return content.decode("utf-8-sig")


def _failure(kind: Optional[DataKind], exc: BaseException) -> ImportResult:
    detail = str(exc) or type(exc).__name__
    return ImportResult(
        kind=kind,
        success=False,
        message=f"Import failed: {detail}",
        produced=[],
        errors=[detail],
        error_code=error_code(exc),
    )


def import_file(content: Union[bytes, str], declared_kind: Union[DataKind, str]) -> ImportResult:
    """Tokenize and map one uploaded file.

    Never raises: malformed text, an unknown kind or any mapping fault comes
    back as ``success=False`` with the error text in ``message`` and ``errors``.
    """

    kind: Optional[DataKind] = declared_kind if isinstance(declared_kind, DataKind) else None
    logger.info("Starting import", extra={"kind": str(declared_kind)})
    try:
        rows = tokenize(_decode(content))
        if len(rows) < 2:
            raise MalformedInput(MALFORMED_MESSAGE)

        kind = resolve_kind(declared_kind)
        header, data_rows = rows[0], rows[1:]
        logger.debug(f"CSV headers found: {header}")
        produced = MAPPERS[kind](header, data_rows)
    except Exception as exc:
        result = _failure(kind, exc)
        logger.warning(
            "Import failed",
            extra={"kind": str(declared_kind), "error_code": result.error_code, "error": str(exc)},
        )
        return result

    logger.info(
        f"Import complete: {len(produced)} {kind.plural}",
        extra={"kind": kind.value, "rows": len(data_rows)},
    )
    return ImportResult(
        kind=kind,
        success=True,
        message=f"Successfully imported {len(produced)} {kind.plural}",
        produced=produced,
    )


def import_csv_path(csv_path: Path, declared_kind: Union[DataKind, str]) -> ImportResult:
    """Read ``csv_path`` and import it; read failures are reported, not raised."""

    try:
        content = Path(csv_path).read_bytes()
    except OSError as exc:
        logger.warning(f"Could not read {csv_path}: {exc}")
        kind = declared_kind if isinstance(declared_kind, DataKind) else None
        return _failure(kind, exc)
    return import_file(content, declared_kind)
