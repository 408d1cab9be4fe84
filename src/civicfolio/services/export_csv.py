"""CSV templates and export helpers for CivicFolio."""

from __future__ import annotations

import csv
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Iterable, Union

from ..models import Action, Actor, Asset, Connection
from .importers import DataKind, resolve_kind

TEMPLATES: dict[DataKind, str] = {
    DataKind.ACTION: (
        "name,description,status,sector,impactArea,budget,startDate,endDate,targetOutcomes\n"
        '"Urban Green Infrastructure","Implement comprehensive green infrastructure",in_progress,'
        "Environmental,Climate Resilience,2500000,2024-01-15,2026-12-31,"
        '"Improved air quality;Enhanced biodiversity"'
    ),
    DataKind.ACTOR: (
        "name,type,sector,role,capacity,influence,email,phone,website\n"
        '"City Planning Department",government,Government,Lead Coordinator,8,9,'
        "planning@city.gov,+1-555-0123,https://city.gov/planning"
    ),
    DataKind.ASSET: (
        "name,type,description,value,availability,owner,location\n"
        '"Federal Infrastructure Grant",funding,"Federal funding for projects",15000000,'
        'available,"Federal Government",'
    ),
    DataKind.CONNECTION: (
        "sourceId,sourceType,targetId,targetType,relationshipType,strength,description\n"
        '"action-1",action,"actor-1",actor,dependency,9,"City Planning leads the project"'
    ),
}

HEADERS: dict[DataKind, list[str]] = {
    kind: text.split("\n", 1)[0].split(",") for kind, text in TEMPLATES.items()
}


def template_filename(kind: Union[DataKind, str]) -> str:
    return f"{resolve_kind(kind).plural}_template.csv"


def template_text(kind: Union[DataKind, str]) -> str:
    return TEMPLATES[resolve_kind(kind)]


def write_template(kind: Union[DataKind, str], output_path: Path) -> Path:
    """Write the example CSV for ``kind`` to ``output_path`` and return it."""

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(template_text(kind), encoding="utf-8")
    return output_path


def _serialize_value(value):
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _action_row(action: Action) -> dict:
    return {
        "name": action.name,
        "description": action.description,
        "status": action.status,
        "sector": action.sector,
        "impactArea": action.impact_area,
        "budget": action.budget,
        "startDate": action.timeline.start_date,
        "endDate": action.timeline.end_date,
        "targetOutcomes": ";".join(action.target_outcomes),
    }


def _actor_row(actor: Actor) -> dict:
    return {
        "name": actor.name,
        "type": actor.type,
        "sector": actor.sector,
        "role": actor.role,
        "capacity": actor.capacity,
        "influence": actor.influence,
        "email": actor.contact_info.email,
        "phone": actor.contact_info.phone,
        "website": actor.contact_info.website,
    }


def _asset_row(asset: Asset) -> dict:
    return {
        "name": asset.name,
        "type": asset.type,
        "description": asset.description,
        "value": asset.value,
        "availability": asset.availability,
        "owner": asset.owner,
        "location": asset.location,
    }


def _connection_row(conn: Connection) -> dict:
    return {
        "sourceId": conn.source_id,
        "sourceType": conn.source_type,
        "targetId": conn.target_id,
        "targetType": conn.target_type,
        "relationshipType": conn.relationship_type,
        "strength": conn.strength,
        "description": conn.description,
    }


_ROW_BUILDERS = {
    DataKind.ACTION: _action_row,
    DataKind.ACTOR: _actor_row,
    DataKind.ASSET: _asset_row,
    DataKind.CONNECTION: _connection_row,
}


def export_entities_csv(
    *, kind: Union[DataKind, str], entities: Iterable, output_path: Path
) -> Path:
    """Write ``entities`` to CSV at ``output_path`` in the importable column layout.

    Every field is quoted. Values containing a double quote or a line break
    cannot be read back: the importer splits lines before it looks at quotes
    and has no quote escaping.
    Returns the path written.
    """

    kind = resolve_kind(kind)
    headers = HEADERS[kind]
    build_row = _ROW_BUILDERS[kind]
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(
            fh, fieldnames=headers, extrasaction="ignore", quoting=csv.QUOTE_ALL, lineterminator="\n"
        )
        writer.writeheader()
        for entity in entities:
            writer.writerow({key: _serialize_value(value) for key, value in build_row(entity).items()})

    return output_path
