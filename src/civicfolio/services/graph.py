"""Node/edge projection of a portfolio for the relationships network."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..models import EntityKind, Portfolio, RelationshipType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeStyle:
    fill: str
    border: str
    size: int


@dataclass(frozen=True)
class EdgeStyle:
    color: str
    width: int = 2


NODE_STYLES: dict[EntityKind, NodeStyle] = {
    EntityKind.ACTION: NodeStyle(fill="#0ea5e9", border="#0284c7", size=20),
    EntityKind.ACTOR: NodeStyle(fill="#22c55e", border="#16a34a", size=16),
    EntityKind.ASSET: NodeStyle(fill="#eab308", border="#ca8a04", size=14),
}

EDGE_STYLES: dict[RelationshipType, EdgeStyle] = {
    RelationshipType.DEPENDENCY: EdgeStyle(color="#ef4444"),
    RelationshipType.SYNERGY: EdgeStyle(color="#22c55e"),
    RelationshipType.SUPPORT: EdgeStyle(color="#0ea5e9"),
    RelationshipType.CONFLICT: EdgeStyle(color="#f59e0b"),
}


@dataclass(frozen=True)
class GraphNode:
    id: str
    label: str
    category: EntityKind
    attributes: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


@dataclass(frozen=True)
class GraphEdge:
    id: str
    source: str
    target: str
    relationship_type: RelationshipType
    strength: int


@dataclass
class Graph:
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)
    dropped: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def node_ids(self) -> set[str]:
        return {node.id for node in self.nodes}

    def edge_ids(self) -> set[str]:
        return {edge.id for edge in self.edges}


def build_graph(portfolio: Portfolio) -> Graph:
    """Project actions, actors and assets to nodes and connections to edges.

    A connection whose source or target is not one of the portfolio's node ids
    is left out and logged; it is never reported to the user.
    """

    graph = Graph()
    for action in portfolio.actions:
        graph.nodes.append(
            GraphNode(
                id=action.id,
                label=action.name,
                category=EntityKind.ACTION,
                attributes={"status": action.status.value, "sector": action.sector},
            )
        )
    for actor in portfolio.actors:
        graph.nodes.append(
            GraphNode(
                id=actor.id,
                label=actor.name,
                category=EntityKind.ACTOR,
                attributes={"actor_type": actor.type.value, "sector": actor.sector},
            )
        )
    for asset in portfolio.assets:
        graph.nodes.append(
            GraphNode(
                id=asset.id,
                label=asset.name,
                category=EntityKind.ASSET,
                attributes={
                    "asset_type": asset.type.value,
                    "availability": asset.availability.value,
                },
            )
        )

    valid_ids = portfolio.entity_ids()
    for conn in portfolio.connections:
        missing = [
            f"{role} {ref} not found"
            for role, ref in (("Source", conn.source_id), ("Target", conn.target_id))
            if ref not in valid_ids
        ]
        if missing:
            logger.warning(
                f"Skipping connection {conn.id}: {'; '.join(missing)}",
                extra={"connection_id": conn.id},
            )
            graph.dropped.append(conn.id)
            continue
        graph.edges.append(
            GraphEdge(
                id=conn.id,
                source=conn.source_id,
                target=conn.target_id,
                relationship_type=conn.relationship_type,
                strength=conn.strength,
            )
        )

    logger.debug(
        "Graph built",
        extra={"nodes": len(graph.nodes), "edges": len(graph.edges), "dropped": len(graph.dropped)},
    )
    return graph
