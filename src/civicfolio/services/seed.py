"""Baseline seed portfolio used at start-up and as the reset target."""

from __future__ import annotations

from datetime import date, datetime, timezone

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
    Impact,
    ImpactType,
    Milestone,
    MilestoneStatus,
    Portfolio,
    PortfolioMeta,
    RelationshipType,
    Timeframe,
)
from ..utils import utcnow

BASELINE_ID = "portfolio-1"


def _ts(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


# (id, title, description, due, status)
_MILESTONES: dict[str, list[tuple[str, str, str, date, MilestoneStatus]]] = {
    "action-1": [
        ("m1", "Site Assessment", "Complete environmental assessment of target areas", date(2024, 3, 15), MilestoneStatus.COMPLETED),
        ("m2", "Community Consultation", "Engage with local communities and stakeholders", date(2024, 6, 30), MilestoneStatus.IN_PROGRESS),
        ("m3", "Implementation Phase 1", "Begin construction of priority green spaces", date(2024, 12, 31), MilestoneStatus.PENDING),
    ],
    "action-2": [
        ("m4", "Requirements Gathering", "Define platform requirements and user needs", date(2024, 4, 30), MilestoneStatus.PENDING),
        ("m5", "Development Phase", "Build core platform functionality", date(2025, 2, 28), MilestoneStatus.PENDING),
        ("m6", "Pilot Launch", "Launch pilot program with select services", date(2025, 6, 30), MilestoneStatus.PENDING),
    ],
    "action-3": [
        ("m7", "Land Acquisition", "Secure suitable land parcels for development", date(2024, 1, 31), MilestoneStatus.COMPLETED),
        ("m8", "Design and Permitting", "Complete architectural design and obtain permits", date(2024, 6, 30), MilestoneStatus.IN_PROGRESS),
        ("m9", "Construction Phase 1", "Begin construction of first 100 units", date(2024, 12, 31), MilestoneStatus.PENDING),
    ],
    "action-4": [
        ("m10", "Energy Audit", "Complete comprehensive energy audit of all facilities", date(2022, 3, 31), MilestoneStatus.COMPLETED),
        ("m11", "Solar Installation", "Install solar panels on municipal buildings", date(2023, 6, 30), MilestoneStatus.COMPLETED),
        ("m12", "Grid Integration", "Complete grid integration and testing", date(2023, 12, 31), MilestoneStatus.COMPLETED),
    ],
    "action-5": [
        ("m13", "Route Planning", "Design optimized bus routes and schedules", date(2024, 4, 30), MilestoneStatus.COMPLETED),
        ("m14", "Fleet Procurement", "Procure electric buses and charging infrastructure", date(2024, 8, 31), MilestoneStatus.DELAYED),
        ("m15", "System Launch", "Launch enhanced public transportation system", date(2025, 6, 30), MilestoneStatus.PENDING),
    ],
}


def _seed_actions() -> list[Action]:
    rows = [
        ("action-1", "Urban Green Infrastructure Development",
         "Implement comprehensive green infrastructure across the city including parks, green roofs, and urban forests",
         ["Improved air quality", "Enhanced biodiversity", "Reduced urban heat island effect"],
         ActionStatus.IN_PROGRESS, date(2024, 1, 15), date(2026, 12, 31),
         "Environmental", "Climate Resilience", 2_500_000, _ts(2024, 1, 1), _ts(2024, 1, 15)),
        ("action-2", "Smart City Digital Platform",
         "Develop an integrated digital platform for city services and citizen engagement",
         ["Improved service delivery", "Enhanced citizen engagement", "Data-driven decision making"],
         ActionStatus.NOT_STARTED, date(2024, 3, 1), date(2025, 8, 31),
         "Technology", "Digital Transformation", 1_800_000, _ts(2024, 1, 1), _ts(2024, 1, 1)),
        ("action-3", "Affordable Housing Initiative",
         "Develop 500 affordable housing units across the city with integrated community services",
         ["Increased housing affordability", "Reduced homelessness", "Enhanced community cohesion"],
         ActionStatus.IN_PROGRESS, date(2023, 9, 1), date(2027, 6, 30),
         "Housing", "Social Equity", 45_000_000, _ts(2023, 9, 1), _ts(2024, 1, 10)),
        ("action-4", "Renewable Energy Transition",
         "Transition municipal buildings and facilities to 100% renewable energy sources",
         ["Reduced carbon emissions", "Lower energy costs", "Increased energy security"],
         ActionStatus.COMPLETED, date(2022, 1, 1), date(2023, 12, 31),
         "Energy", "Climate Action", 8_500_000, _ts(2022, 1, 1), _ts(2023, 12, 31)),
        ("action-5", "Public Transportation Enhancement",
         "Expand and modernize public transportation network with electric buses and improved routes",
         ["Reduced traffic congestion", "Improved air quality", "Enhanced mobility access"],
         ActionStatus.ON_HOLD, date(2024, 2, 1), date(2026, 12, 31),
         "Transportation", "Mobility", 32_000_000, _ts(2024, 1, 1), _ts(2024, 1, 20)),
    ]
    actions = []
    for (action_id, name, description, outcomes, status, start, end,
         sector, impact_area, budget, created, updated) in rows:
        milestones = [
            Milestone(id=mid, title=title, description=desc, due_date=due, status=ms_status)
            for mid, title, desc, due, ms_status in _MILESTONES[action_id]
        ]
        actions.append(
            Action(
                id=action_id,
                name=name,
                description=description,
                target_outcomes=outcomes,
                status=status,
                timeline=ActionTimeline(start_date=start, end_date=end, milestones=milestones),
                sector=sector,
                impact_area=impact_area,
                budget=budget,
                created_at=created,
                updated_at=updated,
            )
        )
    return actions


def _seed_actors() -> list[Actor]:
    rows = [
        ("actor-1", "City Planning Department", ActorType.GOVERNMENT, "Government", "Lead Coordinator",
         "planning@city.gov", "+1-555-0123", "https://city.gov/planning", 8, 9),
        ("actor-2", "GreenTech Solutions Inc.", ActorType.PRIVATE_SECTOR, "Technology", "Technology Partner",
         "contact@greentech.com", "+1-555-0456", "https://greentech.com", 7, 6),
        ("actor-3", "Community Housing Coalition", ActorType.CIVIL_SOCIETY, "Housing", "Advocacy Partner",
         "info@housingcoalition.org", "+1-555-0789", "https://housingcoalition.org", 6, 7),
        ("actor-4", "Urban Research Institute", ActorType.ACADEMIC, "Research", "Research Partner",
         "research@urbaninstitute.edu", "+1-555-0321", "https://urbaninstitute.edu", 8, 5),
        ("actor-5", "Local Business Association", ActorType.PRIVATE_SECTOR, "Business", "Stakeholder",
         "info@localbusiness.org", "+1-555-0654", "https://localbusiness.org", 5, 8),
        ("actor-6", "Environmental Justice Network", ActorType.CIVIL_SOCIETY, "Environmental", "Advocacy Partner",
         "contact@ejnetwork.org", "+1-555-0987", "https://ejnetwork.org", 7, 6),
    ]
    stamp = _ts(2024, 1, 1)
    return [
        Actor(
            id=actor_id,
            name=name,
            type=actor_type,
            sector=sector,
            role=role,
            contact_info=ContactInfo(email=email, phone=phone, website=website),
            capacity=capacity,
            influence=influence,
            created_at=stamp,
            updated_at=stamp,
        )
        for actor_id, name, actor_type, sector, role, email, phone, website, capacity, influence in rows
    ]


def _seed_assets() -> list[Asset]:
    rows = [
        ("asset-1", "Federal Infrastructure Grant", AssetType.FUNDING,
         "Federal funding for infrastructure development projects", 15_000_000, Availability.AVAILABLE, "Federal Government"),
        ("asset-2", "City Data Platform", AssetType.DATA,
         "Comprehensive city data platform with real-time analytics", 2_000_000, Availability.AVAILABLE, "City Government"),
        ("asset-3", "Community Engagement Network", AssetType.NETWORK,
         "Established network of community organizations and leaders", 500_000, Availability.AVAILABLE, "Community Coalition"),
        ("asset-4", "Green Technology Expertise", AssetType.KNOWLEDGE,
         "Specialized knowledge in sustainable urban development", 300_000, Availability.AVAILABLE, "GreenTech Solutions"),
        ("asset-5", "Public Transportation Infrastructure", AssetType.INFRASTRUCTURE,
         "Existing public transportation network and facilities", 25_000_000, Availability.LIMITED, "City Government"),
        ("asset-6", "Renewable Energy Systems", AssetType.TECHNOLOGY,
         "Solar and wind energy systems for municipal buildings", 8_500_000, Availability.AVAILABLE, "City Government"),
    ]
    stamp = _ts(2024, 1, 1)
    return [
        Asset(
            id=asset_id,
            name=name,
            type=asset_type,
            description=description,
            value=value,
            availability=availability,
            owner=owner,
            created_at=stamp,
            updated_at=stamp,
        )
        for asset_id, name, asset_type, description, value, availability, owner in rows
    ]


def _seed_connections() -> list[Connection]:
    action, actor, asset = EntityKind.ACTION, EntityKind.ACTOR, EntityKind.ASSET
    rows = [
        ("conn-1", "action-1", action, "actor-1", actor, RelationshipType.DEPENDENCY, 9,
         "City Planning Department leads the green infrastructure development"),
        ("conn-2", "action-1", action, "asset-1", asset, RelationshipType.SUPPORT, 8,
         "Federal grant supports green infrastructure funding"),
        ("conn-3", "action-2", action, "actor-2", actor, RelationshipType.SYNERGY, 7,
         "GreenTech Solutions provides technology expertise for digital platform"),
        ("conn-4", "action-3", action, "actor-3", actor, RelationshipType.SYNERGY, 8,
         "Community Housing Coalition advocates for affordable housing"),
        ("conn-5", "action-4", action, "asset-6", asset, RelationshipType.DEPENDENCY, 10,
         "Renewable energy systems are essential for energy transition"),
        ("conn-6", "action-5", action, "asset-5", asset, RelationshipType.DEPENDENCY, 9,
         "Existing transportation infrastructure is foundation for enhancement"),
    ]
    stamp = _ts(2024, 1, 1)
    return [
        Connection(
            id=conn_id,
            source_id=source_id,
            source_type=source_type,
            target_id=target_id,
            target_type=target_type,
            relationship_type=relationship,
            strength=strength,
            description=description,
            created_at=stamp,
        )
        for conn_id, source_id, source_type, target_id, target_type, relationship, strength, description in rows
    ]


def _seed_impacts() -> list[Impact]:
    rows = [
        ("impact-1", "action-1", ImpactType.DIRECT, "Reduction in urban heat island effect by 3-5°C", 8,
         Timeframe.MEDIUM, {"temperature_reduction": 4, "area_covered": 500}),
        ("impact-2", "action-1", ImpactType.CO_BENEFIT, "Improved mental health and well-being for residents", 6,
         Timeframe.LONG, {"health_improvement": 15}),
        ("impact-3", "action-2", ImpactType.DIRECT, "30% improvement in city service response times", 7,
         Timeframe.SHORT, {"response_time_improvement": 30}),
        ("impact-4", "action-3", ImpactType.DIRECT, "500 new affordable housing units created", 9,
         Timeframe.MEDIUM, {"units_created": 500, "families_housed": 500}),
        ("impact-5", "action-4", ImpactType.DIRECT, "100% renewable energy for municipal buildings", 10,
         Timeframe.MEDIUM, {"carbon_reduction": 25000, "energy_cost_savings": 1200000}),
        ("impact-6", "action-5", ImpactType.INDIRECT, "Reduced traffic congestion and improved air quality", 7,
         Timeframe.MEDIUM, {"congestion_reduction": 20, "air_quality_improvement": 15}),
    ]
    stamp = _ts(2024, 1, 1)
    return [
        Impact(
            id=impact_id,
            action_id=action_id,
            type=impact_type,
            description=description,
            magnitude=magnitude,
            timeframe=timeframe,
            metrics=metrics,
            created_at=stamp,
        )
        for impact_id, action_id, impact_type, description, magnitude, timeframe, metrics in rows
    ]


def build_baseline_portfolio() -> Portfolio:
    """Return a fresh copy of the "Sustainable City Transformation" seed portfolio."""

    return Portfolio(
        id=BASELINE_ID,
        name="Sustainable City Transformation",
        description=(
            "Comprehensive portfolio of initiatives to transform the city into a sustainable, "
            "resilient, and equitable urban environment"
        ),
        actions=_seed_actions(),
        actors=_seed_actors(),
        assets=_seed_assets(),
        connections=_seed_connections(),
        impacts=_seed_impacts(),
        meta=PortfolioMeta(
            created_at=_ts(2024, 1, 1),
            updated_at=_ts(2024, 1, 20),
            created_by="City Planning Department",
            tags=["sustainability", "urban development", "climate action", "social equity"],
            sector="Urban Development",
            region="Metropolitan Area",
        ),
    )


def build_empty_portfolio(name: str = "Untitled Portfolio") -> Portfolio:
    """Portfolio with no entities, used when the baseline is disabled."""

    now = utcnow()
    return Portfolio(id=BASELINE_ID, name=name, meta=PortfolioMeta(created_at=now, updated_at=now))
