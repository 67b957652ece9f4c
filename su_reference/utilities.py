"""Shape checks and optional-field extractors for entities.

Guards only check that the fields a schema requires are present; they do not
validate values. Several schemas share the same required fields (systems and
modules, advanced and hybrid classes), so a guard can accept entities from
more than one schema.
"""

from typing import Any, Mapping

Entity = Mapping[str, Any]

REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "abilities": ("tree", "level"),
    "ability-tree-requirements": ("requirement",),
    "bio-titans": ("structurePoints", "actions"),
    "chassis": ("actions", "patterns", "stats"),
    "classes.advanced": ("advancedTree", "legendaryTree"),
    "classes.core": ("maxAbilities", "advanceable", "coreTrees"),
    "classes.hybrid": ("advancedTree", "legendaryTree"),
    "crawler-bays": ("damagedEffect", "npc", "actions", "techLevelEffects"),
    "crawler-tech-levels": ("techLevel", "structurePoints", "populationMin", "populationMax"),
    "crawlers": ("npc", "actions"),
    "creatures": ("hitPoints", "actions"),
    "drones": ("structurePoints", "techLevel", "salvageValue", "systems"),
    "equipment": ("techLevel",),
    "meld": ("actions",),
    "modules": ("actions", "salvageValue", "slotsRequired", "techLevel"),
    "npcs": ("hitPoints", "actions"),
    "roll-tables": ("section", "table"),
    "squads": ("actions",),
    "systems": ("actions", "salvageValue", "slotsRequired", "techLevel"),
    "vehicles": ("structurePoints", "techLevel", "salvageValue", "systems"),
}


def has_required_fields(entity: Any, fields: tuple[str, ...]) -> bool:
    if not isinstance(entity, Mapping):
        return False
    return all(field in entity for field in fields)


def matches_schema(entity: Any, schema_id: str) -> bool:
    """Check an entity against a schema's required fields.

    Schemas without listed requirements (keywords, traits) accept any mapping.
    """
    return has_required_fields(entity, REQUIRED_FIELDS.get(schema_id, ()))


def is_ability(entity: Entity) -> bool:
    return matches_schema(entity, "abilities")


def is_ability_tree_requirement(entity: Entity) -> bool:
    return matches_schema(entity, "ability-tree-requirements")


def is_bio_titan(entity: Entity) -> bool:
    return matches_schema(entity, "bio-titans")


def is_chassis(entity: Entity) -> bool:
    return matches_schema(entity, "chassis")


def is_core_class(entity: Entity) -> bool:
    return matches_schema(entity, "classes.core")


def is_advanced_class(entity: Entity) -> bool:
    return matches_schema(entity, "classes.advanced")


def is_hybrid_class(entity: Entity) -> bool:
    return matches_schema(entity, "classes.hybrid")


def is_crawler_bay(entity: Entity) -> bool:
    return matches_schema(entity, "crawler-bays")


def is_crawler_tech_level(entity: Entity) -> bool:
    return matches_schema(entity, "crawler-tech-levels")


def is_crawler(entity: Entity) -> bool:
    return matches_schema(entity, "crawlers")


def is_creature(entity: Entity) -> bool:
    return matches_schema(entity, "creatures")


def is_drone(entity: Entity) -> bool:
    return matches_schema(entity, "drones")


def is_equipment(entity: Entity) -> bool:
    return matches_schema(entity, "equipment")


def is_keyword(entity: Entity) -> bool:
    """Keywords have no required fields beyond the common ones."""
    return matches_schema(entity, "keywords")


def is_meld(entity: Entity) -> bool:
    return matches_schema(entity, "meld")


def is_module(entity: Entity) -> bool:
    return matches_schema(entity, "modules")


def is_npc(entity: Entity) -> bool:
    return matches_schema(entity, "npcs")


def is_roll_table(entity: Entity) -> bool:
    return matches_schema(entity, "roll-tables")


def is_squad(entity: Entity) -> bool:
    return matches_schema(entity, "squads")


def is_system(entity: Entity) -> bool:
    return matches_schema(entity, "systems")


def is_trait(entity: Entity) -> bool:
    return matches_schema(entity, "traits")


def is_vehicle(entity: Entity) -> bool:
    return matches_schema(entity, "vehicles")


def is_class(entity: Entity) -> bool:
    """Core, advanced or hybrid class."""
    return is_core_class(entity) or is_advanced_class(entity) or is_hybrid_class(entity)


def is_system_or_module(entity: Entity) -> bool:
    return is_system(entity) or is_module(entity)


# ============================================================================
# Common shapes
# ============================================================================


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def has_tech_level(entity: Entity) -> bool:
    return _is_number(entity.get("techLevel"))


def has_salvage_value(entity: Entity) -> bool:
    return _is_number(entity.get("salvageValue"))


def has_slots_required(entity: Entity) -> bool:
    return _is_number(entity.get("slotsRequired"))


def has_actions(entity: Entity) -> bool:
    return isinstance(entity.get("actions"), list)


def has_traits(entity: Entity) -> bool:
    """True when ``traits`` is present and is a list (or explicitly null)."""
    return "traits" in entity and (entity["traits"] is None or isinstance(entity["traits"], list))


# ============================================================================
# Extractors
# ============================================================================


def get_structure_points(entity: Entity) -> Any:
    return entity.get("structurePoints")


def get_hit_points(entity: Entity) -> Any:
    return entity.get("hitPoints")


def get_actions(entity: Entity) -> Any:
    return entity.get("actions")


def get_traits(entity: Entity) -> Any:
    return entity.get("traits")


def get_tech_level(entity: Entity) -> int | None:
    return entity.get("techLevel")


def get_salvage_value(entity: Entity) -> Any:
    return entity.get("salvageValue")


def get_slots_required(entity: Entity) -> int | None:
    value = entity.get("slotsRequired")
    return value if _is_number(value) else None


def get_table(entity: Entity) -> Any:
    return entity.get("table")


def get_npc(entity: Entity) -> Any:
    return entity.get("npc")


def get_systems(entity: Entity) -> Any:
    """Mounted systems on a drone or vehicle."""
    return entity.get("systems")


def get_advanced_tree(entity: Entity) -> str | None:
    return entity.get("advancedTree")


def get_legendary_tree(entity: Entity) -> str | None:
    return entity.get("legendaryTree")


def get_page_reference(entity: Entity) -> int | None:
    return entity.get("page")
