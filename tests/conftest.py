"""Root pytest configuration for SU Reference tests."""

import copy
import json
from pathlib import Path

import pytest

from su_reference.catalog.schemas import SchemaCatalog
from su_reference.registry import EntityRegistry


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

ABILITIES = [
    {
        "id": "bionic-senses",
        "name": "Bionic Senses",
        "tree": "Hacking",
        "level": 1,
        "description": "Sense electronic signals nearby.",
        "traits": [{"type": "passive"}],
    },
    {
        "id": "neural-link",
        "name": "Neural Link",
        "tree": "Hacking",
        "level": 2,
        "description": "Link your mind with a mech.",
    },
    {
        "id": "scrap-sense",
        "name": "Scrap Sense",
        "tree": "Salvaging",
        "level": 1,
        "description": "Find hidden salvage.",
    },
]

CORE_CLASSES = [
    {
        "id": "engineer",
        "name": "Engineer",
        "maxAbilities": 6,
        "advanceable": True,
        "coreTrees": ["Hacking", "Salvaging"],
    },
]

ADVANCED_CLASSES = [
    {
        "id": "hacker",
        "name": "Hacker",
        "advancedTree": "Advanced Hacking",
        "legendaryTree": "Legendary Hacking",
    },
]

HYBRID_CLASSES = [
    {
        "id": "scrapper",
        "name": "Scrapper",
        "advancedTree": "Advanced Scrapping",
        "legendaryTree": "Legendary Scrapping",
    },
]

SYSTEMS = [
    {
        "id": "railgun",
        "name": "Railgun",
        "description": "A magnetic accelerator cannon.",
        "techLevel": 3,
        "salvageValue": 3,
        "slotsRequired": 2,
        "traits": [{"type": "ballistic"}],
        "damage": {"type": "SP", "amount": 4},
        "actions": [],
    },
    {
        "id": "experimental-railgun-mk2",
        "name": "Experimental Railgun Mk2",
        "description": "Prototype weapon of unknown origin.",
        "techLevel": 5,
        "salvageValue": 6,
        "slotsRequired": 3,
        "traits": [{"type": "energy"}, {"type": "hot", "amount": 2}],
        "damage": {"type": "SP", "amount": 8},
        "actions": [],
    },
    {
        "id": "energy-shield",
        "name": "Energy Shield",
        "description": "Projects a shield around the mech.",
        "techLevel": 2,
        "salvageValue": 2,
        "slotsRequired": 1,
        "traits": [{"type": "shield"}],
        "actions": [],
    },
    {
        "id": "magnetic-coil",
        "name": "Magnetic Coil",
        "description": "Powers a railgun array.",
        "techLevel": 1,
        "salvageValue": 1,
        "slotsRequired": 1,
        "actions": [],
    },
]

MODULES = [
    {
        "id": "targeting-module",
        "name": "Targeting Module",
        "description": "Improves accuracy.",
        "techLevel": 2,
        "salvageValue": 2,
        "slotsRequired": 1,
        "recommended": True,
        "actionType": "Passive",
        "actions": [],
    },
    {
        "id": "railgun-loader",
        "name": "railgun loader",
        "effect": "Reload the Railgun as a free action.",
        "techLevel": 3,
        "salvageValue": 3,
        "slotsRequired": 1,
        "recommended": False,
        "actionType": "Free",
        "actions": [],
    },
]

EQUIPMENT = [
    {
        "id": "heavy-armour",
        "name": "Heavy Armour",
        "techLevel": 2,
        "activationCost": 0,
        "traits": [{"type": "armor"}],
        "actions": [],
    },
    {
        "id": "pistol",
        "name": "Pistol",
        "techLevel": 1,
        "activationCost": 1,
        "traits": [{"type": "ballistic"}],
        "actions": [{"name": "Shoot"}],
    },
]

STANDARD_TABLE = {
    "1": "Cascade Failure",
    "2-5": "Failure",
    "6-10": "Tough Choice",
    "11-19": "Success",
    "20": "Nailed It",
    "type": "standard",
}

FLAT_TABLE = {str(face): f"Salvage {face}" for face in range(1, 21)}
FLAT_TABLE["type"] = "flat"

ROLL_TABLES = [
    {"id": "core-mechanic", "name": "Core Mechanic", "section": "core", "table": STANDARD_TABLE},
    {"id": "salvage-table", "name": "Salvage Table", "section": "salvage", "table": FLAT_TABLE},
]

KEYWORDS = [
    {
        "id": "railgun",
        "name": "railgun",
        "description": "Shorthand for any magnetic accelerator.",
    },
]

SCHEMAS = [
    ("abilities", "Abilities", ABILITIES),
    ("classes.core", "Core Classes", CORE_CLASSES),
    ("classes.advanced", "Advanced Classes", ADVANCED_CLASSES),
    ("classes.hybrid", "Hybrid Classes", HYBRID_CLASSES),
    ("systems", "Systems", SYSTEMS),
    ("modules", "Modules", MODULES),
    ("equipment", "Equipment", EQUIPMENT),
    ("roll-tables", "Roll Tables", ROLL_TABLES),
    ("keywords", "Keywords", KEYWORDS),
]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def catalog() -> SchemaCatalog:
    """In-memory catalog with a fresh copy of the sample data."""
    return SchemaCatalog.from_records(copy.deepcopy(SCHEMAS))


@pytest.fixture
def registry(catalog: SchemaCatalog) -> EntityRegistry:
    """Fresh registry per test, so cache state never leaks between tests."""
    return EntityRegistry(catalog)


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """Write the sample data in the on-disk layout (schemas/index.json + data/)."""
    schemas_dir = tmp_path / "schemas"
    data_dir = tmp_path / "data"
    schemas_dir.mkdir()
    data_dir.mkdir()

    entries = []
    for schema_id, title, records in SCHEMAS:
        data_file = f"data/{schema_id}.json"
        (tmp_path / data_file).write_text(json.dumps(records))
        entries.append(
            {
                "id": schema_id,
                "title": title,
                "description": f"{title} reference data",
                "dataFile": data_file,
                "schemaFile": f"schemas/{schema_id}.schema.json",
                "itemCount": len(records),
                "requiredFields": ["id", "name"],
            }
        )

    (schemas_dir / "index.json").write_text(
        json.dumps({"title": "Salvage Union Data", "schemas": entries}, indent=2)
    )
    return tmp_path
