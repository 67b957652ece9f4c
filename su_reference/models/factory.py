"""Model factory: one accessor per catalog schema."""

import re
from typing import Type

from ..catalog.schemas import SchemaCatalog
from .base import RecordModel
from .characters import (
    AbilitiesModel,
    AbilityTreeRequirementsModel,
    BioTitansModel,
    CreaturesModel,
    MeldModel,
    NPCsModel,
    SquadsModel,
)
from .crawlers import CrawlerBaysModel, CrawlerTechLevelsModel
from .gear import DronesModel, EquipmentModel, VehiclesModel
from .mechs import ChassisModel, ModulesModel, SystemsModel

# Schemas with extra convenience filters; the rest use RecordModel.
MODEL_CLASSES: dict[str, Type[RecordModel]] = {
    "abilities": AbilitiesModel,
    "ability-tree-requirements": AbilityTreeRequirementsModel,
    "bio-titans": BioTitansModel,
    "chassis": ChassisModel,
    "crawler-bays": CrawlerBaysModel,
    "crawler-tech-levels": CrawlerTechLevelsModel,
    "creatures": CreaturesModel,
    "drones": DronesModel,
    "equipment": EquipmentModel,
    "meld": MeldModel,
    "modules": ModulesModel,
    "npcs": NPCsModel,
    "squads": SquadsModel,
    "systems": SystemsModel,
    "vehicles": VehiclesModel,
}

# Names that don't follow the plain PascalCase rule
_SPECIAL_NAMES = {
    "classes.core": "CoreClasses",
    "classes.advanced": "AdvancedClasses",
    "classes.hybrid": "HybridClasses",
    "npcs": "NPCs",
}


def to_pascal_case(schema_id: str) -> str:
    """Convert a schema ID to its accessor name.

    Examples:
        abilities -> Abilities
        ability-tree-requirements -> AbilityTreeRequirements
        classes.core -> CoreClasses
    """
    if schema_id in _SPECIAL_NAMES:
        return _SPECIAL_NAMES[schema_id]
    return "".join(word[:1].upper() + word[1:] for word in re.split(r"[-.]", schema_id) if word)


def get_model_class(schema_id: str) -> Type[RecordModel]:
    return MODEL_CLASSES.get(schema_id, RecordModel)


def build_models(catalog: SchemaCatalog) -> dict[str, RecordModel]:
    """Build an accessor for every schema in the catalog, keyed by schema ID."""
    models: dict[str, RecordModel] = {}
    for schema in catalog.schemas:
        model_class = get_model_class(schema.id)
        models[schema.id] = model_class(schema.records, schema_id=schema.id, title=schema.title)
    return models
