"""Record accessors, one per schema."""

from .base import Entity, Predicate, RecordModel
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
from .factory import MODEL_CLASSES, build_models, get_model_class, to_pascal_case

__all__ = [
    "Entity",
    "Predicate",
    "RecordModel",
    "AbilitiesModel",
    "AbilityTreeRequirementsModel",
    "BioTitansModel",
    "ChassisModel",
    "CrawlerBaysModel",
    "CrawlerTechLevelsModel",
    "CreaturesModel",
    "DronesModel",
    "EquipmentModel",
    "MeldModel",
    "ModulesModel",
    "NPCsModel",
    "SquadsModel",
    "SystemsModel",
    "VehiclesModel",
    "MODEL_CLASSES",
    "build_models",
    "get_model_class",
    "to_pascal_case",
]
