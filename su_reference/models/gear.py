"""Accessors for pilot equipment, drones and vehicles."""

from .base import Entity, RecordModel, has_trait, number_at_least
from .mechs import WEAPON_TRAITS


class EquipmentModel(RecordModel):
    """Pilot equipment."""

    def find_by_tech_level(self, level: int) -> list[Entity]:
        return self.find_all(lambda e: e.get("techLevel") == level)

    def find_by_trait(self, trait_type: str) -> list[Entity]:
        return self.find_all(lambda e: has_trait(e, trait_type))

    def find_by_activation_cost(self, cost: int) -> list[Entity]:
        return self.find_all(lambda e: e.get("activationCost") == cost)

    def get_armor(self) -> list[Entity]:
        return self.find_by_trait("armor")

    def get_weapons(self) -> list[Entity]:
        return self.find_all(lambda e: any(has_trait(e, t) for t in WEAPON_TRAITS))

    def get_with_actions(self) -> list[Entity]:
        return self.find_all(lambda e: len(e.get("actions") or []) > 0)


class _SalvageModel(RecordModel):
    """Shared filters for salvageable machines with tech level and SP."""

    def find_by_tech_level(self, level: int) -> list[Entity]:
        return self.find_all(lambda e: e.get("techLevel") == level)

    def find_by_salvage_value(self, value: int) -> list[Entity]:
        return self.find_all(lambda e: e.get("salvageValue") == value)

    def find_by_min_structure_points(self, minimum: int) -> list[Entity]:
        return self.find_all(lambda e: number_at_least(e.get("structurePoints"), minimum))


class DronesModel(_SalvageModel):
    pass


class VehiclesModel(_SalvageModel):
    pass
