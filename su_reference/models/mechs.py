"""Accessors for mech parts: chassis, systems and modules."""

from .base import Entity, RecordModel, has_trait, number_at_least

WEAPON_TRAITS = ("melee", "ballistic", "energy", "missile")


class ChassisModel(RecordModel):
    """Mech chassis. Stats live in the nested ``stats`` mapping."""

    @staticmethod
    def _stat(entity: Entity, key: str):
        stats = entity.get("stats") or {}
        return stats.get(key)

    def find_by_tech_level(self, level: int) -> list[Entity]:
        return self.find_all(lambda c: self._stat(c, "tech_level") == level)

    def find_by_salvage_value(self, value: int) -> list[Entity]:
        return self.find_all(lambda c: self._stat(c, "salvage_value") == value)

    def find_by_min_structure_points(self, minimum: int) -> list[Entity]:
        return self.find_all(lambda c: number_at_least(self._stat(c, "structure_pts"), minimum))

    def find_by_min_system_slots(self, minimum: int) -> list[Entity]:
        return self.find_all(lambda c: number_at_least(self._stat(c, "system_slots"), minimum))

    def find_by_min_module_slots(self, minimum: int) -> list[Entity]:
        return self.find_all(lambda c: number_at_least(self._stat(c, "module_slots"), minimum))

    def find_by_min_cargo_cap(self, minimum: int) -> list[Entity]:
        return self.find_all(lambda c: number_at_least(self._stat(c, "cargo_cap"), minimum))


class SystemsModel(RecordModel):
    """Mech systems."""

    def find_by_tech_level(self, level: int) -> list[Entity]:
        return self.find_all(lambda s: s.get("techLevel") == level)

    def find_by_salvage_value(self, value: int) -> list[Entity]:
        return self.find_all(lambda s: s.get("salvageValue") == value)

    def find_by_slots_required(self, slots: int) -> list[Entity]:
        return self.find_all(lambda s: s.get("slotsRequired") == slots)

    def find_by_trait(self, trait_type: str) -> list[Entity]:
        return self.find_all(lambda s: has_trait(s, trait_type))

    def get_weapons(self) -> list[Entity]:
        """Systems carrying any weapon trait."""
        return self.find_all(lambda s: any(has_trait(s, t) for t in WEAPON_TRAITS))

    def find_by_damage_type(self, damage_type: str) -> list[Entity]:
        """Find systems dealing SP, HP or EP damage."""

        def matches(s: Entity) -> bool:
            damage = s.get("damage")
            return isinstance(damage, dict) and damage.get("type") == damage_type

        return self.find_all(matches)

    def find_by_min_damage(self, minimum: int) -> list[Entity]:
        def matches(s: Entity) -> bool:
            damage = s.get("damage")
            return isinstance(damage, dict) and "amount" in damage and number_at_least(
                damage["amount"], minimum
            )

        return self.find_all(matches)


class ModulesModel(RecordModel):
    """Mech modules."""

    def find_by_tech_level(self, level: int) -> list[Entity]:
        return self.find_all(lambda m: m.get("techLevel") == level)

    def find_by_salvage_value(self, value: int) -> list[Entity]:
        return self.find_all(lambda m: m.get("salvageValue") == value)

    def find_by_slots_required(self, slots: int) -> list[Entity]:
        return self.find_all(lambda m: m.get("slotsRequired") == slots)

    def find_by_trait(self, trait_type: str) -> list[Entity]:
        return self.find_all(lambda m: has_trait(m, trait_type))

    def get_recommended(self) -> list[Entity]:
        return self.find_all(lambda m: m.get("recommended") is True)

    def find_by_action_type(self, action_type: str) -> list[Entity]:
        return self.find_all(lambda m: m.get("actionType") == action_type)
