"""Accessors for abilities, creatures, NPCs, meld, squads and bio-titans."""

from .base import Entity, RecordModel, has_trait, number_at_least


class AbilitiesModel(RecordModel):
    """Pilot abilities, grouped into trees."""

    def find_by_level(self, level: int) -> list[Entity]:
        return self.find_all(lambda a: a.get("level") == level)

    def find_by_tree(self, tree_name: str) -> list[Entity]:
        return self.find_all(lambda a: a.get("tree") == tree_name)

    def find_by_trait(self, trait_type: str) -> list[Entity]:
        return self.find_all(lambda a: has_trait(a, trait_type))

    def get_all_trees(self) -> list[str]:
        """Distinct tree names, sorted."""
        return sorted({a["tree"] for a in self.all() if a.get("tree")})


class _HitPointsModel(RecordModel):
    def find_by_hit_points(self, hp: int) -> list[Entity]:
        return self.find_all(lambda e: e.get("hitPoints") == hp)

    def find_by_min_hit_points(self, minimum: int) -> list[Entity]:
        return self.find_all(lambda e: number_at_least(e.get("hitPoints"), minimum))


class CreaturesModel(_HitPointsModel):
    pass


class NPCsModel(_HitPointsModel):
    pass


class _StructurePointsModel(RecordModel):
    def find_by_min_structure_points(self, minimum: int) -> list[Entity]:
        return self.find_all(lambda e: number_at_least(e.get("structurePoints"), minimum))


class BioTitansModel(_StructurePointsModel):
    pass


class MeldModel(_HitPointsModel, _StructurePointsModel):
    """Meld creatures; smaller ones carry hit points, larger ones structure points."""


class SquadsModel(_HitPointsModel, _StructurePointsModel):
    pass


class AbilityTreeRequirementsModel(RecordModel):
    def find_by_tree(self, tree_name: str) -> Entity | None:
        """Requirements entry for one ability tree."""
        return self.find(lambda r: r.get("tree") == tree_name)
