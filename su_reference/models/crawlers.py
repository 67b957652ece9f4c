"""Accessors for crawler bays and crawler tech levels."""

from .base import Entity, RecordModel, as_number


class CrawlerBaysModel(RecordModel):
    def find_bays_with_roll_tables(self) -> list[Entity]:
        """Bays carrying a non-empty roll table."""
        return self.find_all(lambda b: isinstance(b.get("table"), dict) and len(b["table"]) > 0)

    def find_bays_with_tech_level_effects(self) -> list[Entity]:
        return self.find_all(lambda b: bool(b.get("techLevelEffects")))


class CrawlerTechLevelsModel(RecordModel):
    """Crawler tech levels and the population each one supports.

    Missing or null population bounds read as 0.
    """

    def find_by_tech_level(self, level: int) -> Entity | None:
        return self.find(lambda c: c.get("techLevel") == level)

    def find_by_min_population(self, minimum: int) -> list[Entity]:
        return self.find_all(lambda c: as_number(c.get("populationMin")) >= minimum)

    def find_by_max_population(self, maximum: int) -> list[Entity]:
        return self.find_all(lambda c: 0 < as_number(c.get("populationMax")) <= maximum)

    def find_by_population_range(self, population: int) -> Entity | None:
        """Find the tech level whose population band contains ``population``.

        A ``populationMax`` of 0 means the band has no upper limit.
        """

        def matches(c: Entity) -> bool:
            low = as_number(c.get("populationMin"))
            high = as_number(c.get("populationMax"))
            if high == 0:
                return population >= low
            return low <= population <= high

        return self.find(matches)
