"""Data schemas for the schema catalog."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SkipValidation


class EntityShape(BaseModel):
    """Minimal shape shared by every entity in every schema.

    Entities are kept as plain dicts at runtime; this model documents the
    fields the registry and search engine rely on and can be used to check
    a record when loading hand-written data.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str | None = None
    effect: str | None = None


class SchemaIndexEntry(BaseModel):
    """One entry of ``schemas/index.json``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str = ""
    data_file: str = Field(alias="dataFile")
    schema_file: str | None = Field(default=None, alias="schemaFile")
    item_count: int | None = Field(default=None, alias="itemCount")
    required_fields: list[str] = Field(default_factory=list, alias="requiredFields")


class SchemaDescriptor(BaseModel):
    """A named collection of entity records."""

    id: str
    title: str
    description: str = ""
    records: SkipValidation[list[dict[str, Any]]] = Field(default_factory=list)


class SchemaCatalog(BaseModel):
    """Ordered list of schema descriptors."""

    schemas: list[SchemaDescriptor] = Field(default_factory=list)

    def get(self, schema_id: str) -> SchemaDescriptor | None:
        """Get a descriptor by schema ID."""
        for schema in self.schemas:
            if schema.id == schema_id:
                return schema
        return None

    def ids(self) -> list[str]:
        """Schema IDs in catalog order."""
        return [s.id for s in self.schemas]

    @classmethod
    def from_records(cls, entries: list[tuple[str, str, list[dict[str, Any]]]]) -> "SchemaCatalog":
        """Build a catalog from ``(id, title, records)`` tuples."""
        return cls(
            schemas=[
                SchemaDescriptor(id=schema_id, title=title, records=records)
                for schema_id, title, records in entries
            ]
        )
