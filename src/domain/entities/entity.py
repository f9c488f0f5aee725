"""
Entity

A single content item (place, thing, person...) identified by (list, key).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import String, UniqueConstraint
from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import isoformat, parse_timestamp, utcnow

# Document fields copied into real columns so they can be filtered and sorted on.
# The document itself, with their original values, stays in ``attributes``.
INDEXED_FIELDS = ("name", "country", "city")
IDENTITY_FIELDS = ("_id", "list", "key")


class Entity(SQLModel, table=True):
    """
    Entity - one content document.

    Business Rules:
    - (list, key) is unique; the store constraint is the only duplicate check
    - list and key never change after creation
    - country/countries/city drive the country and city lookups
    - attributes holds every document field verbatim (types, empty lists and
      explicit nulls included); the name/country/countries/city columns are
      derived from it for querying only
    """

    __tablename__ = "entities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    list_name: str = Field(sa_column=Column("list", String(255), nullable=False))
    key: str = Field(max_length=255)

    name: Optional[str] = Field(default=None, max_length=255)
    country: Optional[str] = Field(default=None, max_length=16, index=True)
    countries: Optional[List[str]] = Field(
        default=None, sa_column=Column(JSON(none_as_null=True))
    )
    city: Optional[str] = Field(default=None, max_length=255, index=True)
    attributes: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("list", "key", name="uq_entity_list_key"),
        Index("idx_entity_list_name_key", "list", "name", "key"),
    )

    @classmethod
    def from_document(
        cls, list_name: str, key: str, document: Dict[str, Any], now: datetime
    ) -> "Entity":
        """
        Build a new entity from a client document.

        The path identifiers win over anything in the body. createdAt is kept
        when supplied; updatedAt is always ``now``.

        Raises:
            ValueError: createdAt is not a timestamp or countries is not a list
        """
        fields = {k: v for k, v in document.items() if k not in IDENTITY_FIELDS}
        created_at = fields.pop("createdAt", None)
        fields.pop("updatedAt", None)

        entity = cls(
            list_name=list_name,
            key=key,
            created_at=parse_timestamp(created_at) if created_at else now,
            updated_at=now,
        )
        entity._assign(fields)
        return entity

    def apply_patch(self, patch: Dict[str, Any], now: datetime) -> None:
        """Merge patch fields over the stored document; identifiers are ignored"""
        fields = {k: v for k, v in patch.items() if k not in IDENTITY_FIELDS}
        created_at = fields.pop("createdAt", None)
        fields.pop("updatedAt", None)
        if created_at:
            self.created_at = parse_timestamp(created_at)
        self._assign(fields)
        self.updated_at = now

    def _assign(self, fields: Dict[str, Any]) -> None:
        countries = fields.get("countries")
        if countries is not None and not isinstance(countries, list):
            raise ValueError("countries must be a list")

        # Reassign so the JSON column registers the change
        self.attributes = {**(self.attributes or {}), **fields}
        self._sync_query_columns()

    def _sync_query_columns(self) -> None:
        document = self.attributes or {}
        for field in INDEXED_FIELDS:
            value = document.get(field)
            setattr(self, field, None if value is None else str(value))
        countries = document.get("countries")
        self.countries = None if countries is None else [str(c) for c in countries]

    def to_document(self) -> dict:
        document = dict(self.attributes or {})
        document["list"] = self.list_name
        document["key"] = self.key
        document["createdAt"] = isoformat(self.created_at)
        document["updatedAt"] = isoformat(self.updated_at)
        return document
