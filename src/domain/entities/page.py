"""
Page Entity

A named list of content entities (the ``--info--`` block of a page response).
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Field, SQLModel


class Page(SQLModel, table=True):
    """
    Page entity - metadata describing one list of entities.

    Business Rules:
    - key is unique and matches Entity.list_name of its members
    - attributes holds the free-form document fields
    """

    __tablename__ = "pages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    key: str = Field(unique=True, index=True, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)
    attributes: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    def to_document(self) -> dict:
        document = dict(self.attributes or {})
        document["key"] = self.key
        if self.name is not None:
            document["name"] = self.name
        return document
