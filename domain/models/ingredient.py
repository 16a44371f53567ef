"""
Ingredient model - the shopping list entries.
"""

from sqlalchemy import Column, Integer, Text, text

from domain.models.database import Base


class IngredientRecord(Base):
    """
    Row in the ``ingredients`` table.

    ``completed`` is stored as 0/1; timestamps are epoch milliseconds and the id
    is assigned by the caller, never by the store.
    """

    __tablename__ = "ingredients"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    completed = Column(Integer, nullable=False, default=0, server_default=text("0"))
    created_at = Column(Integer, nullable=False)
    updated_at = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<IngredientRecord(id={self.id}, name='{self.name}')>"
