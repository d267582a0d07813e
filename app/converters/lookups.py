"""Converters for the shared lookup rows (units of measure, categories)."""

from typing import Optional

from app.models import Category, CategoryCommand, UnitOfMeasure, UnitOfMeasureCommand


class UnitOfMeasureConverter:

    def to_command(self, source: Optional[UnitOfMeasure]) -> Optional[UnitOfMeasureCommand]:
        if source is None:
            return None
        return UnitOfMeasureCommand(id=source.id, description=source.description)

    def to_entity(self, source: Optional[UnitOfMeasureCommand]) -> Optional[UnitOfMeasure]:
        if source is None:
            return None
        return UnitOfMeasure(id=source.id, description=source.description)


class CategoryConverter:

    def to_command(self, source: Optional[Category]) -> Optional[CategoryCommand]:
        if source is None:
            return None
        return CategoryCommand(id=source.id, description=source.description)

    def to_entity(self, source: Optional[CategoryCommand]) -> Optional[Category]:
        if source is None:
            return None
        return Category(id=source.id, description=source.description)
