"""
Lookup Repositories - Data access for units of measure and categories.

Both tables are flat lookups keyed by description. They are written only
by the bootstrap loader; the rest of the application reads them.
"""

from typing import Optional

from sqlalchemy.orm import Session

from app.models import Category, UnitOfMeasure


class UnitOfMeasureRepository:
    """Repository for unit of measure rows."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def find_by_id(self, uom_id: int) -> Optional[UnitOfMeasure]:
        return self.db.get(UnitOfMeasure, uom_id)

    def find_by_description(self, description: str) -> Optional[UnitOfMeasure]:
        """
        Get the unit with the given description.

        Raises:
            MultipleResultsFound: if the description is not unique
        """
        return self.db.query(UnitOfMeasure).filter(
            UnitOfMeasure.description == description
        ).one_or_none()

    def find_all(self) -> list[UnitOfMeasure]:
        return self.db.query(UnitOfMeasure).order_by(UnitOfMeasure.id).all()

    def save(self, uom: UnitOfMeasure) -> UnitOfMeasure:
        """Insert a new unit or update an existing one (upsert)."""
        if uom.id is not None:
            uom = self.db.merge(uom)
        else:
            self.db.add(uom)
        self.db.flush()
        return uom


class CategoryRepository:
    """Repository for category rows."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def find_by_id(self, category_id: int) -> Optional[Category]:
        return self.db.get(Category, category_id)

    def find_by_description(self, description: str) -> Optional[Category]:
        """
        Get the category with the given description.

        Raises:
            MultipleResultsFound: if the description is not unique
        """
        return self.db.query(Category).filter(
            Category.description == description
        ).one_or_none()

    def find_all(self) -> list[Category]:
        return self.db.query(Category).order_by(Category.id).all()

    def save(self, category: Category) -> Category:
        """Insert a new category or update an existing one (upsert)."""
        if category.id is not None:
            category = self.db.merge(category)
        else:
            self.db.add(category)
        self.db.flush()
        return category
