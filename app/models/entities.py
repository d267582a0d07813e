"""
SQLAlchemy ORM Entity Models

These models represent the database tables and define the relationships
between entities.

Ownership:
- A Recipe owns its Ingredients and its Notes; they never outlive it.
- UnitOfMeasure and Category are shared lookup rows. Recipes and
  Ingredients only reference them.

Table Relationships:
    Recipe (1) ──────┬──> (*) Ingredient ──> (1) UnitOfMeasure
                     ├──> (0..1) Notes
                     └──< RecipeCategories >──> (*) Category
"""

import enum

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Integer,
    LargeBinary,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import relationship

from app.database import Base


class Difficulty(str, enum.Enum):
    EASY = "EASY"
    MODERATE = "MODERATE"
    KIND_OF_HARD = "KIND_OF_HARD"
    HARD = "HARD"


recipe_category = Table(
    "RecipeCategories",
    Base.metadata,
    Column("recipe_id", Integer, ForeignKey("Recipes.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("Categories.id"), primary_key=True),
)


class Recipe(Base):
    """
    Recipe metadata and the aggregate root of the domain model.

    Ingredients and notes are reachable only through their recipe.
    Categories are linked through the RecipeCategories join table.
    """
    __tablename__ = "Recipes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String(255), nullable=True)
    prep_time = Column(Integer, nullable=True)   # Minutes
    cook_time = Column(Integer, nullable=True)   # Minutes
    servings = Column(Integer, nullable=True)
    source = Column(String(255), nullable=True)  # e.g., "Simply Recipes"
    url = Column(String(500), nullable=True)
    directions = Column(Text, nullable=True)
    image = Column(LargeBinary, nullable=True)
    difficulty = Column(Enum(Difficulty, native_enum=False, length=20), nullable=True)

    ingredients = relationship(
        "Ingredient",
        back_populates="recipe",
        collection_class=set,
        cascade="all, delete-orphan",
    )
    notes = relationship(
        "Notes",
        back_populates="recipe",
        uselist=False,
        cascade="all, delete-orphan",
    )
    categories = relationship(
        "Category",
        secondary=recipe_category,
        collection_class=set,
    )

    def add_ingredient(self, ingredient: "Ingredient") -> "Recipe":
        """Attach an ingredient, setting both sides of the link.

        The collection is appended first so the ingredient cascades into
        this recipe's session; the backref then sets ingredient.recipe.
        """
        self.ingredients.add(ingredient)
        ingredient.recipe = self
        return self

    def __repr__(self):
        return f"<Recipe id={self.id} description={self.description!r}>"


class Ingredient(Base):
    """
    One line of a recipe's ingredient list.

    The amount is an exact decimal so "0.5" cups stays 0.5.
    """
    __tablename__ = "Ingredients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String(255), nullable=True)
    amount = Column(Numeric(19, 2), nullable=True)
    recipe_id = Column(
        Integer,
        ForeignKey("Recipes.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    uom_id = Column(Integer, ForeignKey("UnitsOfMeasure.id"), nullable=True)

    recipe = relationship("Recipe", back_populates="ingredients")
    uom = relationship("UnitOfMeasure", lazy="joined")

    def __repr__(self):
        return f"<Ingredient id={self.id} description={self.description!r}>"


class UnitOfMeasure(Base):
    """
    Units of measurement.

    Descriptions are unique by convention only; duplicates make
    find_by_description fail.
    Examples: "Teaspoon", "Cup", "Each"
    """
    __tablename__ = "UnitsOfMeasure"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String(50), nullable=True)

    def __repr__(self):
        return f"<UnitOfMeasure id={self.id} description={self.description!r}>"


class Category(Base):
    """Recipe categories such as "American" or "Mexican"."""
    __tablename__ = "Categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String(100), nullable=True)

    def __repr__(self):
        return f"<Category id={self.id} description={self.description!r}>"


class Notes(Base):
    """Free-form notes belonging to exactly one recipe."""
    __tablename__ = "Notes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer,
        ForeignKey("Recipes.id", ondelete="CASCADE"),
        nullable=True,
        unique=True,
    )
    recipe_notes = Column(Text, nullable=True)

    recipe = relationship("Recipe", back_populates="notes")
