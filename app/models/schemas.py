"""
Pydantic Schemas (Command Objects)

Commands mirror the entities for the presentation layer. They carry only
scalar values and id references, never live ORM objects, so templates
cannot walk the persistent object graph.

Every command field has a default: an empty command is a valid value and
is what the services return for soft failures.

RecipeForm is different: it is the validated shape of the recipe HTML
form and only exists at the transport boundary.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, HttpUrl, field_validator

from app.models.entities import Difficulty


# ============================================
# Lookup Commands
# ============================================

class UnitOfMeasureCommand(BaseModel):
    """A unit of measure, e.g. for the ingredient form's drop-down."""
    id: int | None = None
    description: str | None = None


class CategoryCommand(BaseModel):
    id: int | None = None
    description: str | None = None


# ============================================
# Recipe Part Commands
# ============================================

class NotesCommand(BaseModel):
    id: int | None = None
    recipe_notes: str | None = None


class IngredientCommand(BaseModel):
    """
    An ingredient line.

    recipe_id links the ingredient to its recipe by id only; the owning
    recipe is never embedded. The amount has the precision of the stored
    column, so it is never rounded on save.
    """
    id: int | None = None
    recipe_id: int | None = None
    description: str | None = None
    amount: Decimal | None = Field(None, max_digits=19, decimal_places=2)
    uom: UnitOfMeasureCommand | None = None


# ============================================
# Recipe Commands
# ============================================

class RecipeCommand(BaseModel):
    """Full recipe with ingredients, notes and categories."""
    id: int | None = None
    description: str | None = None
    prep_time: int | None = None
    cook_time: int | None = None
    servings: int | None = None
    source: str | None = None
    url: str | None = None
    directions: str | None = None
    difficulty: Difficulty | None = None
    image: bytes | None = None
    notes: NotesCommand | None = None
    ingredients: list[IngredientCommand] = Field(default_factory=list)
    categories: list[CategoryCommand] = Field(default_factory=list)


class RecipeForm(BaseModel):
    """
    Submitted recipe form.

    Blank inputs arrive as empty strings and are treated as missing.
    """
    id: int | None = None
    description: str = Field(..., min_length=3, max_length=255)
    prep_time: int = Field(..., ge=1, le=999)
    cook_time: int = Field(..., ge=1, le=999)
    servings: int = Field(..., ge=1, le=100)
    source: str | None = Field(None, max_length=255)
    url: HttpUrl | None = None
    directions: str = Field(..., min_length=1)
    difficulty: Difficulty | None = None
    notes: str | None = None
    category_ids: list[int] = Field(default_factory=list)

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    def apply_to(self, command: RecipeCommand) -> RecipeCommand:
        """Overlay the form fields on a stored command.

        Ingredients and the image are not part of the form and are kept
        from the stored command. Categories are the checked boxes.
        """
        notes = command.notes.model_copy() if command.notes else NotesCommand()
        notes.recipe_notes = self.notes

        return command.model_copy(update={
            "id": self.id,
            "description": self.description,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "servings": self.servings,
            "source": self.source,
            "url": str(self.url) if self.url else None,
            "directions": self.directions,
            "difficulty": self.difficulty,
            "notes": notes,
            "categories": [CategoryCommand(id=category_id) for category_id in self.category_ids],
        })
