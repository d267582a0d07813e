"""Read-only services over the lookup tables, used to fill form drop-downs."""

from app.converters import CategoryConverter, UnitOfMeasureConverter
from app.models import CategoryCommand, UnitOfMeasureCommand
from app.repositories import CategoryRepository, UnitOfMeasureRepository


class UnitOfMeasureService:

    def __init__(self, uoms: UnitOfMeasureRepository, converter: UnitOfMeasureConverter):
        self.uoms = uoms
        self.converter = converter

    def list_all_uoms(self) -> list[UnitOfMeasureCommand]:
        """All units of measure as commands."""
        return [self.converter.to_command(uom) for uom in self.uoms.find_all()]


class CategoryService:

    def __init__(self, categories: CategoryRepository, converter: CategoryConverter):
        self.categories = categories
        self.converter = converter

    def list_all_categories(self) -> list[CategoryCommand]:
        return [self.converter.to_command(category) for category in self.categories.find_all()]
