import os

# Must be set before anything imports app.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BOOTSTRAP_ENABLED"] = "false"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.converters import (  # noqa: E402
    CategoryConverter,
    IngredientConverter,
    NotesConverter,
    RecipeConverter,
    UnitOfMeasureConverter,
)
from app.database import Base, SessionLocal, engine, init_db  # noqa: E402
from app.dependencies import build_recipe_converter  # noqa: E402
from app.main import app  # noqa: E402
from app.models import (  # noqa: E402
    Category,
    CategoryCommand,
    Difficulty,
    IngredientCommand,
    NotesCommand,
    RecipeCommand,
    UnitOfMeasure,
    UnitOfMeasureCommand,
)
from app.repositories import CategoryRepository, RecipeRepository, UnitOfMeasureRepository  # noqa: E402
from app.services import ImageService, IngredientService, RecipeService, UnitOfMeasureService  # noqa: E402


@pytest.fixture(autouse=True)
def tables():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def uoms(db) -> dict[str, int]:
    """Seed a few units and return their ids by description."""
    rows = [UnitOfMeasure(description=d) for d in ("Each", "Cup", "Tablespoon", "Teaspoon")]
    db.add_all(rows)
    db.commit()
    return {row.description: row.id for row in rows}


@pytest.fixture
def categories(db) -> dict[str, int]:
    rows = [Category(description=d) for d in ("American", "Mexican", "Italian")]
    db.add_all(rows)
    db.commit()
    return {row.description: row.id for row in rows}


@pytest.fixture
def recipe_converter() -> RecipeConverter:
    return build_recipe_converter()


@pytest.fixture
def ingredient_converter() -> IngredientConverter:
    return IngredientConverter(UnitOfMeasureConverter())


@pytest.fixture
def recipe_service(db, recipe_converter) -> RecipeService:
    return RecipeService(db, RecipeRepository(db), recipe_converter)


@pytest.fixture
def ingredient_service(db, ingredient_converter) -> IngredientService:
    return IngredientService(db, RecipeRepository(db), UnitOfMeasureRepository(db), ingredient_converter)


@pytest.fixture
def image_service(db) -> ImageService:
    return ImageService(db, RecipeRepository(db))


@pytest.fixture
def uom_service(db) -> UnitOfMeasureService:
    return UnitOfMeasureService(UnitOfMeasureRepository(db), UnitOfMeasureConverter())


@pytest.fixture
def recipe_command(uoms, categories) -> RecipeCommand:
    return RecipeCommand(
        description="Perfect Guacamole",
        prep_time=10,
        cook_time=1,
        servings=4,
        source="Simply Recipes",
        url="http://www.simplyrecipes.com/recipes/perfect_guacamole/",
        directions="Mash the avocados.",
        difficulty=Difficulty.EASY,
        notes=NotesCommand(recipe_notes="Add salsa for a quick version."),
        ingredients=[
            IngredientCommand(
                description="ripe avocados",
                amount=Decimal("2"),
                uom=UnitOfMeasureCommand(id=uoms["Each"]),
            ),
            IngredientCommand(
                description="fresh lime juice",
                amount=Decimal("2"),
                uom=UnitOfMeasureCommand(id=uoms["Tablespoon"]),
            ),
        ],
        categories=[CategoryCommand(id=categories["Mexican"])],
    )


@pytest.fixture
def saved_recipe(recipe_service, recipe_command) -> RecipeCommand:
    return recipe_service.save_recipe_command(recipe_command)


@pytest.fixture
def client() -> TestClient:
    # Not used as a context manager: the lifespan (bootstrap) stays off
    return TestClient(app)


@pytest.fixture
def lookup_repositories(db):
    return UnitOfMeasureRepository(db), CategoryRepository(db)


@pytest.fixture
def converters():
    uom_converter = UnitOfMeasureConverter()
    return {
        "uom": uom_converter,
        "category": CategoryConverter(),
        "notes": NotesConverter(),
        "ingredient": IngredientConverter(uom_converter),
    }
