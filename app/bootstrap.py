"""
Bootstrap Loader

Runs once at application startup:
1. Seeds the unit of measure and category lookup tables when they are empty.
2. Checks that every lookup row the sample recipes need is present.
   A missing row raises BootstrapException and startup is aborted.
3. Inserts the two sample recipes, unless recipes already exist.

Everything happens in a single transaction.
"""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from app.database import transaction
from app.exceptions import BootstrapException
from app.models import Category, Difficulty, Ingredient, Notes, Recipe, UnitOfMeasure
from app.repositories import CategoryRepository, RecipeRepository, UnitOfMeasureRepository

logger = logging.getLogger(__name__)

DEFAULT_UOMS = ["Teaspoon", "Tablespoon", "Cup", "Pinch", "Ounce", "Each", "Pint", "Dash"]
DEFAULT_CATEGORIES = ["American", "Italian", "Mexican", "Fast Food"]

GUACAMOLE_DIRECTIONS = """\
1 Cut avocado, remove flesh: Cut the avocados in half. Remove seed. Score the inside of the avocado with a blunt knife and scoop out the flesh with a spoon.
2 Mash with a fork: Using a fork, roughly mash the avocado. (Don't overdo it! The guacamole should be a little chunky.)
3 Add salt, lime juice, and the rest: Sprinkle with salt and lime (or lemon) juice. The acid in the lime juice will provide some balance to the richness of the avocado and will help delay the avocados from turning brown.
Add the chopped onion, cilantro, black pepper, and chiles. Chili peppers vary individually in their hotness. So, start with a half of one chili pepper and add to the guacamole to your desired degree of hotness.
Remember that much of this is done to taste because of the variability in the fresh ingredients. Start with this recipe and adjust to your taste.
4 Cover with plastic and chill to store: Place plastic wrap on the surface of the guacamole cover it and to prevent air reaching it. (The oxygen in the air causes oxidation which will turn the guacamole brown.) Refrigerate until ready to serve.
Chilling tomatoes hurts their flavor, so if you want to add chopped tomato to your guacamole, add it just before serving.
"""

GUACAMOLE_NOTES = """\
For a very quick guacamole just take a 1/4 cup of salsa and mix it in with your mashed avocados.
Feel free to experiment! One classic Mexican guacamole has pomegranate seeds and chunks of peaches in it (a Diana Kennedy favorite). Try guacamole with added pineapple, mango, or strawberries.
The simplest version of guacamole is just mashed avocados with salt. Don't let the lack of availability of other ingredients stop you from making guacamole.
To extend a limited supply of avocados, add either sour cream or cottage cheese to your guacamole dip. Purists may be horrified, but so what? It tastes great.
"""

TACOS_DIRECTIONS = """\
1 Prepare a gas or charcoal grill for medium-high, direct heat.
2 Make the marinade and coat the chicken: In a large bowl, stir together the chili powder, oregano, cumin, sugar, salt, garlic and orange zest. Stir in the orange juice and olive oil to make a loose paste. Add the chicken to the bowl and toss to coat all over.
Set aside to marinate while the grill heats and you prepare the rest of the toppings.
3 Grill the chicken: Grill the chicken for 3 to 4 minutes per side, or until a thermometer inserted into the thickest part of the meat registers 165F. Transfer to a plate and rest for 5 minutes.
4 Warm the tortillas: Place each tortilla on the grill or on a hot, dry skillet over medium-high heat. As soon as you see pockets of the air start to puff up in the tortilla, turn it with tongs and heat for a few seconds on the other side.
Wrap warmed tortillas in a tea towel to keep them warm until serving.
5 Assemble the tacos: Slice the chicken into strips. On each tortilla, place a small handful of arugula. Top with chicken slices, sliced avocado, radishes, tomatoes, and onion slices. Drizzle with the thinned sour cream. Serve with lime wedges.
"""

TACOS_NOTES = """\
We have a family motto and it is this: Everything goes better in a tortilla.
Any and every kind of leftover can go inside a warm tortilla, usually with a healthy dose of pickled jalapenos.
First, I marinate the chicken briefly in a spicy paste of ancho chile powder, oregano, cumin, and sweet orange juice while the grill is heating. You can also use this time to prepare the taco toppings.
Grill the chicken, then let it rest while you warm the tortillas. Now you are ready to assemble the tacos and dig in. The whole meal comes together in about 30 minutes!
"""


class RecipeBootstrap:
    """Loads lookup rows and sample recipes into an empty database."""

    def __init__(
        self,
        db: Session,
        categories: CategoryRepository,
        recipes: RecipeRepository,
        uoms: UnitOfMeasureRepository,
    ):
        self.db = db
        self.categories = categories
        self.recipes = recipes
        self.uoms = uoms

    @classmethod
    def for_session(cls, db: Session) -> "RecipeBootstrap":
        return cls(db, CategoryRepository(db), RecipeRepository(db), UnitOfMeasureRepository(db))

    def run(self, seed_lookups: bool = True) -> list[Recipe]:
        """
        Load the bootstrap data.

        Returns:
            The recipes that were inserted (empty if recipes already existed)

        Raises:
            BootstrapException: if a required lookup row is missing
        """
        with transaction(self.db):
            if seed_lookups:
                self.seed_lookups()

            if self.recipes.count() > 0:
                logger.info("Recipes already present, skipping bootstrap recipes")
                return []

            saved = self.recipes.save_all(self.get_recipes())

        logger.info(f"Loaded {len(saved)} bootstrap recipes")
        return saved

    def seed_lookups(self) -> None:
        """Insert the default units and categories into empty lookup tables."""
        if not self.uoms.find_all():
            for description in DEFAULT_UOMS:
                self.uoms.save(UnitOfMeasure(description=description))
            logger.debug(f"Seeded {len(DEFAULT_UOMS)} units of measure")

        if not self.categories.find_all():
            for description in DEFAULT_CATEGORIES:
                self.categories.save(Category(description=description))
            logger.debug(f"Seeded {len(DEFAULT_CATEGORIES)} categories")

    def _uom(self, description: str) -> UnitOfMeasure:
        uom = self.uoms.find_by_description(description)
        if uom is None:
            raise BootstrapException(f"Expected UOM Not Found: {description}")
        return uom

    def _category(self, description: str) -> Category:
        category = self.categories.find_by_description(description)
        if category is None:
            raise BootstrapException(f"Expected Category Not Found: {description}")
        return category

    def get_recipes(self) -> list[Recipe]:
        """Build the sample recipes as detached entities."""
        each = self._uom("Each")
        tablespoon = self._uom("Tablespoon")
        teaspoon = self._uom("Teaspoon")
        dash = self._uom("Dash")
        pint = self._uom("Pint")
        cup = self._uom("Cup")

        american = self._category("American")
        mexican = self._category("Mexican")

        guacamole = Recipe(
            description="Perfect Guacamole",
            prep_time=10,
            cook_time=0,
            servings=4,
            difficulty=Difficulty.EASY,
            source="Simply Recipes",
            url="http://www.simplyrecipes.com/recipes/perfect_guacamole/",
            directions=GUACAMOLE_DIRECTIONS,
        )
        guacamole.notes = Notes(recipe_notes=GUACAMOLE_NOTES)
        for description, amount, uom in [
            ("ripe avocados", "2", each),
            ("Kosher salt", ".5", teaspoon),
            ("fresh lime juice or lemon juice", "2", tablespoon),
            ("minced red onion or thinly sliced green onion", "2", tablespoon),
            ("serrano chiles, stems and seeds removed, minced", "2", each),
            ("Cilantro", "2", tablespoon),
            ("freshly grated black pepper", "2", dash),
            ("ripe tomato, seeds and pulp removed, chopped", ".5", each),
        ]:
            guacamole.add_ingredient(Ingredient(description=description, amount=Decimal(amount), uom=uom))
        guacamole.categories.update([american, mexican])

        tacos = Recipe(
            description="Spicy Grilled Chicken Taco",
            prep_time=20,
            cook_time=9,
            servings=4,
            difficulty=Difficulty.MODERATE,
            source="Simply Recipes",
            url="http://www.simplyrecipes.com/recipes/spicy_grilled_chicken_tacos/",
            directions=TACOS_DIRECTIONS,
        )
        tacos.notes = Notes(recipe_notes=TACOS_NOTES)
        for description, amount, uom in [
            ("Ancho Chili Powder", "2", tablespoon),
            ("Dried Oregano", "1", teaspoon),
            ("Dried Cumin", "1", teaspoon),
            ("Sugar", "1", teaspoon),
            ("Salt", ".5", teaspoon),
            ("Clove of Garlic, Chopped", "1", each),
            ("finely grated orange zest", "1", tablespoon),
            ("fresh-squeezed orange juice", "3", tablespoon),
            ("Olive Oil", "2", tablespoon),
            ("boneless chicken thighs", "4", tablespoon),
            ("small corn tortillas", "8", each),
            ("packed baby arugula", "3", cup),
            ("medium ripe avocados, sliced", "2", each),
            ("radishes, thinly sliced", "4", each),
            ("cherry tomatoes, halved", ".5", pint),
            ("red onion, thinly sliced", ".25", each),
            ("Roughly chopped cilantro", "4", each),
            ("cup sour cream thinned with 1/4 cup milk", "4", cup),
            ("lime, cut into wedges", "4", each),
        ]:
            tacos.add_ingredient(Ingredient(description=description, amount=Decimal(amount), uom=uom))
        tacos.categories.update([american, mexican])

        return [guacamole, tacos]
