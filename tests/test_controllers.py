from decimal import Decimal

from app.models import Ingredient, Recipe


class TestIndex:

    def test_index_lists_recipes(self, client, saved_recipe) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "Perfect Guacamole" in response.text
        assert client.get("/index").status_code == 200

    def test_health(self, client) -> None:
        assert client.get("/health").json()["status"] == "healthy"


class TestRecipePages:

    def test_show(self, client, saved_recipe) -> None:
        response = client.get(f"/recipe/{saved_recipe.id}/show")

        assert response.status_code == 200
        assert "Perfect Guacamole" in response.text
        assert "ripe avocados" in response.text

    def test_show_unknown_recipe_is_404(self, client) -> None:
        response = client.get("/recipe/42/show")

        assert response.status_code == 404
        assert "Recipe Not Found. For ID value: 42" in response.text

    def test_non_numeric_id_is_400(self, client) -> None:
        response = client.get("/recipe/abc/show")

        assert response.status_code == 400

    def test_new_form(self, client) -> None:
        response = client.get("/recipe/new")

        assert response.status_code == 200
        assert "<form" in response.text

    def test_update_form_prefilled(self, client, saved_recipe) -> None:
        response = client.get(f"/recipe/{saved_recipe.id}/update")

        assert response.status_code == 200
        assert "Simply Recipes" in response.text

    def test_create(self, db, client) -> None:
        response = client.post(
            "/recipe",
            data={
                "id": "",
                "description": "Pico de Gallo",
                "prep_time": "15",
                "cook_time": "1",
                "servings": "4",
                "url": "",
                "directions": "Chop and mix.",
                "difficulty": "EASY",
                "notes": "Best fresh.",
            },
            follow_redirects=False,
        )

        assert response.status_code == 303
        recipe = db.query(Recipe).one()
        assert response.headers["location"] == f"/recipe/{recipe.id}/show"
        assert recipe.description == "Pico de Gallo"
        assert recipe.notes.recipe_notes == "Best fresh."

    def test_update_keeps_ingredients(self, db, client, saved_recipe) -> None:
        response = client.post(
            "/recipe",
            data={
                "id": str(saved_recipe.id),
                "description": "Chunky Guacamole",
                "prep_time": "10",
                "cook_time": "1",
                "servings": "4",
                "directions": "Mash lightly.",
            },
            follow_redirects=False,
        )

        assert response.status_code == 303
        db.expire_all()
        recipe = db.get(Recipe, saved_recipe.id)
        assert recipe.description == "Chunky Guacamole"
        assert len(recipe.ingredients) == 2
        assert db.query(Recipe).count() == 1

    def test_form_lists_categories(self, client, categories) -> None:
        response = client.get("/recipe/new")

        assert 'name="category_ids"' in response.text
        assert "Italian" in response.text

    def test_update_sets_checked_categories(self, db, client, saved_recipe, categories) -> None:
        response = client.post(
            "/recipe",
            data={
                "id": str(saved_recipe.id),
                "description": "Perfect Guacamole",
                "prep_time": "10",
                "cook_time": "1",
                "servings": "4",
                "directions": "Mash the avocados.",
                "category_ids": [str(categories["American"]), str(categories["Mexican"])],
            },
            follow_redirects=False,
        )

        assert response.status_code == 303
        db.expire_all()
        recipe = db.get(Recipe, saved_recipe.id)
        assert {c.description for c in recipe.categories} == {"American", "Mexican"}

    def test_invalid_form_rerenders_with_errors(self, db, client) -> None:
        response = client.post(
            "/recipe",
            data={"description": "ab", "prep_time": "0", "cook_time": "5", "servings": "4", "directions": ""},
            follow_redirects=False,
        )

        assert response.status_code == 200
        assert "Please correct the errors below." in response.text
        assert "description" in response.text
        assert "prep_time" in response.text
        assert db.query(Recipe).count() == 0

    def test_delete(self, db, client, saved_recipe) -> None:
        response = client.get(f"/recipe/{saved_recipe.id}/delete", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/"
        db.expire_all()
        assert db.query(Recipe).count() == 0


class TestIngredientPages:

    def test_list(self, client, saved_recipe) -> None:
        response = client.get(f"/recipe/{saved_recipe.id}/ingredients")

        assert response.status_code == 200
        assert "fresh lime juice" in response.text

    def test_show(self, client, saved_recipe) -> None:
        ingredient = saved_recipe.ingredients[0]

        response = client.get(f"/recipe/{saved_recipe.id}/ingredient/{ingredient.id}/show")

        assert response.status_code == 200
        assert ingredient.description in response.text

    def test_show_unknown_ingredient_is_404(self, client, saved_recipe) -> None:
        response = client.get(f"/recipe/{saved_recipe.id}/ingredient/999/show")

        assert response.status_code == 404

    def test_new_form_lists_units(self, client, saved_recipe) -> None:
        response = client.get(f"/recipe/{saved_recipe.id}/ingredient/new")

        assert response.status_code == 200
        assert "Tablespoon" in response.text

    def test_new_form_for_unknown_recipe_is_404(self, client) -> None:
        assert client.get("/recipe/9/ingredient/new").status_code == 404

    def test_save_new_ingredient(self, db, client, saved_recipe, uoms) -> None:
        response = client.post(
            f"/recipe/{saved_recipe.id}/ingredient",
            data={"id": "", "description": "Cilantro", "amount": "2", "uom_id": str(uoms["Tablespoon"])},
            follow_redirects=False,
        )

        assert response.status_code == 303
        db.expire_all()
        cilantro = db.query(Ingredient).filter(Ingredient.description == "Cilantro").one()
        assert cilantro.amount == Decimal("2")
        assert response.headers["location"] == f"/recipe/{saved_recipe.id}/ingredient/{cilantro.id}/show"

    def test_amount_with_three_decimals_is_400(self, db, client, saved_recipe, uoms) -> None:
        response = client.post(
            f"/recipe/{saved_recipe.id}/ingredient",
            data={"description": "Kosher salt", "amount": "0.125", "uom_id": str(uoms["Teaspoon"])},
            follow_redirects=False,
        )

        assert response.status_code == 400
        assert db.query(Ingredient).count() == 2

    def test_save_for_unknown_recipe_redirects_home(self, db, client, saved_recipe, uoms) -> None:
        response = client.post(
            f"/recipe/{saved_recipe.id + 1}/ingredient",
            data={"description": "Cilantro", "amount": "2", "uom_id": str(uoms["Tablespoon"])},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/"
        assert db.query(Ingredient).count() == 2

    def test_delete(self, db, client, saved_recipe) -> None:
        ingredient = saved_recipe.ingredients[0]

        response = client.get(
            f"/recipe/{saved_recipe.id}/ingredient/{ingredient.id}/delete", follow_redirects=False
        )

        assert response.status_code == 303
        assert response.headers["location"] == f"/recipe/{saved_recipe.id}/ingredients"
        db.expire_all()
        assert db.get(Ingredient, ingredient.id) is None


class TestImagePages:

    def test_upload_form(self, client, saved_recipe) -> None:
        response = client.get(f"/recipe/{saved_recipe.id}/image")

        assert response.status_code == 200
        assert "imagefile" in response.text

    def test_upload_and_render(self, client, saved_recipe) -> None:
        image = b"\xff\xd8\xff\xe0 not really a jpeg"

        response = client.post(
            f"/recipe/{saved_recipe.id}/image",
            files={"imagefile": ("guac.jpg", image, "image/jpeg")},
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert response.headers["location"] == f"/recipe/{saved_recipe.id}/show"

        rendered = client.get(f"/recipe/{saved_recipe.id}/recipeimage")
        assert rendered.status_code == 200
        assert rendered.headers["content-type"] == "image/jpeg"
        assert rendered.content == image

    def test_recipe_without_image_is_404(self, client, saved_recipe) -> None:
        assert client.get(f"/recipe/{saved_recipe.id}/recipeimage").status_code == 404

    def test_upload_for_unknown_recipe_is_404(self, client) -> None:
        response = client.post(
            "/recipe/3/image",
            files={"imagefile": ("x.jpg", b"data", "image/jpeg")},
            follow_redirects=False,
        )
        assert response.status_code == 404
