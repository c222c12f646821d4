"""Recipes present at process start. They have no owner, so they are read-only."""

from models.recipe import Recipe

SEED_RECIPES = (
    Recipe(
        id="1",
        owner_id=None,
        title="Spaghetti Bolognese",
        image_url="https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg",
        summary="Classic pasta sauce with minced meat and tomatoes.",
        description=(
            "Cook the spaghetti according to the package directions.\n"
            "Make the sauce with onion, garlic, minced meat and tomatoes."
        ),
    ),
    Recipe(
        id="2",
        owner_id=None,
        title="Pancakes with fruit",
        image_url="https://images.pexels.com/photos/376464/pexels-photo-376464.jpeg",
        summary="Fluffy pancakes with seasonal fruit.",
        description=(
            "Whisk the eggs, milk and flour.\n"
            "Fry over medium heat and serve with fresh fruit."
        ),
    ),
)
