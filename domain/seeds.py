"""
Default rows inserted at startup.

Ids are stable so seeding can check-then-insert and never duplicates.
"""

from domain.enums import RecipeCategoryType

OTHER_CATEGORY_ID = "cat_other"

DEFAULT_INGREDIENT_CATEGORIES = [
    {"id": "cat_meat", "name": "Meat", "icon": "🥩", "color": "#E57373", "sort_order": 1},
    {"id": "cat_vegetable", "name": "Vegetables", "icon": "🥬", "color": "#81C784", "sort_order": 2},
    {"id": "cat_fruit", "name": "Fruit", "icon": "🍎", "color": "#FFB74D", "sort_order": 3},
    {"id": "cat_seafood", "name": "Seafood", "icon": "🦐", "color": "#4FC3F7", "sort_order": 4},
    {"id": "cat_dairy", "name": "Dairy", "icon": "🥛", "color": "#FFF176", "sort_order": 5},
    {"id": "cat_grain", "name": "Grains", "icon": "🌾", "color": "#D7CCC8", "sort_order": 6},
    {"id": "cat_egg", "name": "Eggs", "icon": "🥚", "color": "#FFE082", "sort_order": 7},
    {"id": "cat_seasoning", "name": "Seasoning", "icon": "🧂", "color": "#BCAAA4", "sort_order": 8},
    {"id": OTHER_CATEGORY_ID, "name": "Other", "icon": "📦", "color": "#9E9E9E", "sort_order": 9},
]


def _recipe_categories(category_type: RecipeCategoryType, entries):
    return [
        {
            "id": f"rc_{category_type.value}_{slug}",
            "type": category_type.value,
            "name": name,
            "color": color,
            "icon": "",
            "sort_order": position,
        }
        for position, (slug, name, color) in enumerate(entries, start=1)
    ]


DEFAULT_RECIPE_CATEGORIES = (
    _recipe_categories(
        RecipeCategoryType.TASTE,
        [
            ("spicy", "Spicy", "#F44336"),
            ("sweet", "Sweet", "#E91E63"),
            ("sour", "Sour", "#CDDC39"),
            ("salty", "Salty", "#607D8B"),
            ("savory", "Savory", "#795548"),
            ("light", "Light", "#8BC34A"),
        ],
    )
    + _recipe_categories(
        RecipeCategoryType.CUISINE,
        [
            ("sichuan", "Sichuan", "#D32F2F"),
            ("cantonese", "Cantonese", "#FFA000"),
            ("hunan", "Hunan", "#C2185B"),
            ("home_style", "Home Style", "#5D4037"),
            ("western", "Western", "#1976D2"),
            ("japanese", "Japanese", "#7B1FA2"),
        ],
    )
    + _recipe_categories(
        RecipeCategoryType.DIFFICULTY,
        [
            ("easy", "Easy", "#4CAF50"),
            ("medium", "Medium", "#FF9800"),
            ("hard", "Hard", "#F44336"),
        ],
    )
    + _recipe_categories(
        RecipeCategoryType.MEAL_TYPE,
        [
            ("breakfast", "Breakfast", "#FFC107"),
            ("lunch", "Lunch", "#03A9F4"),
            ("dinner", "Dinner", "#3F51B5"),
            ("snack", "Snack", "#9C27B0"),
        ],
    )
)
