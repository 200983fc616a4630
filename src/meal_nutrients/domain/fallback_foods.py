"""Built-in canonical foods used when the catalog store is unavailable."""

from meal_nutrients.domain.catalog import CanonicalFood, unknown_food
from meal_nutrients.domain.nutrients import make_vector

# Values per 100 g, taken from USDA FoodData Central SR Legacy entries.
STATIC_FOODS: tuple[CanonicalFood, ...] = (
    unknown_food(),
    CanonicalFood(
        canonical_id="apple-raw",
        canonical_name="Apple, raw",
        per_100g=make_vector(
            {
                "vitamin_a_ug": 3,
                "vitamin_c_mg": 4.6,
                "vitamin_e_mg": 0.18,
                "vitamin_k_ug": 2.2,
                "thiamin_mg": 0.017,
                "riboflavin_mg": 0.026,
                "niacin_mg": 0.091,
                "vitamin_b6_mg": 0.041,
                "folate_ug": 3,
                "calcium_mg": 6,
                "iron_mg": 0.12,
                "magnesium_mg": 5,
                "phosphorus_mg": 11,
                "potassium_mg": 107,
                "zinc_mg": 0.04,
                "omega3_g": 0.009,
            }
        ),
    ),
    CanonicalFood(
        canonical_id="banana-raw",
        canonical_name="Banana, raw",
        per_100g=make_vector(
            {
                "vitamin_a_ug": 3,
                "vitamin_c_mg": 8.7,
                "vitamin_e_mg": 0.1,
                "vitamin_k_ug": 0.5,
                "thiamin_mg": 0.031,
                "riboflavin_mg": 0.073,
                "niacin_mg": 0.665,
                "vitamin_b6_mg": 0.367,
                "folate_ug": 20,
                "calcium_mg": 5,
                "iron_mg": 0.26,
                "magnesium_mg": 27,
                "phosphorus_mg": 22,
                "potassium_mg": 358,
                "zinc_mg": 0.15,
                "selenium_ug": 1,
                "omega3_g": 0.027,
            }
        ),
    ),
    CanonicalFood(
        canonical_id="spinach-raw",
        canonical_name="Spinach, raw",
        per_100g=make_vector(
            {
                "vitamin_a_ug": 469,
                "vitamin_c_mg": 28.1,
                "vitamin_e_mg": 2.03,
                "vitamin_k_ug": 482.9,
                "thiamin_mg": 0.078,
                "riboflavin_mg": 0.189,
                "niacin_mg": 0.724,
                "vitamin_b6_mg": 0.195,
                "folate_ug": 194,
                "calcium_mg": 99,
                "iron_mg": 2.71,
                "magnesium_mg": 79,
                "phosphorus_mg": 49,
                "potassium_mg": 558,
                "zinc_mg": 0.53,
                "selenium_ug": 1,
                "omega3_g": 0.138,
            }
        ),
    ),
    CanonicalFood(
        canonical_id="broccoli-raw",
        canonical_name="Broccoli, raw",
        per_100g=make_vector(
            {
                "vitamin_a_ug": 31,
                "vitamin_c_mg": 89.2,
                "vitamin_e_mg": 0.78,
                "vitamin_k_ug": 101.6,
                "thiamin_mg": 0.071,
                "riboflavin_mg": 0.117,
                "niacin_mg": 0.639,
                "vitamin_b6_mg": 0.175,
                "folate_ug": 63,
                "calcium_mg": 47,
                "iron_mg": 0.73,
                "magnesium_mg": 21,
                "phosphorus_mg": 66,
                "potassium_mg": 316,
                "zinc_mg": 0.41,
                "selenium_ug": 2.5,
                "omega3_g": 0.021,
            }
        ),
    ),
    CanonicalFood(
        canonical_id="salmon-cooked",
        canonical_name="Salmon, cooked",
        per_100g=make_vector(
            {
                "vitamin_a_ug": 13,
                "vitamin_c_mg": 3.7,
                "vitamin_d_ug": 13.1,
                "vitamin_e_mg": 1.12,
                "vitamin_k_ug": 0.1,
                "thiamin_mg": 0.34,
                "riboflavin_mg": 0.135,
                "niacin_mg": 8.5,
                "vitamin_b6_mg": 0.647,
                "folate_ug": 34,
                "vitamin_b12_ug": 2.8,
                "calcium_mg": 15,
                "iron_mg": 0.34,
                "magnesium_mg": 30,
                "phosphorus_mg": 252,
                "potassium_mg": 384,
                "zinc_mg": 0.43,
                "selenium_ug": 41.4,
                "omega3_g": 2.3,
            }
        ),
    ),
    CanonicalFood(
        canonical_id="egg-whole",
        canonical_name="Egg, whole",
        per_100g=make_vector(
            {
                "vitamin_a_ug": 160,
                "vitamin_d_ug": 2.0,
                "vitamin_e_mg": 1.05,
                "vitamin_k_ug": 0.3,
                "thiamin_mg": 0.04,
                "riboflavin_mg": 0.457,
                "niacin_mg": 0.075,
                "vitamin_b6_mg": 0.17,
                "folate_ug": 47,
                "vitamin_b12_ug": 0.89,
                "calcium_mg": 56,
                "iron_mg": 1.75,
                "magnesium_mg": 12,
                "phosphorus_mg": 198,
                "potassium_mg": 138,
                "zinc_mg": 1.29,
                "selenium_ug": 30.7,
                "omega3_g": 0.074,
            }
        ),
    ),
    CanonicalFood(
        canonical_id="chicken-breast-cooked",
        canonical_name="Chicken breast, cooked",
        per_100g=make_vector(
            {
                "vitamin_a_ug": 6,
                "vitamin_d_ug": 0.1,
                "vitamin_e_mg": 0.27,
                "thiamin_mg": 0.07,
                "riboflavin_mg": 0.114,
                "niacin_mg": 13.7,
                "vitamin_b6_mg": 0.6,
                "folate_ug": 4,
                "vitamin_b12_ug": 0.34,
                "calcium_mg": 15,
                "iron_mg": 1.04,
                "magnesium_mg": 29,
                "phosphorus_mg": 228,
                "potassium_mg": 256,
                "zinc_mg": 1.0,
                "selenium_ug": 27.6,
                "omega3_g": 0.06,
            }
        ),
    ),
    CanonicalFood(
        canonical_id="rice-white-cooked",
        canonical_name="Rice, white, cooked",
        per_100g=make_vector(
            {
                "vitamin_e_mg": 0.04,
                "thiamin_mg": 0.163,
                "riboflavin_mg": 0.013,
                "niacin_mg": 1.476,
                "vitamin_b6_mg": 0.093,
                "folate_ug": 58,
                "calcium_mg": 10,
                "iron_mg": 1.2,
                "magnesium_mg": 12,
                "phosphorus_mg": 43,
                "potassium_mg": 35,
                "zinc_mg": 0.49,
                "selenium_ug": 7.5,
            }
        ),
    ),
    CanonicalFood(
        canonical_id="milk-whole",
        canonical_name="Milk, whole",
        per_100g=make_vector(
            {
                "vitamin_a_ug": 46,
                "vitamin_d_ug": 1.3,
                "vitamin_e_mg": 0.07,
                "vitamin_k_ug": 0.3,
                "thiamin_mg": 0.046,
                "riboflavin_mg": 0.169,
                "niacin_mg": 0.089,
                "vitamin_b6_mg": 0.036,
                "folate_ug": 5,
                "vitamin_b12_ug": 0.45,
                "calcium_mg": 113,
                "iron_mg": 0.03,
                "magnesium_mg": 10,
                "phosphorus_mg": 84,
                "potassium_mg": 132,
                "zinc_mg": 0.37,
                "selenium_ug": 3.7,
                "omega3_g": 0.075,
            }
        ),
    ),
)
