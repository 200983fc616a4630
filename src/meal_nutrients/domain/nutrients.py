"""Nutrient vector schema and daily reference values."""

import math
from collections.abc import Mapping

NUTRIENT_DB_VERSION = "v0.2-usda-foundation"

NUTRIENT_KEYS: tuple[str, ...] = (
    "vitamin_a_ug",
    "vitamin_c_mg",
    "vitamin_d_ug",
    "vitamin_e_mg",
    "vitamin_k_ug",
    "thiamin_mg",
    "riboflavin_mg",
    "niacin_mg",
    "vitamin_b6_mg",
    "folate_ug",
    "vitamin_b12_ug",
    "calcium_mg",
    "iron_mg",
    "magnesium_mg",
    "phosphorus_mg",
    "potassium_mg",
    "zinc_mg",
    "selenium_ug",
    "omega3_g",
)

NutrientVector = dict[str, float]

# FDA adult daily values; omega-3 uses the adequate intake of 1.6 g.
DAILY_VALUES: Mapping[str, float] = {
    "vitamin_a_ug": 900.0,
    "vitamin_c_mg": 90.0,
    "vitamin_d_ug": 20.0,
    "vitamin_e_mg": 15.0,
    "vitamin_k_ug": 120.0,
    "thiamin_mg": 1.2,
    "riboflavin_mg": 1.3,
    "niacin_mg": 16.0,
    "vitamin_b6_mg": 1.7,
    "folate_ug": 400.0,
    "vitamin_b12_ug": 2.4,
    "calcium_mg": 1300.0,
    "iron_mg": 18.0,
    "magnesium_mg": 420.0,
    "phosphorus_mg": 1250.0,
    "potassium_mg": 4700.0,
    "zinc_mg": 11.0,
    "selenium_ug": 55.0,
    "omega3_g": 1.6,
}


def zero_vector() -> NutrientVector:
    """Return a vector with every nutrient key set to zero."""
    return dict.fromkeys(NUTRIENT_KEYS, 0.0)


def make_vector(values: Mapping[str, object] | None = None) -> NutrientVector:
    """Build a full nutrient vector from a partial or untrusted mapping.

    Missing keys become zero, unknown keys are dropped, and anything that is not
    a finite non-negative number is treated as zero.
    """
    vector = zero_vector()
    if not values:
        return vector
    for key in NUTRIENT_KEYS:
        vector[key] = coerce_amount(values.get(key))
    return vector


def coerce_amount(value: object) -> float:
    """Return a finite non-negative amount, or zero."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(value)
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount
