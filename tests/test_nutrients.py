"""Tests for nutrient vector helpers."""

import math

from meal_nutrients.domain.nutrients import (
    DAILY_VALUES,
    NUTRIENT_KEYS,
    make_vector,
    zero_vector,
)


def test_nutrient_schema_has_nineteen_keys() -> None:
    assert len(NUTRIENT_KEYS) == 19
    assert set(DAILY_VALUES) == set(NUTRIENT_KEYS)
    assert all(value > 0 for value in DAILY_VALUES.values())


def test_zero_vector_contains_every_key() -> None:
    vector = zero_vector()

    assert list(vector) == list(NUTRIENT_KEYS)
    assert all(value == 0.0 for value in vector.values())


def test_make_vector_fills_missing_and_drops_unknown_keys() -> None:
    vector = make_vector({"vitamin_c_mg": 4.6, "calories": 52})

    assert set(vector) == set(NUTRIENT_KEYS)
    assert vector["vitamin_c_mg"] == 4.6
    assert vector["iron_mg"] == 0.0
    assert "calories" not in vector


def test_make_vector_rejects_invalid_amounts() -> None:
    vector = make_vector(
        {
            "vitamin_a_ug": -3,
            "vitamin_d_ug": math.inf,
            "vitamin_e_mg": math.nan,
            "iron_mg": "1.5",
            "zinc_mg": "n/a",
            "calcium_mg": True,
        }
    )

    assert vector["vitamin_a_ug"] == 0.0
    assert vector["vitamin_d_ug"] == 0.0
    assert vector["vitamin_e_mg"] == 0.0
    assert vector["iron_mg"] == 1.5
    assert vector["zinc_mg"] == 0.0
    assert vector["calcium_mg"] == 0.0
