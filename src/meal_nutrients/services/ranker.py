"""Rank the foods contributing most to a meal's daily values."""

from meal_nutrients.domain.catalog import Catalog
from meal_nutrients.domain.meals import Contributor, MappedItem
from meal_nutrients.services.aggregator import aggregate

TOP_CONTRIBUTORS = 3


def contribution_score(item: MappedItem, catalog: Catalog) -> float:
    """Sum of the item's own percent-of-daily-value entries."""
    single = aggregate([(item.canonical_id, item.grams)], catalog)
    return sum(single.percent_dv.values())


def rank_contributors(
    items: list[MappedItem], catalog: Catalog, limit: int = TOP_CONTRIBUTORS
) -> list[Contributor]:
    """Return the top contributors, highest score first.

    Equal scores keep their original item order.
    """
    scored = [
        Contributor(
            canonical_id=item.canonical_id,
            name=item.canonical_name,
            score=contribution_score(item, catalog),
        )
        for item in items
    ]
    positive = [contributor for contributor in scored if contributor.score > 0]
    return sorted(positive, key=lambda contributor: contributor.score, reverse=True)[
        :limit
    ]
