"""Pydantic models for the mapping API payloads."""

from pydantic import BaseModel, Field, field_validator

from meal_nutrients.domain.meals import ParsedItem


class ParsedItemPayload(BaseModel):
    """Food item as produced by the vision step."""

    name: str
    estimated_grams: float = Field(allow_inf_nan=False)
    confidence: float = Field(ge=0.0, le=1.0, allow_inf_nan=False)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be empty")
        return value

    def to_domain(self) -> ParsedItem:
        return ParsedItem(
            name=self.name,
            estimated_grams=self.estimated_grams,
            confidence=self.confidence,
        )


class MapFoodsRequest(BaseModel):
    """Request body for mapping a meal."""

    meal_id: str | None = None
    items: list[ParsedItemPayload] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def items_default_to_empty(cls, value: object) -> object:
        return [] if value is None else value

    def parsed_items(self) -> list[ParsedItem]:
        return [item.to_domain() for item in self.items]
