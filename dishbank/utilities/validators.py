"""
Input validation schemas using Pydantic for better data integrity.
"""
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

from dishbank.utilities.constants import DEFAULT_CATEGORY, INGREDIENT_SEPARATOR


def split_ingredients(text: str) -> List[str]:
    """Split a comma-separated ingredient field, trimming and dropping blanks."""
    return [i.strip() for i in (text or "").split(INGREDIENT_SEPARATOR) if i.strip()]


class NewDishInput(BaseModel):
    """Schema for a dish submitted by the user."""
    title: str
    ingredients: List[str]
    category: Literal["main", "side", "snacks"] = DEFAULT_CATEGORY

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        """Remove surrounding whitespace; an empty title is rejected."""
        if not v or not v.strip():
            raise ValueError('Please enter a dish title.')
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Drop blank entries; at least one ingredient must remain."""
        cleaned = [i.strip() for i in v if i and i.strip()]
        if not cleaned:
            raise ValueError('Please enter at least one ingredient.')
        return cleaned

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v):
        """Accept any casing; blank means the default category."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_CATEGORY
        return v.strip().lower() if isinstance(v, str) else v


class MenuAddInput(BaseModel):
    """Schema for adding a catalog dish to the weekly menu."""
    dish_id: str = Field(..., min_length=1)


class QuantityChangeInput(BaseModel):
    """Schema for a +1 / -1 quantity step."""
    delta: Literal[-1, 1]
