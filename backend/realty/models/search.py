from pydantic import BaseModel, Field, model_validator
from typing import Optional


class PropertyFilters(BaseModel):
    """Optional predicates for property search.

    Every predicate that is set narrows the result (logical AND); predicates
    left as ``None`` impose no constraint. ``location`` is matched as a
    case-insensitive substring of the property's location, city or state.
    Price bounds are inclusive.
    """
    location: Optional[str] = None
    property_type: Optional[str] = None
    listing_type: Optional[str] = None
    status: Optional[str] = None
    owner_id: Optional[int] = None
    min_price: Optional[int] = Field(None, ge=0)
    max_price: Optional[int] = Field(None, ge=0)

    @model_validator(mode='after')
    def validate_price_range(self):
        if (self.min_price is not None and self.max_price is not None and
                self.min_price > self.max_price):
            raise ValueError('min_price must not be greater than max_price')
        return self

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)
