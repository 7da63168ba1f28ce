"""
Input validation schemas using Pydantic for product form submissions.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class ProductInput(BaseModel):
    """Schema for a product create/edit submission (field names as persisted)."""
    model_config = ConfigDict(extra='forbid')

    name: str = Field(..., max_length=200)
    quantity: int = Field(..., ge=0)
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    expirationDate: Optional[str] = None
    imageUri: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    lowStockThreshold: Optional[int] = Field(None, ge=0)

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        """Product name is required and stored without surrounding whitespace."""
        if isinstance(v, str):
            v = v.strip()
        if not v:
            raise ValueError('Preencha ao menos o nome e a quantidade do produto.')
        return v

    @field_validator('price', mode='before')
    @classmethod
    def parse_price(cls, v):
        """Accept '12,50' as typed in the form; blank means no price."""
        if isinstance(v, str):
            v = v.strip().replace(',', '.')
            return v or None
        return v

    @field_validator('expirationDate', 'imageUri', 'category', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator('lowStockThreshold', mode='before')
    @classmethod
    def blank_threshold(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

