# proptrack/models/location.py

from pydantic import Field
from typing import Optional

from .base import CamelModel


class PropertyLocationBase(CamelModel):
    address: str = Field(..., min_length=5, max_length=200)
    city: str = Field(..., min_length=2, max_length=100)
    country: str = Field(..., min_length=2, max_length=100)
    postal_code: str = Field(..., min_length=2, max_length=20)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class PropertyLocationCreate(PropertyLocationBase):
    """Adresse créée en même temps que la propriété"""


class PropertyLocation(PropertyLocationBase):
    """Adresse stockée (0..1 par propriété)"""
    id: str
    property_id: str
