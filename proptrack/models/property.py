# proptrack/models/property.py

from pydantic import Field, model_validator
from typing import Any, Generic, List, Optional, TypeVar
from datetime import datetime
from enum import Enum

from .base import CamelModel
from .location import PropertyLocation, PropertyLocationCreate
from .tenant import Tenant, TenantCreate
from .media import Document, DocumentCreate, Image, ImageCreate

T = TypeVar("T")

# Seuls champs modifiables par une mise à jour
SCALAR_FIELDS = {"name", "notes", "value", "currency", "type"}
NULLABLE_FIELDS = {"notes", "value"}


class PropertyType(str, Enum):
    HOUSE = "HOUSE"
    APARTMENT = "APARTMENT"
    VILLA = "VILLA"
    COMMERCIAL = "COMMERCIAL"


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"


def _wrap_create(data: Any) -> Any:
    """Accepte {"create": ...} ou la valeur nue"""
    if isinstance(data, dict) and "create" in data:
        return data
    if hasattr(data, "create"):
        return data
    return {"create": data}


class CreateOne(CamelModel, Generic[T]):
    """Directive d'écriture imbriquée : un enfant créé avec le parent"""
    create: T

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_value(cls, data: Any) -> Any:
        return _wrap_create(data)


class CreateMany(CamelModel, Generic[T]):
    """Directive d'écriture imbriquée : plusieurs enfants créés avec le parent"""
    create: List[T] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_value(cls, data: Any) -> Any:
        return _wrap_create(data)


class PropertyBase(CamelModel):
    name: str = Field(..., min_length=3, max_length=50)
    notes: Optional[str] = None
    value: Optional[float] = Field(None, ge=0)
    currency: Currency = Currency.USD
    type: PropertyType


class PropertyCreate(PropertyBase):
    """
    Corps d'un POST /properties.
    Les clés inconnues (id, ownerId...) sont ignorées : le propriétaire
    vient toujours de la session.
    """
    property_location: Optional[CreateOne[PropertyLocationCreate]] = None
    tenants: Optional[CreateMany[TenantCreate]] = None
    images: Optional[CreateMany[ImageCreate]] = None
    documents: Optional[CreateMany[DocumentCreate]] = None


class PropertyUpdate(CamelModel):
    """Tous les champs sont optionnels ; les collections imbriquées ne sont pas modifiables"""
    name: Optional[str] = Field(None, min_length=3, max_length=50)
    notes: Optional[str] = None
    value: Optional[float] = Field(None, ge=0)
    currency: Optional[Currency] = None
    type: Optional[PropertyType] = None


class Property(PropertyBase):
    """Modèle complet avec métadonnées"""
    id: str
    owner_id: str
    created_at: datetime
    updated_at: datetime


class PropertyAggregate(Property):
    """Propriété avec adresse, locataires, images et documents"""
    property_location: Optional[PropertyLocation] = None
    tenants: List[Tenant] = Field(default_factory=list)
    images: List[Image] = Field(default_factory=list)
    documents: List[Document] = Field(default_factory=list)
