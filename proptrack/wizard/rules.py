"""
Règles de validation du formulaire de création.

Les erreurs sont indexées par chemin ("name", "property_location.city",
"tenants.0.email") pour pouvoir être rattachées à une étape. Les bornes sont
celles des modèles du serveur : un brouillon valide ici est accepté par POST.
"""
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from typing import Any, Dict, List, Optional
from datetime import date
import logging

from proptrack.models import Currency, DocumentCategory, PropertyType

logger = logging.getLogger(__name__)

FieldErrors = Dict[str, List[str]]


class FormModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class LocationForm(FormModel):
    address: str = Field(..., min_length=5, max_length=200)
    city: str = Field(..., min_length=2, max_length=100)
    country: str = Field(..., min_length=2, max_length=100)
    postal_code: str = Field(..., min_length=2, max_length=20)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class TenantForm(FormModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    lease_start_date: Optional[date] = None
    lease_end_date: Optional[date] = None
    monthly_rent: Optional[float] = Field(None, ge=0)

    @field_validator("lease_start_date", "lease_end_date", mode="before")
    @classmethod
    def empty_date_is_none(cls, v: Any) -> Any:
        return v or None

    @field_validator("monthly_rent", mode="before")
    @classmethod
    def empty_rent_is_none(cls, v: Any) -> Any:
        return None if v == "" else v


class MediaForm(FormModel):
    source_reference: str = Field(..., min_length=1)
    display_name: str = Field(..., min_length=1, max_length=255)
    media_type: str = Field(..., min_length=1, max_length=100)


class DocumentForm(MediaForm):
    category: DocumentCategory = DocumentCategory.OTHER


class PropertyForm(FormModel):
    name: str = Field(..., min_length=3, max_length=50)
    notes: Optional[str] = None
    value: Optional[float] = Field(None, ge=0)
    currency: Currency = Currency.USD
    type: PropertyType
    property_location: LocationForm
    tenants: List[TenantForm] = Field(default_factory=list)
    images: List[MediaForm] = Field(default_factory=list)
    documents: List[DocumentForm] = Field(default_factory=list)

    @field_validator("value", mode="before")
    @classmethod
    def value_must_be_number(cls, v: Any) -> Any:
        """Un champ vide vaut "pas de valeur" ; sinon un nombre, pas une chaîne"""
        if v is None or v == "":
            return None
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("La valeur doit être un nombre")
        return v


def _path(loc) -> str:
    return ".".join(str(part) for part in loc)


def validate_draft(draft) -> FieldErrors:
    """
    Valide le brouillon complet.

    Args:
        draft: WizardDraft (ou dict de même forme)

    Returns:
        Chemin du champ -> messages ; vide si le brouillon est valide
    """
    data = draft.model_dump() if isinstance(draft, BaseModel) else draft
    try:
        PropertyForm.model_validate(data)
    except ValidationError as e:
        errors: FieldErrors = {}
        for error in e.errors():
            errors.setdefault(_path(error["loc"]), []).append(error["msg"])
        logger.debug(f"Brouillon invalide: {sorted(errors)}")
        return errors
    return {}
