"""
Brouillon de l'assistant de création.

Les types sont volontairement permissifs : le brouillon doit pouvoir contenir
une saisie invalide jusqu'à la validation finale. Chaque groupe de champs a
ses propres opérations de mise à jour.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from enum import Enum


BASIC_FIELDS = ("name", "notes", "value", "currency", "type")


class FieldGroup(str, Enum):
    BASIC_INFO = "basic_info"
    LOCATION = "property_location"
    IMAGES = "images"
    DOCUMENTS = "documents"
    TENANTS = "tenants"


class LocationDraft(BaseModel):
    address: str = ""
    city: str = ""
    country: str = ""
    postal_code: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class TenantDraft(BaseModel):
    name: str = ""
    email: str = ""
    phone: Optional[str] = None
    lease_start_date: Optional[str] = None
    lease_end_date: Optional[str] = None
    monthly_rent: Optional[Any] = None


class ImageDraft(BaseModel):
    source_reference: str = ""
    display_name: str = ""
    media_type: str = ""


class DocumentDraft(ImageDraft):
    category: str = "OTHER"


def _merge(target: BaseModel, values: Dict[str, Any]) -> None:
    unknown = set(values) - set(type(target).model_fields)
    if unknown:
        raise ValueError(f"Champs inconnus pour {type(target).__name__}: {sorted(unknown)}")
    for key, value in values.items():
        setattr(target, key, value)


class WizardDraft(BaseModel):
    """Forme complète de l'agrégat, en cours de saisie"""

    name: str = ""
    notes: Optional[str] = ""
    value: Optional[Any] = None
    currency: str = "USD"
    type: str = "HOUSE"
    property_location: LocationDraft = Field(default_factory=LocationDraft)
    tenants: List[TenantDraft] = Field(default_factory=list)
    images: List[ImageDraft] = Field(default_factory=list)
    documents: List[DocumentDraft] = Field(default_factory=list)

    # ==================== INFORMATIONS ====================

    def update_basic_info(self, **values) -> None:
        unknown = set(values) - set(BASIC_FIELDS)
        if unknown:
            raise ValueError(f"Champs inconnus pour les informations: {sorted(unknown)}")
        for key, value in values.items():
            setattr(self, key, value)

    # ==================== ADRESSE ====================

    def update_location(self, **values) -> None:
        _merge(self.property_location, values)

    # ==================== LOCATAIRES ====================

    def add_tenant(self, **values) -> int:
        tenant = TenantDraft()
        _merge(tenant, values)
        self.tenants.append(tenant)
        return len(self.tenants) - 1

    def update_tenant(self, index: int, **values) -> None:
        _merge(self.tenants[index], values)

    def remove_tenant(self, index: int) -> None:
        del self.tenants[index]

    # ==================== IMAGES / DOCUMENTS ====================

    def add_image(self, **values) -> int:
        image = ImageDraft()
        _merge(image, values)
        self.images.append(image)
        return len(self.images) - 1

    def update_image(self, index: int, **values) -> None:
        _merge(self.images[index], values)

    def remove_image(self, index: int) -> None:
        del self.images[index]

    def add_document(self, **values) -> int:
        document = DocumentDraft()
        _merge(document, values)
        self.documents.append(document)
        return len(self.documents) - 1

    def update_document(self, index: int, **values) -> None:
        _merge(self.documents[index], values)

    def remove_document(self, index: int) -> None:
        del self.documents[index]

    @classmethod
    def from_aggregate(cls, aggregate) -> "WizardDraft":
        """Brouillon pré-rempli à partir d'un PropertyAggregate (mode édition)"""
        location = aggregate.property_location
        return cls(
            name=aggregate.name,
            notes=aggregate.notes,
            value=aggregate.value,
            currency=aggregate.currency.value,
            type=aggregate.type.value,
            property_location=LocationDraft(
                **location.model_dump(include=set(LocationDraft.model_fields))
            ) if location else LocationDraft(),
            tenants=[
                TenantDraft(**tenant.model_dump(mode="json", include=set(TenantDraft.model_fields)))
                for tenant in aggregate.tenants
            ],
            images=[
                ImageDraft(**image.model_dump(include=set(ImageDraft.model_fields)))
                for image in aggregate.images
            ],
            documents=[
                DocumentDraft(**document.model_dump(mode="json", include=set(DocumentDraft.model_fields)))
                for document in aggregate.documents
            ],
        )
