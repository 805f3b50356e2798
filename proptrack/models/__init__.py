# proptrack/models/__init__.py
"""
Modèles Pydantic pour l'API PropTrack

- Property : agrégat racine (propriété + enfants)
- PropertyLocation, Tenant, Image, Document : enfants de l'agrégat
- ApiResponse : enveloppe {status, data, message}
"""

# ====================================
# PROPERTY MODELS
# ====================================
from .property import (
    SCALAR_FIELDS,
    NULLABLE_FIELDS,
    PropertyType,
    Currency,
    CreateOne,
    CreateMany,
    PropertyBase,
    PropertyCreate,
    PropertyUpdate,
    Property,
    PropertyAggregate,
)

# ====================================
# CHILD MODELS
# ====================================
from .location import PropertyLocationCreate, PropertyLocation
from .tenant import TenantStatus, TenantCreate, Tenant
from .media import DocumentCategory, ImageCreate, Image, DocumentCreate, Document

# ====================================
# DIVERS
# ====================================
from .responses import ApiResponse, error_body
from .user import CurrentUser

__all__ = [
    # Property
    "SCALAR_FIELDS",
    "NULLABLE_FIELDS",
    "PropertyType",
    "Currency",
    "CreateOne",
    "CreateMany",
    "PropertyBase",
    "PropertyCreate",
    "PropertyUpdate",
    "Property",
    "PropertyAggregate",

    # Enfants
    "PropertyLocationCreate",
    "PropertyLocation",
    "TenantStatus",
    "TenantCreate",
    "Tenant",
    "DocumentCategory",
    "ImageCreate",
    "Image",
    "DocumentCreate",
    "Document",

    # Divers
    "ApiResponse",
    "error_body",
    "CurrentUser",
]
