# proptrack/models/media.py
"""
Descripteurs d'images et de documents.
Le transfert du fichier est fait ailleurs : on ne stocke que la référence.
"""
from pydantic import Field
from enum import Enum

from .base import CamelModel


class DocumentCategory(str, Enum):
    PERSONAL = "PERSONAL"
    PROPERTY_REGISTRATION = "PROPERTY_REGISTRATION"
    PROPERTY_UTILITY = "PROPERTY_UTILITY"
    OTHER = "OTHER"


class MediaBase(CamelModel):
    source_reference: str = Field(..., min_length=1)
    display_name: str = Field(..., min_length=1, max_length=255)
    media_type: str = Field(..., min_length=1, max_length=100)


class ImageCreate(MediaBase):
    pass


class Image(MediaBase):
    id: str
    property_id: str


class DocumentCreate(MediaBase):
    category: DocumentCategory = DocumentCategory.OTHER


class Document(DocumentCreate):
    id: str
    property_id: str
