# proptrack/models/tenant.py

from pydantic import EmailStr, Field, field_validator
from typing import Any, Optional
from datetime import date, datetime
from enum import Enum

from .base import CamelModel


class TenantStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class TenantBase(CamelModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field("", max_length=50)
    lease_start_date: Optional[date] = None  # date ISO, ex: 2025-01-31
    lease_end_date: Optional[date] = None
    monthly_rent: Optional[float] = Field(None, ge=0)
    status: TenantStatus = TenantStatus.ACTIVE

    @field_validator("lease_start_date", "lease_end_date", mode="before")
    @classmethod
    def empty_date_is_none(cls, v: Any) -> Any:
        return v or None


class TenantCreate(TenantBase):
    """Locataire créé avec sa propriété"""


class Tenant(TenantBase):
    """Locataire stocké, rattaché à une seule propriété"""
    id: str
    property_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
