"""
Construction du corps envoyé à l'API à partir du brouillon.

Le corps ne contient jamais d'id de propriété ni d'id de propriétaire :
le serveur déduit le propriétaire de la session.
"""
from typing import Any, Dict, Optional

from proptrack.wizard.draft import WizardDraft


def _clean(value: Optional[str]) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


def _scalar_fields(draft: WizardDraft) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "name": _clean(draft.name),
        "type": draft.type,
        "currency": draft.currency,
    }
    if draft.notes is not None:
        payload["notes"] = _clean(draft.notes)
    if draft.value is not None and draft.value != "":
        payload["value"] = draft.value
    return payload


def _cleared(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _location(draft: WizardDraft) -> Dict[str, Any]:
    location = draft.property_location
    data = {
        "address": _clean(location.address),
        "city": _clean(location.city),
        "country": _clean(location.country),
        "postalCode": _clean(location.postal_code),
    }
    if location.latitude is not None:
        data["latitude"] = location.latitude
    if location.longitude is not None:
        data["longitude"] = location.longitude
    return data


def _tenant(tenant) -> Dict[str, Any]:
    data = {
        "name": _clean(tenant.name),
        "email": _clean(tenant.email),
        "phone": _clean(tenant.phone) or "",
    }
    if tenant.lease_start_date:
        data["leaseStartDate"] = tenant.lease_start_date
    if tenant.lease_end_date:
        data["leaseEndDate"] = tenant.lease_end_date
    if tenant.monthly_rent is not None and tenant.monthly_rent != "":
        data["monthlyRent"] = tenant.monthly_rent
    return data


def _media(media) -> Dict[str, Any]:
    return {
        "sourceReference": media.source_reference,
        "displayName": _clean(media.display_name),
        "mediaType": media.media_type,
    }


def build_create_payload(draft: WizardDraft) -> Dict[str, Any]:
    """
    Corps d'un POST /properties avec écritures imbriquées.

    Args:
        draft: Brouillon déjà validé

    Returns:
        Dict JSON (camelCase) : champs scalaires, propertyLocation.create,
        tenants.create, images.create, documents.create
    """
    payload = _scalar_fields(draft)
    payload["propertyLocation"] = {"create": _location(draft)}

    if draft.tenants:
        payload["tenants"] = {"create": [_tenant(tenant) for tenant in draft.tenants]}
    if draft.images:
        payload["images"] = {"create": [_media(image) for image in draft.images]}
    if draft.documents:
        payload["documents"] = {
            "create": [
                {**_media(document), "category": document.category}
                for document in draft.documents
            ]
        }
    return payload


def build_update_payload(draft: WizardDraft) -> Dict[str, Any]:
    """
    Corps d'un PUT /properties/{id} : champs scalaires uniquement.
    Une note ou une valeur vidée part à null pour effacer l'ancienne.
    """
    payload = _scalar_fields(draft)
    for field in ("notes", "value"):
        if _cleared(getattr(draft, field)):
            payload[field] = None
    return payload
