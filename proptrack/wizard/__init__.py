"""
Assistant de création / édition d'une propriété (côté client)

Étapes : informations, adresse, images, documents, locataires, récapitulatif.
"""
from .draft import FieldGroup, WizardDraft
from .rules import FieldErrors, PropertyForm, validate_draft
from .steps import (
    STEP_COUNT,
    STEP_TITLES,
    WizardStep,
    error_messages_for_step,
    fields_for_step,
    first_error_step,
    step_for_field,
    steps_with_errors,
)
from .builder import build_create_payload, build_update_payload
from .cache import PropertyListCache
from .controller import SubmitResult, WizardController

__all__ = [
    "FieldGroup",
    "WizardDraft",
    "FieldErrors",
    "PropertyForm",
    "validate_draft",
    "STEP_COUNT",
    "STEP_TITLES",
    "WizardStep",
    "error_messages_for_step",
    "fields_for_step",
    "first_error_step",
    "step_for_field",
    "steps_with_errors",
    "build_create_payload",
    "build_update_payload",
    "PropertyListCache",
    "SubmitResult",
    "WizardController",
]
