"""
Correspondance étapes de l'assistant <-> groupes de champs.

Chaque champ appartient à une seule étape ; l'étape de revue n'en possède
aucun. Les erreurs se résolvent de la première étape à la dernière.
"""
from enum import IntEnum
from typing import Dict, List, Optional

from proptrack.wizard.rules import FieldErrors


class WizardStep(IntEnum):
    BASIC_INFO = 0
    LOCATION = 1
    IMAGES = 2
    DOCUMENTS = 3
    TENANTS = 4
    REVIEW = 5


STEP_TITLES: Dict[WizardStep, str] = {
    WizardStep.BASIC_INFO: "Informations",
    WizardStep.LOCATION: "Adresse",
    WizardStep.IMAGES: "Images",
    WizardStep.DOCUMENTS: "Documents",
    WizardStep.TENANTS: "Locataires",
    WizardStep.REVIEW: "Récapitulatif",
}

STEP_COUNT = len(WizardStep)

# Racine du chemin d'un champ -> étape propriétaire
FIELD_GROUP_STEPS: Dict[str, WizardStep] = {
    "name": WizardStep.BASIC_INFO,
    "type": WizardStep.BASIC_INFO,
    "value": WizardStep.BASIC_INFO,
    "currency": WizardStep.BASIC_INFO,
    "notes": WizardStep.BASIC_INFO,
    "property_location": WizardStep.LOCATION,
    "images": WizardStep.IMAGES,
    "documents": WizardStep.DOCUMENTS,
    "tenants": WizardStep.TENANTS,
}


def step_for_field(path: str) -> WizardStep:
    """Étape propriétaire d'un champ ("property_location.city" -> LOCATION)"""
    root = path.split(".", 1)[0]
    try:
        return FIELD_GROUP_STEPS[root]
    except KeyError:
        raise KeyError(f"Champ sans étape: {path}")


def fields_for_step(step: int) -> List[str]:
    """Groupes de champs possédés par une étape"""
    return [field for field, owner in FIELD_GROUP_STEPS.items() if owner == step]


def steps_with_errors(errors: FieldErrors) -> List[int]:
    """Étapes ayant au moins un champ en erreur, triées"""
    return sorted({int(step_for_field(path)) for path, messages in errors.items() if messages})


def first_error_step(errors: FieldErrors) -> Optional[int]:
    steps = steps_with_errors(errors)
    return steps[0] if steps else None


def error_messages_for_step(errors: FieldErrors, step: int) -> List[str]:
    """Messages à afficher sur une étape, dans l'ordre des champs"""
    messages = []
    for path, field_messages in errors.items():
        if step_for_field(path) == step:
            messages.extend(field_messages)
    return messages
