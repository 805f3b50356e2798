"""
Contrôleur de l'assistant de création / édition d'une propriété.

Navigation libre entre les étapes ; la validation n'a lieu qu'à la
soumission. Le brouillon n'est vidé qu'après une écriture confirmée.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
import logging

from proptrack.client import PropertyApiError
from proptrack.models import Property
from proptrack.wizard.builder import build_create_payload, build_update_payload
from proptrack.wizard.cache import PropertyListCache
from proptrack.wizard.draft import FieldGroup, WizardDraft
from proptrack.wizard.rules import FieldErrors, validate_draft
from proptrack.wizard.steps import (
    STEP_COUNT,
    WizardStep,
    error_messages_for_step,
    step_for_field,
    steps_with_errors,
)

logger = logging.getLogger(__name__)

SUBMISSION_PENDING_MESSAGE = "Une soumission est déjà en cours"


class SubmitResult(BaseModel):
    """Issue d'une soumission"""
    error_steps: List[int] = Field(default_factory=list)
    saved_property: Optional[Property] = None
    error_message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.saved_property is not None


class WizardController:
    """
    Porte le brouillon, l'étape courante et les erreurs par étape.

    Args:
        api: Client exposant create(payload) et update(id, payload)
        cache: Cache de la liste à invalider après une écriture
        property_id: ID de la propriété éditée (None = création)
        draft: Brouillon initial
    """

    def __init__(
        self,
        api,
        cache: Optional[PropertyListCache] = None,
        property_id: Optional[str] = None,
        draft: Optional[WizardDraft] = None
    ):
        self.api = api
        self.cache = cache
        self.property_id = property_id
        self.draft = draft or WizardDraft()
        self.current_step = WizardStep.BASIC_INFO
        self.errors: FieldErrors = {}
        self.errors_by_step: List[int] = []
        self.error_message: Optional[str] = None
        self.is_submitting = False

    @classmethod
    def for_edit(cls, aggregate, api, cache: Optional[PropertyListCache] = None) -> "WizardController":
        return cls(
            api,
            cache=cache,
            property_id=aggregate.id,
            draft=WizardDraft.from_aggregate(aggregate)
        )

    @property
    def is_edit(self) -> bool:
        return self.property_id is not None

    # ==================== NAVIGATION ====================

    def go_to(self, step: int) -> None:
        """Aller à n'importe quelle étape, sans validation"""
        if not 0 <= step < STEP_COUNT:
            raise ValueError(f"Étape hors limites: {step}")
        self.current_step = WizardStep(step)

    def next_step(self) -> None:
        self.go_to(min(self.current_step + 1, STEP_COUNT - 1))

    def previous_step(self) -> None:
        self.go_to(max(self.current_step - 1, 0))

    # ==================== SAISIE ====================

    def update_field(self, group: FieldGroup, index: Optional[int] = None, **values) -> None:
        """
        Fusionne des valeurs dans un groupe de champs du brouillon.
        Pas de validation ici.
        """
        group = FieldGroup(group)
        if group == FieldGroup.BASIC_INFO:
            self.draft.update_basic_info(**values)
        elif group == FieldGroup.LOCATION:
            self.draft.update_location(**values)
        elif index is None:
            raise ValueError(f"Index requis pour le groupe {group.value}")
        elif group == FieldGroup.TENANTS:
            self.draft.update_tenant(index, **values)
        elif group == FieldGroup.IMAGES:
            self.draft.update_image(index, **values)
        elif group == FieldGroup.DOCUMENTS:
            self.draft.update_document(index, **values)

    def add_tenant(self, **values) -> int:
        return self.draft.add_tenant(**values)

    def remove_tenant(self, index: int) -> None:
        self.draft.remove_tenant(index)

    def add_image(self, **values) -> int:
        return self.draft.add_image(**values)

    def remove_image(self, index: int) -> None:
        self.draft.remove_image(index)

    def add_document(self, **values) -> int:
        return self.draft.add_document(**values)

    def remove_document(self, index: int) -> None:
        self.draft.remove_document(index)

    def step_errors(self, step: int) -> List[str]:
        return error_messages_for_step(self.errors, step)

    # ==================== SOUMISSION ====================

    def _validate(self) -> FieldErrors:
        errors = validate_draft(self.draft)
        if self.is_edit:
            # Seuls les champs scalaires partent en édition
            errors = {
                path: messages for path, messages in errors.items()
                if step_for_field(path) == WizardStep.BASIC_INFO
            }
        return errors

    def submit(self) -> SubmitResult:
        """
        Valide le brouillon puis l'envoie à l'API.

        L'appel réseau est synchrone. is_submitting reste levé pendant
        l'appel : un rappel déclenché pendant ce temps (boucle d'événements
        d'une interface, callback du transport) qui soumet à nouveau est
        refusé. Le délai max est celui du client (API_TIMEOUT).

        Returns:
            SubmitResult : étapes en erreur (aucun appel réseau), propriété
            enregistrée, ou message d'erreur réseau (brouillon conservé)
        """
        if self.is_submitting:
            return SubmitResult(error_message=SUBMISSION_PENDING_MESSAGE)

        self.errors = self._validate()
        self.errors_by_step = steps_with_errors(self.errors)
        if self.errors_by_step:
            logger.info(f"Soumission refusée, étapes en erreur: {self.errors_by_step}")
            return SubmitResult(error_steps=list(self.errors_by_step))

        self.is_submitting = True
        self.error_message = None
        try:
            if self.is_edit:
                saved = self.api.update(self.property_id, build_update_payload(self.draft))
            else:
                saved = self.api.create(build_create_payload(self.draft))
        except PropertyApiError as e:
            self.error_message = e.message
            logger.error(f"✗ Échec de l'enregistrement: {e.message}")
            return SubmitResult(error_message=e.message)
        finally:
            self.is_submitting = False

        logger.info(f"✓ Propriété enregistrée: {saved.id}")
        self.reset()
        if self.cache is not None:
            self.cache.invalidate()
        return SubmitResult(saved_property=saved)

    def reset(self) -> None:
        """Abandonne le brouillon (succès ou sortie de l'écran)"""
        self.draft = WizardDraft()
        self.current_step = WizardStep.BASIC_INFO
        self.errors = {}
        self.errors_by_step = []
        self.error_message = None
