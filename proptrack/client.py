"""
Client HTTP de l'API PropTrack, utilisé par l'assistant de création.
Toutes les réponses arrivent dans l'enveloppe {status, data, message}.
"""
from pydantic import ValidationError
from typing import Any, Dict, List, Optional
import logging
import requests

from proptrack.core.exceptions import OPERATION_FAILED_MESSAGE
from proptrack.models import Property, PropertyAggregate

logger = logging.getLogger(__name__)


class PropertyApiError(Exception):
    """Réponse d'erreur de l'API ou échec réseau"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PropertyApiClient:
    """
    Accès aux endpoints /properties pour un utilisateur connecté.

    Args:
        base_url: URL de l'API (ex: http://localhost:8000/api/v1)
        token: Jeton de session Supabase
        session: Session HTTP (requests.Session par défaut)
        timeout: Délai max d'une requête en secondes
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        session=None,
        timeout: Optional[float] = None
    ):
        if base_url is None or timeout is None:
            from proptrack.core.config import settings
            base_url = base_url or settings.API_BASE_URL
            timeout = timeout or settings.API_TIMEOUT

        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"✗ {method} {url} a échoué: {e}")
            raise PropertyApiError(OPERATION_FAILED_MESSAGE) from e

        if response.status_code == 204 or not response.content:
            if 200 <= response.status_code < 300:
                return None
            raise PropertyApiError(OPERATION_FAILED_MESSAGE, response.status_code)

        try:
            body = response.json()
        except ValueError:
            logger.error(f"✗ Réponse non JSON pour {method} {url} ({response.status_code})")
            raise PropertyApiError(OPERATION_FAILED_MESSAGE, response.status_code)

        if not isinstance(body, dict):
            logger.error(f"✗ Réponse hors enveloppe pour {method} {url} ({response.status_code})")
            raise PropertyApiError(OPERATION_FAILED_MESSAGE, response.status_code)

        if body.get("status") == "error" or response.status_code >= 400:
            message = body.get("message") or OPERATION_FAILED_MESSAGE
            logger.warning(f"{method} {url} -> {response.status_code}: {message}")
            raise PropertyApiError(message, response.status_code)

        return body.get("data")

    # ========================================================================
    # ENDPOINTS
    # ========================================================================

    @staticmethod
    def _parse(model, data: Any, what: str):
        """Données de l'enveloppe -> modèle ; une forme inattendue est une erreur d'API"""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"✗ Réponse invalide pour {what}: {e.error_count()} erreur(s)")
            raise PropertyApiError(OPERATION_FAILED_MESSAGE) from e

    def list(self) -> List[PropertyAggregate]:
        data = self._request("GET", "/properties")
        if data is not None and not isinstance(data, list):
            logger.error("✗ Réponse invalide pour la liste des propriétés")
            raise PropertyApiError(OPERATION_FAILED_MESSAGE)
        return [self._parse(PropertyAggregate, item, "la liste") for item in data or []]

    def get(self, property_id: str) -> PropertyAggregate:
        data = self._request("GET", f"/properties/{property_id}")
        return self._parse(PropertyAggregate, data, property_id)

    def create(self, payload: Dict[str, Any]) -> Property:
        return self._parse(Property, self._request("POST", "/properties", payload), "la création")

    def update(self, property_id: str, payload: Dict[str, Any]) -> Property:
        data = self._request("PUT", f"/properties/{property_id}", payload)
        return self._parse(Property, data, property_id)

    def delete(self, property_id: str) -> None:
        self._request("DELETE", f"/properties/{property_id}")
