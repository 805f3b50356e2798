"""
Contrôle d'appartenance des propriétés.

Une propriété absente et une propriété d'un autre utilisateur donnent la
même erreur : impossible de savoir si un id existe chez quelqu'un d'autre.
"""
from typing import Any, Dict
from uuid import UUID
from supabase import Client
import logging

from proptrack.core.exceptions import PersistenceError, PropertyNotFoundError

logger = logging.getLogger(__name__)


def _is_uuid(value: str) -> bool:
    try:
        UUID(str(value))
        return True
    except ValueError:
        return False


class OwnershipGate:
    """Point unique d'autorisation pour get / update / delete"""

    def __init__(self, db: Client):
        self.db = db
        self.table = "properties"

    def authorize(self, requester_id: str, property_id: str) -> Dict[str, Any]:
        """
        Retourne la ligne de la propriété si elle appartient au demandeur.

        Args:
            requester_id: ID de l'utilisateur de la session
            property_id: ID de la propriété ciblée

        Returns:
            Ligne brute de la table properties

        Raises:
            PropertyNotFoundError: id inconnu, mal formé ou appartenant à un autre utilisateur
            PersistenceError: erreur Supabase
        """
        if not requester_id or not property_id or not _is_uuid(property_id):
            raise PropertyNotFoundError()

        try:
            # id ET propriétaire dans la même requête
            result = self.db.table(self.table)\
                .select("*")\
                .eq("id", property_id)\
                .eq("owner_id", requester_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"✗ Erreur vérification propriété {property_id}: {e}")
            raise PersistenceError(str(e)) from e

        if not result.data:
            logger.info(f"Propriété {property_id} refusée pour {requester_id}")
            raise PropertyNotFoundError()

        return result.data[0]


def get_ownership_gate(db: Client) -> OwnershipGate:
    return OwnershipGate(db)
