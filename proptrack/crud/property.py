"""
Opérations CRUD pour les propriétés (agrégat complet).

Chaque lecture/écriture d'une propriété existante passe d'abord par
OwnershipGate. La création passe par une fonction Postgres qui écrit
le parent et ses enfants dans une seule transaction.
"""
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
from collections import defaultdict
from supabase import Client
import logging

from proptrack.core.exceptions import PersistenceError, PropertyNotFoundError
from proptrack.crud.ownership import OwnershipGate
from proptrack.models import (
    NULLABLE_FIELDS,
    SCALAR_FIELDS,
    Property,
    PropertyAggregate,
    PropertyCreate,
    PropertyUpdate,
)

logger = logging.getLogger(__name__)

LOCATIONS_TABLE = "property_locations"
TENANTS_TABLE = "tenants"
IMAGES_TABLE = "property_images"
DOCUMENTS_TABLE = "property_documents"

# Fonction transactionnelle définie dans sql/schema.sql
CREATE_FUNCTION = "create_property_aggregate"


class PropertyAggregateService:
    def __init__(self, db: Client):
        self.db = db
        self.table = "properties"
        self.gate = OwnershipGate(db)

    # ========================================================================
    # LECTURE
    # ========================================================================

    def list(self, owner_id: str) -> List[PropertyAggregate]:
        """Toutes les propriétés de l'utilisateur, avec leurs enfants"""
        if not owner_id:
            raise ValueError("owner_id est requis")

        try:
            result = self.db.table(self.table)\
                .select("*")\
                .eq("owner_id", owner_id)\
                .order("created_at", desc=True)\
                .execute()
            return self._attach_children(result.data or [])
        except Exception as e:
            logger.error(f"✗ Erreur récupération propriétés de {owner_id}: {e}")
            raise PersistenceError(str(e)) from e

    def get(self, property_id: str, owner_id: str) -> PropertyAggregate:
        """Une propriété avec ses enfants, ou PropertyNotFoundError"""
        row = self.gate.authorize(owner_id, property_id)
        try:
            return self._attach_children([row])[0]
        except Exception as e:
            logger.error(f"✗ Erreur récupération propriété {property_id}: {e}")
            raise PersistenceError(str(e)) from e

    # ========================================================================
    # ÉCRITURE
    # ========================================================================

    def create(self, owner_id: str, payload: PropertyCreate) -> Property:
        """
        Créer une propriété et ses enfants (tout ou rien).

        Le parent et les enfants sont écrits par la fonction Postgres
        create_property_aggregate, dans une seule transaction : une
        insertion refusée annule tout, et aucune lecture ne voit un agrégat
        partiel.

        Args:
            owner_id: ID de l'utilisateur de la session (jamais lu dans payload)
            payload: Données validées du POST

        Returns:
            Propriété créée (sans les enfants)

        Raises:
            PersistenceError: si la transaction échoue
        """
        if not owner_id:
            raise ValueError("owner_id est requis")

        params = {
            "p_owner_id": owner_id,
            "p_property": payload.model_dump(mode="json", include=SCALAR_FIELDS),
            "p_location": None,
            "p_tenants": self._child_rows(payload.tenants),
            "p_images": self._child_rows(payload.images),
            "p_documents": self._child_rows(payload.documents),
        }
        if payload.property_location is not None:
            params["p_location"] = payload.property_location.create.model_dump(mode="json")

        try:
            result = self.db.rpc(CREATE_FUNCTION, params).execute()
        except Exception as e:
            logger.error(f"✗ Erreur création propriété (transaction annulée): {e}")
            raise PersistenceError(str(e)) from e

        rows = result.data if isinstance(result.data, list) else [result.data]
        if not rows or not rows[0]:
            logger.error("✗ Aucune donnée retournée après insertion")
            raise PersistenceError("Aucune donnée retournée après insertion")

        row = rows[0]
        logger.info(f"✓ Propriété créée: {row['id']}")
        return Property.model_validate(row)

    def update(self, property_id: str, owner_id: str, payload: PropertyUpdate) -> Property:
        """Mettre à jour les champs scalaires d'une propriété"""
        row = self.gate.authorize(owner_id, property_id)

        data = payload.model_dump(mode="json", exclude_unset=True, include=SCALAR_FIELDS)
        data = {k: v for k, v in data.items() if v is not None or k in NULLABLE_FIELDS}
        if not data:
            raise ValueError("Aucune donnée à mettre à jour")
        data["updated_at"] = datetime.now(timezone.utc).isoformat()

        try:
            # Cible dérivée de la ligne autorisée, toujours filtrée par propriétaire
            result = self.db.table(self.table)\
                .update(data)\
                .eq("id", row["id"])\
                .eq("owner_id", owner_id)\
                .execute()
        except Exception as e:
            logger.error(f"✗ Erreur mise à jour propriété {property_id}: {e}")
            raise PersistenceError(str(e)) from e

        if not result.data:
            # Supprimée entre la vérification et l'écriture
            raise PropertyNotFoundError()

        logger.info(f"✓ Propriété mise à jour: {property_id}")
        return Property.model_validate(result.data[0])

    def delete(self, property_id: str, owner_id: str) -> None:
        """Supprimer une propriété ; les enfants partent en cascade"""
        row = self.gate.authorize(owner_id, property_id)

        try:
            self.db.table(self.table)\
                .delete()\
                .eq("id", row["id"])\
                .eq("owner_id", owner_id)\
                .execute()
        except Exception as e:
            logger.error(f"✗ Erreur suppression propriété {property_id}: {e}")
            raise PersistenceError(str(e)) from e

        logger.info(f"✓ Propriété supprimée: {property_id}")

    # ========================================================================
    # MÉTHODES PRIVÉES
    # ========================================================================

    @staticmethod
    def _child_rows(nested) -> List[Dict[str, Any]]:
        """Lignes enfants d'une directive create ; property_id est posé par la fonction"""
        if nested is None:
            return []
        return [child.model_dump(mode="json") for child in nested.create]

    def _fetch_children(self, table: str, property_ids: List[str]) -> Dict[str, List[Dict[str, Any]]]:
        result = self.db.table(table)\
            .select("*")\
            .in_("property_id", property_ids)\
            .execute()

        grouped: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        for child in result.data or []:
            grouped[child["property_id"]].append(child)
        return grouped

    def _attach_children(self, rows: List[Dict[str, Any]]) -> List[PropertyAggregate]:
        if not rows:
            return []

        ids = [row["id"] for row in rows]
        locations = self._fetch_children(LOCATIONS_TABLE, ids)
        tenants = self._fetch_children(TENANTS_TABLE, ids)
        images = self._fetch_children(IMAGES_TABLE, ids)
        documents = self._fetch_children(DOCUMENTS_TABLE, ids)

        aggregates = []
        for row in rows:
            location: Optional[Dict[str, Any]] = (locations.get(row["id"]) or [None])[0]
            aggregates.append(PropertyAggregate.model_validate({
                **row,
                "property_location": location,
                "tenants": tenants.get(row["id"], []),
                "images": images.get(row["id"], []),
                "documents": documents.get(row["id"], []),
            }))
        return aggregates


def get_property_service(db: Client) -> PropertyAggregateService:
    return PropertyAggregateService(db)
