"""
Client Supabase pour PropTrack.
Gère la connexion à la base de données et à Supabase Auth.
"""
from supabase import create_client, Client
from functools import lru_cache
import logging

from proptrack.core.config import settings

logger = logging.getLogger(__name__)


class SupabaseClient:
    """
    Classe wrapper pour le client Supabase.
    Une seule connexion est partagée par le processus.
    """

    _instance: Client = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Retourne l'instance du client Supabase (Singleton).

        Returns:
            Client Supabase configuré
        """
        if cls._instance is None:
            try:
                logger.info("🔌 Initialisation du client Supabase...")

                cls._instance = create_client(
                    supabase_url=settings.SUPABASE_URL,
                    supabase_key=settings.SUPABASE_KEY
                )

                logger.info("✓ Client Supabase initialisé")

            except Exception as e:
                logger.error(f"✗ Erreur lors de l'initialisation Supabase: {e}")
                raise

        return cls._instance


@lru_cache()
def get_supabase_client() -> Client:
    """Retourne l'instance partagée du client Supabase."""
    return SupabaseClient.get_client()


def get_supabase() -> Client:
    """
    Dependency FastAPI.

    Usage:
        @router.get("/")
        def endpoint(db: Client = Depends(get_supabase)):
            ...
    """
    return get_supabase_client()


__all__ = [
    "SupabaseClient",
    "get_supabase_client",
    "get_supabase",
]
