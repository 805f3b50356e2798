"""Dépendances FastAPI communes"""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from supabase import Client
import logging

from proptrack.core.exceptions import AuthenticationRequiredError
from proptrack.db import get_supabase
from proptrack.models import CurrentUser

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Client = Depends(get_supabase),
) -> CurrentUser:
    """
    Vérifie le jeton de session auprès de Supabase Auth.

    Raises:
        AuthenticationRequiredError: jeton absent, expiré ou invalide
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequiredError()

    try:
        response = db.auth.get_user(credentials.credentials)
    except Exception as e:
        logger.warning(f"Jeton refusé: {e}")
        raise AuthenticationRequiredError() from e

    user = getattr(response, "user", None)
    if user is None or not getattr(user, "id", None):
        raise AuthenticationRequiredError()

    return CurrentUser(id=str(user.id), email=getattr(user, "email", None))
