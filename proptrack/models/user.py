# proptrack/models/user.py
from pydantic import BaseModel
from typing import Optional


class CurrentUser(BaseModel):
    """Utilisateur authentifié, issu de Supabase Auth"""
    id: str
    email: Optional[str] = None
