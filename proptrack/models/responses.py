# proptrack/models/responses.py
"""Enveloppe commune de toutes les réponses JSON"""
from pydantic import BaseModel
from typing import Generic, Literal, Optional, TypeVar

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    status: Literal["success", "error"] = "success"
    data: Optional[T] = None
    message: Optional[str] = None


def error_body(message: str, data=None) -> dict:
    """Corps d'une réponse d'erreur, identique quelle que soit la cause"""
    body = {"status": "error", "message": message}
    if data is not None:
        body["data"] = data
    return body
