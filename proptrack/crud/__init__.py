# proptrack/crud/__init__.py
"""
Couche CRUD pour l'API PropTrack

- OwnershipGate : contrôle d'appartenance
- PropertyAggregateService : propriétés et écritures imbriquées
"""

from .ownership import OwnershipGate, get_ownership_gate
from .property import PropertyAggregateService, get_property_service

__all__ = [
    "OwnershipGate",
    "get_ownership_gate",
    "PropertyAggregateService",
    "get_property_service",
]
