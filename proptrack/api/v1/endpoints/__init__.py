"""Endpoints API"""
from proptrack.api.v1.endpoints import properties

__all__ = ["properties"]
