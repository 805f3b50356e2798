"""
Routes API pour les propriétés de l'utilisateur connecté
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from supabase import Client
import logging

from proptrack.api.deps import get_current_user
from proptrack.crud import get_property_service
from proptrack.db import get_supabase
from proptrack.models import (
    ApiResponse,
    CurrentUser,
    Property,
    PropertyAggregate,
    PropertyCreate,
    PropertyUpdate,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=ApiResponse[List[PropertyAggregate]])
def list_properties(
    user: CurrentUser = Depends(get_current_user),
    db: Client = Depends(get_supabase)
):
    """Toutes les propriétés de l'utilisateur, avec leurs enfants"""
    service = get_property_service(db)
    return ApiResponse(data=service.list(user.id))


@router.get("/{property_id}", response_model=ApiResponse[PropertyAggregate])
def get_property(
    property_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Client = Depends(get_supabase)
):
    """Récupérer une propriété par son ID"""
    service = get_property_service(db)
    return ApiResponse(data=service.get(property_id, user.id))


@router.post("", response_model=ApiResponse[Property], status_code=status.HTTP_201_CREATED)
def create_property(
    property_data: PropertyCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Client = Depends(get_supabase)
):
    """Créer une propriété avec adresse, locataires, images et documents"""
    service = get_property_service(db)
    created = service.create(user.id, property_data)
    return ApiResponse(data=created)


@router.put("/{property_id}", response_model=ApiResponse[Property])
def update_property(
    property_id: str,
    property_data: PropertyUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Client = Depends(get_supabase)
):
    """Mettre à jour les champs scalaires d'une propriété"""
    service = get_property_service(db)
    try:
        updated = service.update(property_id, user.id, property_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return ApiResponse(data=updated)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property(
    property_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Client = Depends(get_supabase)
):
    """Supprimer une propriété"""
    service = get_property_service(db)
    service.delete(property_id, user.id)
    return None  # 204 No Content
