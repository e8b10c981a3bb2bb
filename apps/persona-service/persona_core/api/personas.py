"""
Personas API endpoints.

CRUD for personas and the training content endpoints backed by the
training storage manager.
"""
from typing import List, Optional
import uuid
from fastapi import APIRouter, Depends, HTTPException, Response, status

from persona_core.db import schemas
from persona_core.api.deps import get_persona_service
from persona_core.services import PersonaService

router = APIRouter(prefix="/personas", tags=["personas"])


@router.post("/", response_model=schemas.Persona, status_code=status.HTTP_201_CREATED)
def create_persona_endpoint(
    persona: schemas.PersonaCreate,
    service: PersonaService = Depends(get_persona_service),
):
    return service.create_persona(persona)


@router.get("/", response_model=List[schemas.Persona])
def get_all_personas_endpoint(
    skip: int = 0,
    limit: int = 100,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    display_name: Optional[str] = None,
    sort_by: Optional[str] = None,
    service: PersonaService = Depends(get_persona_service),
):
    return service.list_personas(
        first_name=first_name,
        last_name=last_name,
        display_name=display_name,
        sort_by=sort_by,
        skip=skip,
        limit=limit,
    )


@router.get("/{persona_id}", response_model=schemas.Persona)
def get_persona_endpoint(
    persona_id: uuid.UUID,
    service: PersonaService = Depends(get_persona_service),
):
    persona = service.get_persona(persona_id)
    if persona is None:
        raise HTTPException(status_code=404, detail="Persona not found")
    return persona


@router.patch("/{persona_id}", response_model=schemas.Persona)
def update_persona_endpoint(
    persona_id: uuid.UUID,
    persona: schemas.PersonaUpdate,
    service: PersonaService = Depends(get_persona_service),
):
    return service.update_persona(persona_id, persona)


@router.delete("/{persona_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_persona_endpoint(
    persona_id: uuid.UUID,
    service: PersonaService = Depends(get_persona_service),
):
    if not service.delete_persona(persona_id):
        raise HTTPException(status_code=404, detail="Persona not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{persona_id}/training", response_model=schemas.PersonaTraining)
def get_persona_training_endpoint(
    persona_id: uuid.UUID,
    service: PersonaService = Depends(get_persona_service),
):
    if service.get_persona(persona_id) is None:
        raise HTTPException(status_code=404, detail=f"Persona with ID {persona_id} not found")
    return schemas.PersonaTraining(training_content=service.get_persona_training(persona_id))


@router.put(
    "/{persona_id}/training",
    status_code=status.HTTP_204_NO_CONTENT,
    description=(
        "Replace the persona's general training content "
        f"(max {schemas.GENERAL_TRAINING_MAX_LENGTH} characters). Empty content clears it."
    ),
)
def update_persona_training_endpoint(
    persona_id: uuid.UUID,
    payload: schemas.PersonaTrainingUpdate,
    service: PersonaService = Depends(get_persona_service),
):
    service.update_persona_training(persona_id, payload.training_content)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
