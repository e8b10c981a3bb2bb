"""
Persona repository functions.

Implements create/read/update/delete for personas plus the single-column
update used to persist a training storage descriptor.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import func

from persona_core.db import models, schemas


def create_persona(db: Session, persona: schemas.PersonaCreate):
    db_persona = models.Persona(
        first_name=persona.first_name,
        last_name=persona.last_name,
        display_name=persona.display_name,
        profile_image_url=persona.profile_image_url,
    )
    db.add(db_persona)
    db.commit()
    db.refresh(db_persona)
    return db_persona


def get_persona(db: Session, persona_id: uuid.UUID):
    return db.query(models.Persona).filter(models.Persona.id == persona_id).first()


def get_persona_by_display_name(db: Session, display_name: str):
    return (
        db.query(models.Persona)
        .filter(func.lower(models.Persona.display_name) == func.lower(display_name))
        .first()
    )


def get_personas(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    *,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    display_name: Optional[str] = None,
    sort_by: Optional[str] = None,
):
    """Case-insensitive substring search; ``sort_by`` is "alphabetical" or "recent" (default)."""
    q = db.query(models.Persona)
    if first_name and first_name.strip():
        q = q.filter(models.Persona.first_name.ilike(f"%{first_name}%"))
    if last_name and last_name.strip():
        q = q.filter(models.Persona.last_name.ilike(f"%{last_name}%"))
    if display_name and display_name.strip():
        q = q.filter(models.Persona.display_name.ilike(f"%{display_name}%"))
    if (sort_by or "").lower() == "alphabetical":
        q = q.order_by(models.Persona.display_name.asc())
    else:
        q = q.order_by(models.Persona.created_at.desc())
    return q.offset(skip).limit(limit).all()


def update_persona(db: Session, persona_id: uuid.UUID, persona: schemas.PersonaUpdate):
    db_persona = db.query(models.Persona).filter(models.Persona.id == persona_id).first()
    if db_persona:
        for key, value in persona.model_dump(exclude_unset=True).items():
            setattr(db_persona, key, value)
        db.commit()
        db.refresh(db_persona)
    return db_persona


def set_training_file_path(db: Session, persona_id: uuid.UUID, descriptor: Optional[str]):
    """Persist the storage descriptor; empty descriptors are stored as NULL."""
    db_persona = db.query(models.Persona).filter(models.Persona.id == persona_id).first()
    if db_persona:
        db_persona.training_file_path = descriptor or None
        db.commit()
        db.refresh(db_persona)
    return db_persona


def delete_persona(db: Session, persona_id: uuid.UUID):
    """Delete a persona; returns the removed row or None when missing."""
    if persona_id is None:
        return None
    try:
        db_persona = db.query(models.Persona).filter(models.Persona.id == persona_id).first()
        if db_persona:
            db.delete(db_persona)
            db.commit()
        return db_persona
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete persona {persona_id}: {str(e)}")
