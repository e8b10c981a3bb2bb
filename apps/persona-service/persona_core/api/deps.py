"""
API dependency helpers.

Provides the persona service and the process-wide training storage manager
to routes.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from persona_core.db.database import get_db
from persona_core.services import PersonaService
from persona_core.storage import TrainingStorageManager, get_training_storage_manager


def get_training_storage() -> TrainingStorageManager:
    return get_training_storage_manager()


def get_persona_service(
    db: Session = Depends(get_db),
    storage: TrainingStorageManager = Depends(get_training_storage),
) -> PersonaService:
    return PersonaService(db, storage=storage)
