"""
Persona service: persona lifecycle and training content integration.

Training content lives in the storage subsystem; the persona row only keeps
the descriptor returned by the storage manager. The blob write and the row
update are two separate steps with no transaction spanning both.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from persona_core.db import models, schemas
from persona_core.db.repositories import personas as persona_repo
from persona_core.storage import TrainingStorageManager, TrainingSubject, get_training_storage_manager

logger = logging.getLogger(__name__)


class PersonaError(Exception):
    """Base class for persona domain errors."""


class PersonaNotFoundError(PersonaError):
    def __init__(self, persona_id: uuid.UUID):
        super().__init__(f"Persona with ID {persona_id} not found.")
        self.persona_id = persona_id


class PersonaDuplicateDisplayNameError(PersonaError):
    def __init__(self, display_name: str):
        super().__init__(f"A persona with display name '{display_name}' already exists.")
        self.display_name = display_name


class PersonaValidationError(PersonaError):
    pass


class PersonaService:
    """Service class for persona operations."""

    def __init__(self, db: Session, storage: Optional[TrainingStorageManager] = None):
        self.db = db
        self.storage = storage or get_training_storage_manager()

    def create_persona(self, persona: schemas.PersonaCreate) -> models.Persona:
        self._ensure_display_name_available(persona.display_name)
        created = persona_repo.create_persona(self.db, persona)
        logger.info("persona_created: id=%s", created.id)
        return created

    def get_persona(self, persona_id: uuid.UUID) -> Optional[models.Persona]:
        return persona_repo.get_persona(self.db, persona_id)

    def list_personas(
        self,
        *,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        display_name: Optional[str] = None,
        sort_by: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[models.Persona]:
        return persona_repo.get_personas(
            self.db,
            skip=skip,
            limit=limit,
            first_name=first_name,
            last_name=last_name,
            display_name=display_name,
            sort_by=sort_by,
        )

    def update_persona(self, persona_id: uuid.UUID, persona: schemas.PersonaUpdate) -> models.Persona:
        existing = self._require(persona_id)
        changes = persona.model_dump(exclude_unset=True)
        if 'display_name' in changes:
            display_name = (changes['display_name'] or '').strip()
            if not display_name:
                raise PersonaValidationError("display_name is required")
            self._ensure_display_name_available(display_name, exclude_id=existing.id)
            persona = persona.model_copy(update={'display_name': display_name})
        return persona_repo.update_persona(self.db, persona_id, persona)

    def delete_persona(self, persona_id: uuid.UUID) -> bool:
        existing = persona_repo.get_persona(self.db, persona_id)
        if existing is None:
            return False
        descriptor = existing.training_file_path
        persona_repo.delete_persona(self.db, persona_id)
        result = self.storage.delete_content(descriptor)
        if not result.ok:
            # Row is gone already; the blob is left behind as an orphan.
            logger.warning("persona_training_orphaned: id=%s descriptor=%s", persona_id, descriptor)
        logger.info("persona_deleted: id=%s", persona_id)
        return True

    def update_persona_training(self, persona_id: uuid.UUID, training_content: str) -> models.Persona:
        """Store general training content and persist the returned descriptor.

        Blank content clears the training. Storage errors propagate as
        `TrainingStorageError` subclasses and leave the persona unchanged.
        """
        persona = self._require(persona_id)
        subject = TrainingSubject.general(persona.id)
        descriptor = self.storage.set_content(
            subject, training_content, current=persona.training_file_path
        ).unwrap()
        return persona_repo.set_training_file_path(self.db, persona.id, descriptor)

    def get_persona_training(self, persona_id: uuid.UUID) -> str:
        persona = persona_repo.get_persona(self.db, persona_id)
        if persona is None:
            return ''
        return self.storage.get_content(persona.training_file_path).unwrap()

    def _require(self, persona_id: uuid.UUID) -> models.Persona:
        persona = persona_repo.get_persona(self.db, persona_id)
        if persona is None:
            raise PersonaNotFoundError(persona_id)
        return persona

    def _ensure_display_name_available(self, display_name: str, exclude_id: Optional[uuid.UUID] = None) -> None:
        duplicate = persona_repo.get_persona_by_display_name(self.db, display_name)
        if duplicate is not None and duplicate.id != exclude_id:
            raise PersonaDuplicateDisplayNameError(display_name)
