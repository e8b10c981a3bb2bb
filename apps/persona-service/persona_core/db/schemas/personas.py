import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from persona_core.storage import DEFAULT_CONTENT_POLICY, TrainingCategory

GENERAL_TRAINING_MAX_LENGTH = DEFAULT_CONTENT_POLICY.max_length(TrainingCategory.GENERAL)


class PersonaBase(BaseModel):
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    display_name: str = Field(max_length=255)
    profile_image_url: str | None = Field(default=None, max_length=2048)

    @field_validator('display_name')
    @classmethod
    def _display_name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('display_name is required')
        return value


class PersonaCreate(PersonaBase):
    pass


class PersonaUpdate(BaseModel):
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    display_name: str | None = Field(default=None, max_length=255)
    profile_image_url: str | None = Field(default=None, max_length=2048)


class Persona(PersonaBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class PersonaTraining(BaseModel):
    training_content: str = ''


class PersonaTrainingUpdate(BaseModel):
    # Size is enforced by the storage policy so the error carries limit/actual
    training_content: str = ''
