"""
Pydantic schemas for request/response payloads.
"""

from .personas import (
    GENERAL_TRAINING_MAX_LENGTH,
    PersonaBase,
    PersonaCreate,
    PersonaUpdate,
    Persona,
    PersonaTraining,
    PersonaTrainingUpdate,
)

__all__ = [
    "GENERAL_TRAINING_MAX_LENGTH",
    "PersonaBase",
    "PersonaCreate",
    "PersonaUpdate",
    "Persona",
    "PersonaTraining",
    "PersonaTrainingUpdate",
]
