"""Business logic services package with public service helpers."""

from .persona_service import (
    PersonaDuplicateDisplayNameError,
    PersonaError,
    PersonaNotFoundError,
    PersonaService,
    PersonaValidationError,
)

__all__ = [
    "PersonaDuplicateDisplayNameError",
    "PersonaError",
    "PersonaNotFoundError",
    "PersonaService",
    "PersonaValidationError",
]
