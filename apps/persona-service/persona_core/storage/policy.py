"""Training subjects and the per-category content size policy."""
from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass
from typing import Dict, Mapping, Optional


class TrainingCategory(str, enum.Enum):
    GENERAL = "general"
    TOPIC = "topic"


@dataclass(frozen=True)
class TrainingSubject:
    """Key for one unit of stored training content."""

    owner_id: uuid.UUID
    category: TrainingCategory = TrainingCategory.GENERAL
    topic_id: Optional[uuid.UUID] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", TrainingCategory(self.category))
        if self.category == TrainingCategory.TOPIC and self.topic_id is None:
            raise ValueError("topic training requires a topic_id")
        if self.category == TrainingCategory.GENERAL and self.topic_id is not None:
            raise ValueError("general training cannot be scoped to a topic")

    @classmethod
    def general(cls, owner_id: uuid.UUID) -> "TrainingSubject":
        return cls(owner_id=owner_id)

    @classmethod
    def topic(cls, owner_id: uuid.UUID, topic_id: uuid.UUID) -> "TrainingSubject":
        return cls(owner_id=owner_id, category=TrainingCategory.TOPIC, topic_id=topic_id)


# ~1,250 and ~12,500 tokens respectively
_DEFAULT_LIMITS: Dict[TrainingCategory, int] = {
    TrainingCategory.GENERAL: 5000,
    TrainingCategory.TOPIC: 50000,
}


class ContentPolicy:
    def __init__(self, limits: Optional[Mapping[TrainingCategory, int]] = None) -> None:
        self._limits = dict(limits if limits is not None else _DEFAULT_LIMITS)

    def max_length(self, category: TrainingCategory) -> int:
        try:
            return self._limits[TrainingCategory(category)]
        except KeyError:
            raise ValueError(f"No content policy for category '{category}'") from None

    def allows(self, category: TrainingCategory, content: str) -> bool:
        return len(content) <= self.max_length(category)


DEFAULT_CONTENT_POLICY = ContentPolicy()
