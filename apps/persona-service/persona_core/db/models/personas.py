import uuid
from sqlalchemy import Column, String, DateTime, Index, func
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc


class Persona(Base):
    __tablename__ = 'personas'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    display_name = Column(String(255), nullable=False)
    profile_image_url = Column(String(2048), nullable=True)
    # Opaque storage descriptor (e.g. local:///srv/training-data/personas/<id>-general.txt)
    training_file_path = Column(String(2048), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('ux_personas_display_name_lower', func.lower(display_name), unique=True),
    )
