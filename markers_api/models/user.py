"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from markers_api.database import Base
from markers_api.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    avatar = Column(String(2048), nullable=True)

    # Relationships
    sessions = relationship(
        "UserSession",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    markers = relationship(
        "Marker",
        back_populates="user",
        cascade="all, delete-orphan",
    )
