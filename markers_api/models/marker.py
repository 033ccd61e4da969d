"""Marker model."""

from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from markers_api.database import Base
from markers_api.models.mixins import TimestampMixin


class Marker(Base, TimestampMixin):
    """A geo-tagged point of interest owned by one user."""

    __tablename__ = "markers"
    __table_args__ = (
        CheckConstraint("latitude >= -90 AND latitude <= 90", name="ck_markers_latitude"),
        CheckConstraint("longitude >= -180 AND longitude <= 180", name="ck_markers_longitude"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    latitude = Column(Float, nullable=False, index=True)
    longitude = Column(Float, nullable=False, index=True)
    address = Column(String(255), nullable=True)
    image_url = Column(String(2048), nullable=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    user = relationship("User", back_populates="markers")
