from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from app.core.db import Base


class Provider(Base):
    __tablename__ = "providers"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=True)

    company_name = Column(String(255), nullable=True)
    siret = Column(String(14), nullable=True)
    description = Column(Text, nullable=True)
    phone = Column(String(50), nullable=True)
    street_number = Column(String(20), nullable=True)
    street = Column(String(255), nullable=True)
    complement_street = Column(String(255), nullable=True)
    postal_code = Column(String(20), nullable=True)
    city = Column(String(255), nullable=True)

    user = relationship("User")
    provider_activities = relationship("ProviderActivity", back_populates="provider", cascade="all, delete-orphan")


class ProviderActivity(Base):
    """Activity offered by a provider."""
    __tablename__ = "provider_activities"

    id = Column(Integer, primary_key=True, index=True)
    provider_id = Column(Integer, ForeignKey("providers.id", ondelete="CASCADE"), nullable=True)
    activity_id = Column(Integer, ForeignKey("activities.id"), nullable=True)

    provider = relationship("Provider", back_populates="provider_activities")
    activity = relationship("Activity")
