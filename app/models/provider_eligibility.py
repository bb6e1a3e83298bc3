from sqlalchemy import Column, Integer, ForeignKey

from app.core.db import Base


class ProviderEligibility(Base):
    __tablename__ = "provider_eligibilities"

    id = Column(Integer, primary_key=True, index=True)
    provider_id = Column(Integer, ForeignKey("providers.id"), nullable=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True)
