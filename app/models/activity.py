from sqlalchemy import Column, Integer, String, Text

from app.core.db import Base


class Activity(Base):
    """A skill or trade used to match providers with projects."""
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
