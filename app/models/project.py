from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey
from sqlalchemy.orm import relationship

from app.core.db import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    date_send = Column(Date, nullable=False)

    street_number = Column(String(20), nullable=True)
    street = Column(String(255), nullable=True)
    complement_street = Column(String(255), nullable=True)
    postal_code = Column(String(20), nullable=True)
    city = Column(String(255), nullable=True)

    customer_id = Column(Integer, ForeignKey("customers.id"), index=True, nullable=True)

    customer = relationship("Customer", back_populates="projects")
    project_pics = relationship("ProjectPic", back_populates="project", cascade="all, delete-orphan")
    project_activities = relationship("ProjectActivity", back_populates="project", cascade="all, delete-orphan")


class ProjectPic(Base):
    __tablename__ = "project_pics"

    id = Column(Integer, primary_key=True, index=True)
    link = Column(String(512), nullable=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), index=True, nullable=True)

    project = relationship("Project", back_populates="project_pics")


class ProjectActivity(Base):
    """Activity required by a project."""
    __tablename__ = "project_activities"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), index=True, nullable=True)
    activity_id = Column(Integer, ForeignKey("activities.id"), index=True, nullable=True)

    project = relationship("Project", back_populates="project_activities")
    activity = relationship("Activity")
