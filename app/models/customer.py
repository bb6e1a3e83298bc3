from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.core.db import Base


class Customer(Base):
	__tablename__ = "customers"

	id = Column(Integer, primary_key=True, index=True)
	user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=True)

	phone = Column(String(50), nullable=True)
	street_number = Column(String(20), nullable=True)
	street = Column(String(255), nullable=True)
	complement_street = Column(String(255), nullable=True)
	postal_code = Column(String(20), nullable=True)
	city = Column(String(255), nullable=True)

	user = relationship("User")
	projects = relationship("Project", back_populates="customer")
