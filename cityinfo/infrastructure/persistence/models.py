"""SQLAlchemy models for cities and points of interest."""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from cityinfo.infrastructure.persistence.db import Base


class City(Base):
    __tablename__ = "cities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False, index=True)
    description = Column(String(200))

    points_of_interest = relationship(
        "PointOfInterest",
        back_populates="city",
        cascade="all, delete-orphan",
    )


class PointOfInterest(Base):
    __tablename__ = "points_of_interest"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(50), nullable=False)
    description = Column(String(200))
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=False, index=True)

    city = relationship("City", back_populates="points_of_interest")
