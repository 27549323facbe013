"""
Meal category model (breakfast, lunch, dinner, snacks, ...).
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Category(Base):
    """Named meal slot"""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    meals = relationship("Meal", back_populates="category", passive_deletes="all")

    __table_args__ = (UniqueConstraint("name", name="uq_categories_name"),)

    def __repr__(self) -> str:
        return f"<Category id={self.id} name={self.name!r}>"
