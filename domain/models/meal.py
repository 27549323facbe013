"""
Meal log model: one row per (food, category, date) occurrence.
"""

from sqlalchemy import Column, Integer, Date, TIMESTAMP, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Meal(Base):
    """A food eaten under a category on a calendar day"""

    __tablename__ = "meals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # No ondelete: removing a referenced food or category is rejected by the store
    food_id = Column(Integer, ForeignKey("foods.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    date = Column(Date, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    food = relationship("Food", back_populates="meals")
    category = relationship("Category", back_populates="meals")

    __table_args__ = (Index("ix_meals_category_date", "category_id", "date"),)

    def __repr__(self) -> str:
        return (
            f"<Meal id={self.id} food_id={self.food_id} "
            f"category_id={self.category_id} date={self.date}>"
        )
