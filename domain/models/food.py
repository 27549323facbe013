"""
Food catalog model.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Food(Base):
    """Canonical food item with its calorie count"""

    __tablename__ = "foods"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    calories = Column(Integer, nullable=False, default=0)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    meals = relationship("Meal", back_populates="food", passive_deletes="all")

    __table_args__ = (
        CheckConstraint("calories >= 0", name="ck_foods_calories_nonneg"),
    )

    def __repr__(self) -> str:
        return f"<Food id={self.id} name={self.name!r} calories={self.calories}>"
