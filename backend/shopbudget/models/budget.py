from sqlalchemy import Column, Integer, String, Float
from shopbudget.database import Base

class Budget(Base):
    """Monthly spending ceiling, one row per month"""
    __tablename__ = "budgets"

    id = Column(Integer, primary_key=True, index=True)
    ym = Column(String, unique=True, nullable=False)  # Format: "2026-02"
    amount = Column(Float, nullable=False, default=0)
