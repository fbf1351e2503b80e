from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, field_validator
from typing import List


MAX_ID = 2**63 - 1


def as_number(value) -> float:
    """Missing, empty or unparsable numbers count as 0."""
    if value is None or value == "" or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def as_text(value) -> str:
    return "" if value is None else str(value)


# --- REQUEST BODIES ---
class ShopCreate(BaseModel):
    date: str = ""
    name: str = ""

    @field_validator("date", "name", mode="before")
    @classmethod
    def _text(cls, v):
        return as_text(v).strip()

class ItemCreate(BaseModel):
    shop_id: int = 0
    name: str = ""
    planned_price: float = 0

    @field_validator("shop_id", mode="before")
    @classmethod
    def _shop_ref(cls, v):
        # Out-of-range ids count as missing
        ref = as_number(v)
        if not 0 < ref <= MAX_ID:
            return 0
        return int(ref)

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, v):
        return as_text(v).strip()

    @field_validator("planned_price", mode="before")
    @classmethod
    def _price(cls, v):
        return as_number(v)

class ToggleBought(BaseModel):
    is_bought: bool = False

    @field_validator("is_bought", mode="before")
    @classmethod
    def _flag(cls, v):
        return False if v is None else v

class SetActualPrice(BaseModel):
    actual_price: float = 0

    @field_validator("actual_price", mode="before")
    @classmethod
    def _price(cls, v):
        return as_number(v)

class BudgetSet(BaseModel):
    ym: str = ""
    amount: float = 0

    @field_validator("ym", mode="before")
    @classmethod
    def _ym(cls, v):
        return as_text(v).strip()

    @field_validator("amount", mode="before")
    @classmethod
    def _amount(cls, v):
        return as_number(v)

# --- DAY VIEW RECORDS ---
class ItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    planned_price: float = 0
    actual_price: float = 0
    is_bought: bool = False

    @field_validator("planned_price", "actual_price", mode="before")
    @classmethod
    def _price(cls, v):
        return as_number(v)

    @field_validator("is_bought", mode="before")
    @classmethod
    def _flag(cls, v):
        return bool(v)

class ShopOut(BaseModel):
    id: int
    name: str
    items: List[ItemOut] = []

class DayTotals(BaseModel):
    day_planned: float = 0
    day_actual: float = 0
    month_planned: float = 0
    month_actual: float = 0

class BudgetOut(BaseModel):
    ym: str
    amount: float = 0

class DayView(BaseModel):
    date: str
    shops: List[ShopOut]
    totals: DayTotals
    budget: BudgetOut
