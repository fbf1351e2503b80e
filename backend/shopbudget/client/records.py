"""
Typed records for the day view payload.

Coercion happens here and only here: missing numbers become 0, missing
flags become False, missing lists become empty.
"""
from dataclasses import dataclass, field
from typing import List


def _num(value) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


@dataclass
class ItemRow:
    id: int
    name: str
    planned_price: float = 0.0
    actual_price: float = 0.0
    is_bought: bool = False

    @classmethod
    def from_json(cls, data: dict) -> "ItemRow":
        planned = _num(data.get("planned_price"))
        actual = data.get("actual_price")
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            planned_price=planned,
            actual_price=planned if actual is None else _num(actual),
            is_bought=bool(data.get("is_bought")),
        )


@dataclass
class ShopCard:
    id: int
    name: str
    items: List[ItemRow] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> "ShopCard":
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            items=[ItemRow.from_json(it) for it in data.get("items") or []],
        )


@dataclass
class Totals:
    day_planned: float = 0.0
    day_actual: float = 0.0
    month_planned: float = 0.0
    month_actual: float = 0.0

    @classmethod
    def from_json(cls, data: dict) -> "Totals":
        data = data or {}
        return cls(
            day_planned=_num(data.get("day_planned")),
            day_actual=_num(data.get("day_actual")),
            month_planned=_num(data.get("month_planned")),
            month_actual=_num(data.get("month_actual")),
        )


@dataclass
class MonthBudget:
    ym: str
    amount: float = 0.0


@dataclass
class DayView:
    date: str
    shops: List[ShopCard]
    totals: Totals
    budget: MonthBudget

    @property
    def remaining(self) -> float:
        return self.budget.amount - self.totals.month_actual

    @property
    def over_budget(self) -> bool:
        return self.remaining < 0

    @classmethod
    def from_json(cls, data: dict) -> "DayView":
        day = str(data.get("date") or "")
        budget = data.get("budget") or {}
        return cls(
            date=day,
            shops=[ShopCard.from_json(s) for s in data.get("shops") or []],
            totals=Totals.from_json(data.get("totals")),
            budget=MonthBudget(ym=str(budget.get("ym") or day[:7]), amount=_num(budget.get("amount"))),
        )
