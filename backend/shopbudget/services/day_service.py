"""
Day view aggregation: the shops of one date with their items, plus planned
and actual totals for that date and for its whole calendar month.

Planned totals count every item. Actual totals count only bought items.
"""
from sqlalchemy.orm import Session
from datetime import date, datetime, MAXYEAR
from typing import Optional, Tuple
from shopbudget.schemas import ItemOut, ShopOut, DayTotals, BudgetOut, DayView
from shopbudget.services import db_service


def parse_day(text: str) -> date:
    """Parses a YYYY-MM-DD string, raising ValueError otherwise"""
    return datetime.strptime(text, "%Y-%m-%d").date()


def month_key(day: date) -> str:
    return day.isoformat()[:7]


def month_bounds(day: date) -> Tuple[date, Optional[date]]:
    """
    First day of the month and first day of the following month.
    The end is None for December of the last representable year.
    """
    first = day.replace(day=1)
    if first.month == 12:
        if first.year == MAXYEAR:
            return first, None
        return first, first.replace(year=first.year + 1, month=1)
    return first, first.replace(month=first.month + 1)


def build_day_view(db: Session, day: date) -> DayView:
    ym = month_key(day)

    # 1. Shops of the day with their items
    out_shops = []
    day_planned = 0.0
    day_actual = 0.0

    for shop in db_service.list_shops_for_date(db, day):
        items = [ItemOut.model_validate(it) for it in db_service.list_items_for_shop(db, shop.id)]
        for it in items:
            day_planned += it.planned_price
            if it.is_bought:
                day_actual += it.actual_price
        out_shops.append(ShopOut(id=shop.id, name=shop.name, items=items))

    # 2. Month totals through the ids of every shop in the month
    start, end = month_bounds(day)
    shop_ids = db_service.list_shop_ids_between(db, start, end)

    month_planned = 0.0
    month_actual = 0.0
    for row in db_service.list_items_for_shops(db, shop_ids):
        it = ItemOut.model_validate(row)
        month_planned += it.planned_price
        if it.is_bought:
            month_actual += it.actual_price

    return DayView(
        date=day.isoformat(),
        shops=out_shops,
        totals=DayTotals(
            day_planned=day_planned,
            day_actual=day_actual,
            month_planned=month_planned,
            month_actual=month_actual,
        ),
        budget=BudgetOut(ym=ym, amount=db_service.get_budget_amount(db, ym)),
    )
