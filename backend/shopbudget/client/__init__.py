from shopbudget.client.api import ShoppingApi, ApiError
from shopbudget.client.records import DayView, ShopCard, ItemRow, Totals, MonthBudget
from shopbudget.client.screen import ShoppingScreen, ViewState
from shopbudget.client.render import render_day, yen

__all__ = [
    "ShoppingApi", "ApiError",
    "DayView", "ShopCard", "ItemRow", "Totals", "MonthBudget",
    "ShoppingScreen", "ViewState",
    "render_day", "yen",
]
