"""
Presentation state and user actions.

Every action issues at most one mutation and then refetches the whole day
view. Nothing from a mutation response is used for display; a failed call
replaces the view with its error message.
"""
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from shopbudget.client.api import ShoppingApi, ApiError
from shopbudget.client.records import DayView

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    current_date: str
    # Shop whose "add item" form is open
    pending_shop_id: Optional[int] = None
    view: Optional[DayView] = None
    error: Optional[str] = None

    @property
    def current_month(self) -> str:
        return self.current_date[:7]


class ShoppingScreen:
    def __init__(self, api: ShoppingApi, state: Optional[ViewState] = None):
        self.api = api
        self.state = state or ViewState(current_date=date.today().isoformat())

    def refresh(self) -> ViewState:
        """Full refetch of the current day. Errors replace the view."""
        try:
            self.state.view = self.api.get_day(self.state.current_date)
            self.state.error = None
        except ApiError as e:
            logger.warning(f"Day view failed: {e}")
            self.state.view = None
            self.state.error = str(e)
        return self.state

    def _mutate_then_refresh(self, action, *args) -> ViewState:
        try:
            action(*args)
        except ApiError as e:
            logger.warning(f"{action.__name__} failed: {e}")
            self.state.view = None
            self.state.error = str(e)
            return self.state
        return self.refresh()

    # --- Date navigation ---

    def change_date(self, day: str) -> ViewState:
        self.state.current_date = day
        return self.refresh()

    def previous_day(self) -> ViewState:
        return self._shift(-1)

    def next_day(self) -> ViewState:
        return self._shift(1)

    def _shift(self, days: int) -> ViewState:
        current = date.fromisoformat(self.state.current_date)
        return self.change_date((current + timedelta(days=days)).isoformat())

    # --- Shops ---

    def add_shop(self, name: str) -> ViewState:
        name = (name or "").strip()
        if not name:
            return self.state
        return self._mutate_then_refresh(self.api.add_shop, self.state.current_date, name)

    def delete_shop(self, shop_id: int) -> ViewState:
        return self._mutate_then_refresh(self.api.delete_shop, shop_id)

    # --- Items ---

    def open_item_form(self, shop_id: int) -> None:
        self.state.pending_shop_id = shop_id

    def cancel_item_form(self) -> None:
        self.state.pending_shop_id = None

    def save_item(self, name: str, planned_price: float = 0) -> ViewState:
        name = (name or "").strip()
        if not name or not self.state.pending_shop_id:
            return self.state
        shop_id = self.state.pending_shop_id
        self.state.pending_shop_id = None
        return self._mutate_then_refresh(self.api.add_item, shop_id, name, planned_price or 0)

    def toggle_item(self, item_id: int, is_bought: bool) -> ViewState:
        return self._mutate_then_refresh(self.api.toggle_item, item_id, is_bought)

    def set_actual(self, item_id: int, actual_price: float) -> ViewState:
        return self._mutate_then_refresh(self.api.set_actual, item_id, actual_price or 0)

    def delete_item(self, item_id: int) -> ViewState:
        return self._mutate_then_refresh(self.api.delete_item, item_id)

    # --- Budget ---

    def save_budget(self, amount: float) -> ViewState:
        return self._mutate_then_refresh(self.api.set_budget, self.state.current_month, amount or 0)
