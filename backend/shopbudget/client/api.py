"""
HTTP client for the shopping API, one method per operation.
"""
import logging
from typing import Optional
import requests

from shopbudget.client.records import DayView

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Any non-success response, carrying the raw message."""


def _error_message(r) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return r.text


class ShoppingApi:
    def __init__(self, base_url: str, token: Optional[str] = None, session=None, timeout: float = 10):
        self.base_url = (base_url or "").rstrip("/")
        self.token = token
        # Anything with a requests-style .request() works, e.g. a test client
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, json=None, params=None) -> dict:
        if not self.base_url:
            raise ApiError("API base URL is not set (SHOPPING_API_BASE)")

        headers = {}
        if json is not None:
            headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        kwargs = {"headers": headers, "json": json, "params": params}
        if isinstance(self.session, requests.Session):
            kwargs["timeout"] = self.timeout

        try:
            r = self.session.request(method, f"{self.base_url}{path}", **kwargs)
        except requests.RequestException as e:
            raise ApiError(str(e)) from e

        if r.status_code >= 400:
            logger.debug(f"{method} {path} -> {r.status_code}")
            raise ApiError(_error_message(r))
        return r.json()

    def get_day(self, day: str) -> DayView:
        return DayView.from_json(self._request("GET", "/day", params={"date": day}))

    def add_shop(self, day: str, name: str) -> int:
        return self._request("POST", "/shop", json={"date": day, "name": name})["id"]

    def add_item(self, shop_id: int, name: str, planned_price: float) -> int:
        body = {"shop_id": shop_id, "name": name, "planned_price": planned_price}
        return self._request("POST", "/item", json=body)["id"]

    def toggle_item(self, item_id: int, is_bought: bool) -> None:
        self._request("POST", f"/item/{item_id}/toggle", json={"is_bought": is_bought})

    def set_actual(self, item_id: int, actual_price: float) -> None:
        self._request("POST", f"/item/{item_id}/actual", json={"actual_price": actual_price})

    def set_budget(self, ym: str, amount: float) -> None:
        self._request("POST", "/budget", json={"ym": ym, "amount": amount})

    def get_budget(self, ym: str) -> float:
        return float(self._request("GET", "/budget", params={"ym": ym}).get("amount") or 0)

    def delete_shop(self, shop_id: int) -> None:
        self._request("DELETE", f"/shop/{shop_id}")

    def delete_item(self, item_id: int) -> None:
        self._request("DELETE", f"/item/{item_id}")
