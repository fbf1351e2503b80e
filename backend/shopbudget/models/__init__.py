from shopbudget.models.shopping import Shop, Item
from shopbudget.models.budget import Budget

__all__ = ["Shop", "Item", "Budget"]
