"""
Store access for shops, items and monthly budgets.

Every read is a single-column predicate (equality, range or set membership);
every write touches a single row. Errors from SQLAlchemy propagate to the caller.
"""
import logging
from sqlalchemy.orm import Session
from datetime import date
from typing import Optional, List
from shopbudget.models.shopping import Shop, Item
from shopbudget.models.budget import Budget

logger = logging.getLogger(__name__)


# --- READS ---

def list_shops_for_date(db: Session, day: date) -> List[Shop]:
    return db.query(Shop).filter(Shop.date == day).order_by(Shop.id).all()


def list_items_for_shop(db: Session, shop_id: int) -> List[Item]:
    return db.query(Item).filter(Item.shop_id == shop_id).order_by(Item.id).all()


def list_shop_ids_between(db: Session, start: date, end: Optional[date]) -> List[int]:
    """Ids of shops dated in the half-open range [start, end), unbounded when end is None"""
    query = db.query(Shop.id).filter(Shop.date >= start)
    if end is not None:
        query = query.filter(Shop.date < end)
    rows = query.all()
    return [row.id for row in rows]


def list_items_for_shops(db: Session, shop_ids: List[int]) -> List[Item]:
    if not shop_ids:
        return []
    return db.query(Item).filter(Item.shop_id.in_(shop_ids)).all()


def get_shop(db: Session, shop_id: int) -> Optional[Shop]:
    return db.query(Shop).filter(Shop.id == shop_id).first()


def get_item(db: Session, item_id: int) -> Optional[Item]:
    return db.query(Item).filter(Item.id == item_id).first()


def get_budget_amount(db: Session, ym: str) -> float:
    """Stored budget for the month, 0 when none has been set"""
    budget = db.query(Budget).filter(Budget.ym == ym).first()
    if not budget or budget.amount is None:
        return 0.0
    return float(budget.amount)


# --- WRITES ---

def create_shop(db: Session, day: date, name: str) -> Shop:
    shop = Shop(date=day, name=name)
    db.add(shop)
    db.commit()
    db.refresh(shop)
    logger.info(f"Created shop {shop.id} '{name}' on {day.isoformat()}")
    return shop


def create_item(db: Session, shop_id: int, name: str, planned_price: float) -> Item:
    """New items start unbought with actual_price equal to planned_price"""
    item = Item(
        shop_id=shop_id,
        name=name,
        planned_price=planned_price,
        actual_price=planned_price,
        is_bought=False
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info(f"Created item {item.id} '{name}' in shop {shop_id}")
    return item


def set_item_bought(db: Session, item: Item, is_bought: bool) -> Item:
    item.is_bought = is_bought
    db.commit()
    logger.info(f"Item {item.id} bought={is_bought}")
    return item


def set_item_actual_price(db: Session, item: Item, actual_price: float) -> Item:
    item.actual_price = actual_price
    db.commit()
    logger.info(f"Item {item.id} actual_price={actual_price}")
    return item


def delete_shop(db: Session, shop: Shop) -> None:
    """Deletes the shop together with its items"""
    shop_id = shop.id
    db.delete(shop)
    db.commit()
    logger.info(f"Deleted shop {shop_id}")


def delete_item(db: Session, item: Item) -> None:
    item_id = item.id
    db.delete(item)
    db.commit()
    logger.info(f"Deleted item {item_id}")


def upsert_budget(db: Session, ym: str, amount: float) -> Budget:
    """Insert-or-replace the budget of a month"""
    budget = db.query(Budget).filter(Budget.ym == ym).first()

    if budget:
        budget.amount = amount
    else:
        budget = Budget(ym=ym, amount=amount)
        db.add(budget)

    db.commit()
    logger.info(f"Budget {ym} set to {amount}")
    return budget
