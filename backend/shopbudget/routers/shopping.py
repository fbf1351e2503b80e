import logging
import re
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date
from shopbudget.database import get_db
from shopbudget.schemas import (
    ShopCreate, ItemCreate, ToggleBought, SetActualPrice, BudgetSet, BudgetOut, DayView
)
from shopbudget.services import db_service
from shopbudget.services.day_service import build_day_view, parse_day, month_key

logger = logging.getLogger(__name__)

router = APIRouter(tags=["shopping"])

YM_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def _store_error(db: Session, e: Exception) -> HTTPException:
    logger.error(f"Store failure: {e}")
    db.rollback()
    return HTTPException(status_code=500, detail=str(e))


def _day_or_400(text: str) -> date:
    try:
        return parse_day(text)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"invalid date: {text}")


def _ym_or_400(ym: str) -> str:
    if not YM_RE.match(ym):
        raise HTTPException(status_code=400, detail=f"invalid ym: {ym}")
    return ym


# --- Day view ---

@router.get("/day", response_model=DayView)
def get_day(day_text: Optional[str] = Query(None, alias="date"), db: Session = Depends(get_db)):
    """
    Shops of the date with their items, day and month totals and the month budget.
    Defaults to today.
    """
    day = _day_or_400(day_text) if day_text else date.today()
    try:
        return build_day_view(db, day)
    except SQLAlchemyError as e:
        raise _store_error(db, e)


# --- Shops ---

@router.post("/shop")
def create_shop(payload: ShopCreate, db: Session = Depends(get_db)):
    if not payload.date or not payload.name:
        raise HTTPException(status_code=400, detail="date and name required")
    day = _day_or_400(payload.date)

    try:
        shop = db_service.create_shop(db, day, payload.name)
    except SQLAlchemyError as e:
        raise _store_error(db, e)
    return {"ok": True, "id": shop.id}


@router.delete("/shop/{shop_id:int}")
def delete_shop(shop_id: int, db: Session = Depends(get_db)):
    """Deletes a shop and every item in it."""
    try:
        shop = db_service.get_shop(db, shop_id)
        if not shop:
            raise HTTPException(status_code=404, detail=f"shop {shop_id} not found")
        db_service.delete_shop(db, shop)
    except SQLAlchemyError as e:
        raise _store_error(db, e)
    return {"ok": True}


# --- Items ---

@router.post("/item")
def create_item(payload: ItemCreate, db: Session = Depends(get_db)):
    if not payload.shop_id or not payload.name:
        raise HTTPException(status_code=400, detail="shop_id and name required")
    if payload.planned_price < 0:
        raise HTTPException(status_code=400, detail="planned_price must be non-negative")

    try:
        if not db_service.get_shop(db, payload.shop_id):
            raise HTTPException(status_code=400, detail=f"shop {payload.shop_id} not found")
        item = db_service.create_item(db, payload.shop_id, payload.name, payload.planned_price)
    except SQLAlchemyError as e:
        raise _store_error(db, e)
    return {"ok": True, "id": item.id}


@router.post("/item/{item_id:int}/toggle")
def toggle_item(item_id: int, payload: ToggleBought, db: Session = Depends(get_db)):
    try:
        item = db_service.get_item(db, item_id)
        if not item:
            raise HTTPException(status_code=404, detail=f"item {item_id} not found")
        db_service.set_item_bought(db, item, payload.is_bought)
    except SQLAlchemyError as e:
        raise _store_error(db, e)
    return {"ok": True}


@router.post("/item/{item_id:int}/actual")
def set_actual_price(item_id: int, payload: SetActualPrice, db: Session = Depends(get_db)):
    if payload.actual_price < 0:
        raise HTTPException(status_code=400, detail="actual_price must be non-negative")

    try:
        item = db_service.get_item(db, item_id)
        if not item:
            raise HTTPException(status_code=404, detail=f"item {item_id} not found")
        db_service.set_item_actual_price(db, item, payload.actual_price)
    except SQLAlchemyError as e:
        raise _store_error(db, e)
    return {"ok": True}


@router.delete("/item/{item_id:int}")
def delete_item(item_id: int, db: Session = Depends(get_db)):
    try:
        item = db_service.get_item(db, item_id)
        if not item:
            raise HTTPException(status_code=404, detail=f"item {item_id} not found")
        db_service.delete_item(db, item)
    except SQLAlchemyError as e:
        raise _store_error(db, e)
    return {"ok": True}


# --- Monthly budget ---

@router.post("/budget")
def set_budget(payload: BudgetSet, db: Session = Depends(get_db)):
    ym = _ym_or_400(payload.ym)
    if payload.amount < 0:
        raise HTTPException(status_code=400, detail="amount must be non-negative")

    try:
        db_service.upsert_budget(db, ym, payload.amount)
    except SQLAlchemyError as e:
        raise _store_error(db, e)
    return {"ok": True}


@router.get("/budget", response_model=BudgetOut)
def get_budget(ym: Optional[str] = None, db: Session = Depends(get_db)):
    """Budget of the month (current month by default), 0 when not set."""
    ym = _ym_or_400(ym) if ym else month_key(date.today())
    try:
        amount = db_service.get_budget_amount(db, ym)
    except SQLAlchemyError as e:
        raise _store_error(db, e)
    return BudgetOut(ym=ym, amount=amount)
