"""
Script to load a demo day into the local database
"""
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from datetime import date
from shopbudget.database import SessionLocal, engine, Base
from shopbudget.services import db_service

Base.metadata.create_all(bind=engine)
db = SessionLocal()

try:
    day = date.fromisoformat(sys.argv[1]) if len(sys.argv) > 1 else date.today()
    print(f"Seeding demo shopping for {day.isoformat()}...")

    shop = db_service.create_shop(db, day, "Supermarket")
    milk = db_service.create_item(db, shop.id, "Milk", 300)
    db_service.set_item_bought(db, milk, True)
    db_service.create_item(db, shop.id, "Eggs", 500)

    drugstore = db_service.create_shop(db, day, "Drugstore")
    db_service.create_item(db, drugstore.id, "Shampoo", 680)

    db_service.upsert_budget(db, day.isoformat()[:7], 30000)
    print(f"Done: shops {shop.id}, {drugstore.id}")

except Exception as e:
    print(f"Seeding failed: {e}")
    db.rollback()
    sys.exit(1)
finally:
    db.close()
