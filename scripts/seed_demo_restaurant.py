# scripts/seed_demo_restaurant.py
import asyncio
from db.db_operation import mongo_conn, create_indexes
from models.menu import MenuItem, MenuSection, PriceVariation
from services.restaurant_service import slugify
from services.theme_service import THEME_PRESETS
from datetime import datetime

DEMO_OWNER = "demo-owner"

async def seed():
    restaurants = mongo_conn.restaurants_collection
    await create_indexes()
    existing = await restaurants.find_one({"owner_id": DEMO_OWNER})
    if existing:
        print("Demo restaurant already exists:", existing["_id"])
        return
    sections = [
        MenuSection(name="Starters", items=[
            MenuItem(name="Bruschetta", description="Tomato, basil, garlic", price=5.5),
            MenuItem(name="Soup of the day", price=4.0, out_of_stock=True)
        ]),
        MenuSection(name="Pizza", items=[
            MenuItem(name="Margherita", price_variations=[
                PriceVariation(name="Small", price=8),
                PriceVariation(name="Large", price=12)
            ])
        ]),
        MenuSection(name="Desserts", items=[MenuItem(name="Tiramisu", price=6.5)])
    ]
    now = datetime.utcnow()
    doc = {
        "owner_id": DEMO_OWNER,
        "owner_email": "demo@example.com",
        "name": "Trattoria Demo",
        "slug": slugify("Trattoria Demo"),
        "location": "Main Street 1",
        "contact": "+1 555 0100",
        "description": "Seeded demo restaurant",
        "email": "demo@example.com",
        "is_public": True,
        "is_blocked": False,
        "menu_sections": [s.model_dump() for s in sections],
        "theme": THEME_PRESETS["rustic"].model_dump(),
        "currency_symbol": None,
        "views": 0,
        "qr_scans": 0,
        "version": 0,
        "created_at": now,
        "updated_at": now
    }
    result = await restaurants.insert_one(doc)
    print("Created demo restaurant:", result.inserted_id)

if __name__ == "__main__":
    asyncio.run(seed())
