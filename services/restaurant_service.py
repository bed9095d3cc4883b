# services/restaurant_service.py
from db.db_operation import mongo_conn
from datetime import datetime
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, PyMongoError
from core.exceptions import ConflictException, ForbiddenException, NotFoundException
from models.menu import MenuSection
from services.audit_service import record_audit
from services.theme_service import resolve_theme, resolve_currency_symbol, contrast_for
from settings.config import settings
from utils.menu_tree import public_sections, count_items, section_chart, format_price
from utils.logger import get_logger
import re

logger = get_logger("Restaurant_Service")

PROFILE_MISSING = "Restaurant not found. Please complete your restaurant profile first."

def slugify(name: str) -> str:
    # simple slugify: lower, non-alphanum -> -, remove duplicates
    s = name.lower()
    s = re.sub(r'[^a-z0-9]+', '-', s).strip('-')
    return s[:100]

def share_url(restaurant_id: str) -> str:
    return f"{settings.PUBLIC_BASE_URL.rstrip('/')}/menu/{restaurant_id}"

def _iso(value):
    return value.isoformat() if value else None

def to_object_id(restaurant_id: str) -> ObjectId:
    try:
        return ObjectId(restaurant_id)
    except Exception:
        raise ValueError("Invalid restaurant id")

def load_sections(doc: dict) -> list[MenuSection]:
    return [MenuSection.model_validate(s) for s in doc.get("menu_sections") or []]

def serialize_restaurant(doc: dict) -> dict:
    rid = str(doc["_id"])
    return {
        "id": rid,
        "owner_id": doc["owner_id"],
        "owner_email": doc.get("owner_email"),
        "name": doc["name"],
        "slug": doc.get("slug"),
        "location": doc.get("location"),
        "contact": doc.get("contact"),
        "description": doc.get("description"),
        "email": doc.get("email"),
        "is_public": doc.get("is_public", False),
        "is_blocked": doc.get("is_blocked", False),
        "menu_sections": doc.get("menu_sections") or [],
        "theme": doc.get("theme"),
        "currency_symbol": doc.get("currency_symbol"),
        "views": doc.get("views", 0),
        "qr_scans": doc.get("qr_scans", 0),
        "version": doc.get("version", 0),
        "share_url": share_url(rid),
        "created_at": _iso(doc.get("created_at")),
        "updated_at": _iso(doc.get("updated_at"))
    }

def summarize_restaurant(doc: dict) -> dict:
    return {
        "id": str(doc["_id"]),
        "name": doc["name"],
        "location": doc.get("location"),
        "owner_email": doc.get("owner_email"),
        "is_public": doc.get("is_public", False),
        "is_blocked": doc.get("is_blocked", False)
    }

async def create_restaurant(owner_id: str, owner_email: str | None, payload):
    """
    Profile completion: create the single restaurant document owned by owner_id.
    The menu starts empty and private; the default theme applies until one is saved.
    """
    restaurants = mongo_conn.restaurants_collection
    existing = await restaurants.find_one({"owner_id": owner_id})
    if existing is not None:
        raise ConflictException("Restaurant for this owner already exists")
    slug = slugify(payload.name)
    if not slug:
        raise ValueError("Restaurant name must contain letters or digits")
    slug_existing = await restaurants.find_one({"slug": slug})
    if slug_existing is not None:
        raise ConflictException("Restaurant with similar name exists, choose a different name")
    now = datetime.utcnow()
    doc = {
        "owner_id": owner_id,
        "owner_email": owner_email,
        "name": payload.name,
        "slug": slug,
        "location": payload.location,
        "contact": payload.contact,
        "description": payload.description,
        "email": payload.email,
        "is_public": bool(payload.is_public),
        "is_blocked": False,
        "menu_sections": [],
        "theme": None,
        "currency_symbol": None,
        "views": 0,
        "qr_scans": 0,
        "version": 0,
        "created_at": now,
        "updated_at": now
    }
    try:
        result = await restaurants.insert_one(doc)
    except DuplicateKeyError:
        raise ConflictException("Restaurant for this owner or name already exists")
    except PyMongoError:
        logger.exception("DB error creating restaurant")
        raise
    logger.info("Restaurant created", extra={"owner_id": owner_id, "restaurant_id": str(result.inserted_id)})
    doc["_id"] = result.inserted_id
    return serialize_restaurant(doc)

async def get_restaurant_doc(restaurant_id: str):
    try:
        oid = ObjectId(restaurant_id)
    except Exception:
        return None
    return await mongo_conn.restaurants_collection.find_one({"_id": oid})

async def get_restaurant_doc_for_owner(owner_id: str):
    doc = await mongo_conn.restaurants_collection.find_one({"owner_id": owner_id})
    if not doc:
        raise NotFoundException(PROFILE_MISSING)
    return doc

async def find_restaurant_by_ref(ref: str):
    """Share links carry the restaurant id; the slug is accepted too."""
    if ObjectId.is_valid(ref):
        doc = await get_restaurant_doc(ref)
        if doc:
            return doc
    return await mongo_conn.restaurants_collection.find_one({"slug": ref})

async def get_restaurant_by_id(restaurant_id: str):
    doc = await get_restaurant_doc(restaurant_id)
    if not doc:
        return None
    return serialize_restaurant(doc)

async def update_restaurant(restaurant_id: str, payload, actor_email: str = None):
    oid = to_object_id(restaurant_id)
    update_doc = {k: v for k, v in payload.model_dump().items() if v is not None}
    if "name" in update_doc:
        slug = slugify(update_doc["name"])
        if not slug:
            raise ValueError("Restaurant name must contain letters or digits")
        clash = await mongo_conn.restaurants_collection.find_one({"slug": slug, "_id": {"$ne": oid}})
        if clash is not None:
            raise ConflictException("Restaurant with similar name exists, choose a different name")
        update_doc["slug"] = slug
    update_doc["updated_at"] = datetime.utcnow()
    result = await mongo_conn.restaurants_collection.update_one({"_id": oid}, {"$set": update_doc})
    if result.matched_count == 0:
        raise NotFoundException("Restaurant not found")
    await record_audit(actor_email, "update_restaurant", restaurant_id, after=update_doc)
    logger.info("Restaurant updated", extra={"restaurant_id": restaurant_id, "actor": actor_email})
    return await get_restaurant_by_id(restaurant_id)

def dashboard_stats(doc: dict) -> dict:
    sections = load_sections(doc)
    rid = str(doc["_id"])
    is_public = doc.get("is_public", False)
    return {
        "restaurant_id": rid,
        "name": doc["name"],
        "sections_count": len(sections),
        "items_count": count_items(sections),
        "status": "Public" if is_public else "Private",
        "is_public": is_public,
        "is_blocked": doc.get("is_blocked", False),
        "views": doc.get("views", 0),
        "qr_scans": doc.get("qr_scans", 0),
        "share_url": share_url(rid),
        "chart": section_chart(sections)
    }

def _public_item(item, symbol: str) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "description": item.description,
        "price": item.price,
        "display_price": format_price(item.price, symbol) if item.price is not None else None,
        "price_variations": [
            {"name": v.name, "price": v.price, "display_price": format_price(v.price, symbol)}
            for v in item.price_variations
        ],
        "image_url": item.image_url
    }

async def get_public_menu(ref: str, source: str | None = None):
    """
    Read-only menu for the share link. Private or blocked restaurants are refused,
    disabled sections and disabled / out of stock items are left out.
    """
    doc = await find_restaurant_by_ref(ref)
    if not doc:
        raise NotFoundException("Restaurant not found")
    if not doc.get("is_public", False):
        raise ForbiddenException("This menu is currently private")
    if doc.get("is_blocked", False):
        raise ForbiddenException("This menu is not available")

    counters = {"views": 1}
    if source == "qr":
        counters["qr_scans"] = 1
    await mongo_conn.restaurants_collection.update_one({"_id": doc["_id"]}, {"$inc": counters})

    theme = resolve_theme(doc)
    symbol = resolve_currency_symbol(doc)
    sections = public_sections(load_sections(doc))
    return {
        "id": str(doc["_id"]),
        "name": doc["name"],
        "location": doc.get("location"),
        "contact": doc.get("contact"),
        "description": doc.get("description"),
        "currency_symbol": symbol,
        "theme": theme.model_dump(),
        "contrast": contrast_for(theme),
        "sections": [
            {"id": s.id, "name": s.name, "items": [_public_item(i, symbol) for i in s.items]}
            for s in sections
        ]
    }
