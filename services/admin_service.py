# services/admin_service.py
from db.db_operation import mongo_conn
from datetime import datetime
from pymongo import DESCENDING
from core.exceptions import NotFoundException
from services.audit_service import record_audit
from services.restaurant_service import to_object_id, summarize_restaurant, get_restaurant_by_id
from utils.logger import get_logger

logger = get_logger("Admin_Service")

async def list_restaurants(is_blocked: bool | None = None, is_public: bool | None = None,
                           skip: int = 0, limit: int = 50):
    """
    Return restaurant summaries for the admin list, newest first.
    """
    q = {}
    if is_blocked is not None:
        q["is_blocked"] = is_blocked
    if is_public is not None:
        q["is_public"] = is_public
    cursor = mongo_conn.restaurants_collection.find(
        q, {"menu_sections": 0, "theme": 0}
    ).sort("created_at", DESCENDING).skip(skip).limit(limit)
    docs = await cursor.to_list(length=limit)
    return [summarize_restaurant(d) for d in docs]

async def _set_blocked(restaurant_id: str, blocked: bool, actor_email: str, reason: str | None):
    oid = to_object_id(restaurant_id)
    restaurants = mongo_conn.restaurants_collection
    doc = await restaurants.find_one({"_id": oid}, {"is_blocked": 1})
    if not doc:
        raise NotFoundException("Restaurant not found")

    before_snapshot = {"is_blocked": doc.get("is_blocked", False)}
    after_snapshot = {"is_blocked": blocked}

    # per-field update, the menu tree and its version are untouched
    result = await restaurants.update_one(
        {"_id": oid},
        {"$set": {"is_blocked": blocked, "updated_at": datetime.utcnow()}}
    )
    if result.matched_count == 0:
        raise NotFoundException("Restaurant not found")

    action = "block_restaurant" if blocked else "unblock_restaurant"
    await record_audit(actor_email, action, restaurant_id, before=before_snapshot, after=after_snapshot, reason=reason)
    logger.info(f"{actor_email} {'blocked' if blocked else 'unblocked'} restaurant {restaurant_id}")
    return await get_restaurant_by_id(restaurant_id)

async def block_restaurant(restaurant_id: str, actor_email: str, reason: str | None = None):
    return await _set_blocked(restaurant_id, True, actor_email, reason)

async def unblock_restaurant(restaurant_id: str, actor_email: str, reason: str | None = None):
    return await _set_blocked(restaurant_id, False, actor_email, reason)
