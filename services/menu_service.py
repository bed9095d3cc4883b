from db.db_operation import mongo_conn
from datetime import datetime
from bson import ObjectId
from pydantic import ValidationError
from core.exceptions import MenuValidationError, NotFoundException, VersionConflict
from models.menu import MenuItem, MenuSection
from services.audit_service import record_audit
from utils.menu_tree import move, index_of
from utils.logger import get_logger

logger = get_logger("Menu_Service")

async def _load(restaurant_id: str) -> dict:
    try:
        oid = ObjectId(restaurant_id)
    except Exception:
        raise ValueError("Invalid restaurant id")
    doc = await mongo_conn.restaurants_collection.find_one({"_id": oid}, {"menu_sections": 1, "version": 1})
    if not doc:
        raise NotFoundException("Restaurant not found")
    return doc

def _sections(doc: dict) -> list[MenuSection]:
    return [MenuSection.model_validate(s) for s in doc.get("menu_sections") or []]

def _menu_out(restaurant_id: str, version: int, sections: list[MenuSection]) -> dict:
    return {
        "restaurant_id": restaurant_id,
        "version": version,
        "sections": [s.model_dump() for s in sections]
    }

def _section_index(sections: list[MenuSection], section_id: str) -> int:
    idx = index_of(sections, section_id)
    if idx == -1:
        raise NotFoundException("Menu section not found")
    return idx

def _item_index(section: MenuSection, item_id: str) -> int:
    idx = index_of(section.items, item_id)
    if idx == -1:
        raise NotFoundException("Menu item not found")
    return idx

def _validated(model, data: dict):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MenuValidationError(e)

async def get_menu(restaurant_id: str):
    """Editor view: every section and item, disabled and out of stock ones included."""
    doc = await _load(restaurant_id)
    return _menu_out(restaurant_id, doc.get("version", 0), _sections(doc))

async def save_menu(restaurant_id: str, sections: list[MenuSection], expected_version: int,
                    actor_email: str = None, action: str = "save_menu"):
    """
    Write the whole section list if the stored version still equals expected_version.
    The version is bumped in the same update, so of two editors working from the same
    version only the first save lands; the second gets a VersionConflict.
    """
    oid = ObjectId(restaurant_id)
    stored = [s.model_dump() for s in sections]
    result = await mongo_conn.restaurants_collection.update_one(
        {"_id": oid, "version": expected_version},
        {"$set": {"menu_sections": stored, "updated_at": datetime.utcnow()}, "$inc": {"version": 1}}
    )
    if result.matched_count == 0:
        current = await mongo_conn.restaurants_collection.find_one({"_id": oid}, {"version": 1})
        if not current:
            raise NotFoundException("Restaurant not found")
        logger.warning(
            "Menu version conflict",
            extra={"restaurant_id": restaurant_id, "expected": expected_version, "current": current.get("version", 0)}
        )
        raise VersionConflict(expected_version, current.get("version", 0))
    new_version = expected_version + 1
    await record_audit(actor_email, action, restaurant_id, after={"version": new_version, "sections": len(stored)})
    logger.info("Menu saved", extra={"restaurant_id": restaurant_id, "actor": actor_email, "version": new_version})
    return _menu_out(restaurant_id, new_version, sections)

async def _edit(restaurant_id: str, change, expected_version: int | None, actor_email: str, action: str):
    """
    Load the tree, apply change(sections) -> sections, and save it guarded by the version.
    Without an explicit expected_version the version read here is used.
    """
    doc = await _load(restaurant_id)
    version = doc.get("version", 0)
    if expected_version is not None and expected_version != version:
        raise VersionConflict(expected_version, version)
    sections = change(_sections(doc))
    return await save_menu(restaurant_id, sections, version, actor_email, action)

async def add_section(restaurant_id: str, payload, expected_version: int | None = None, actor_email: str = None):
    def change(sections):
        return sections + [MenuSection(name=payload.name)]
    return await _edit(restaurant_id, change, expected_version, actor_email, "add_section")

async def update_section(restaurant_id: str, section_id: str, payload, expected_version: int | None = None,
                         actor_email: str = None):
    def change(sections):
        idx = _section_index(sections, section_id)
        fields = {k: v for k, v in payload.model_dump().items() if v is not None}
        sections[idx] = sections[idx].model_copy(update=fields)
        return sections
    return await _edit(restaurant_id, change, expected_version, actor_email, "update_section")

async def delete_section(restaurant_id: str, section_id: str, expected_version: int | None = None,
                         actor_email: str = None):
    def change(sections):
        # items go with their section
        idx = _section_index(sections, section_id)
        return sections[:idx] + sections[idx + 1:]
    return await _edit(restaurant_id, change, expected_version, actor_email, "delete_section")

async def move_section(restaurant_id: str, from_index: int, to_index: int, expected_version: int | None = None,
                       actor_email: str = None):
    def change(sections):
        return move(sections, from_index, to_index)
    return await _edit(restaurant_id, change, expected_version, actor_email, "move_section")

async def add_item(restaurant_id: str, section_id: str, payload, expected_version: int | None = None,
                   actor_email: str = None):
    def change(sections):
        idx = _section_index(sections, section_id)
        item = _validated(MenuItem, payload.model_dump())
        sections[idx].items.append(item)
        return sections
    return await _edit(restaurant_id, change, expected_version, actor_email, "add_item")

async def update_item(restaurant_id: str, section_id: str, item_id: str, payload,
                      expected_version: int | None = None, actor_email: str = None):
    def change(sections):
        section = sections[_section_index(sections, section_id)]
        pos = _item_index(section, item_id)
        merged = section.items[pos].model_dump()
        fields = payload.model_dump(exclude_unset=True)
        # switching pricing mode: sending one side clears the other
        if fields.get("price_variations"):
            merged["price"] = None
        elif fields.get("price") is not None:
            merged["price_variations"] = []
        merged.update({k: v for k, v in fields.items() if v is not None or k == "image_url"})
        section.items[pos] = _validated(MenuItem, merged)
        return sections
    return await _edit(restaurant_id, change, expected_version, actor_email, "update_item")

async def delete_item(restaurant_id: str, section_id: str, item_id: str, expected_version: int | None = None,
                      actor_email: str = None):
    def change(sections):
        section = sections[_section_index(sections, section_id)]
        pos = _item_index(section, item_id)
        del section.items[pos]
        return sections
    return await _edit(restaurant_id, change, expected_version, actor_email, "delete_item")

async def move_item(restaurant_id: str, section_id: str, from_index: int, to_index: int,
                    expected_version: int | None = None, actor_email: str = None):
    def change(sections):
        section = sections[_section_index(sections, section_id)]
        section.items = move(section.items, from_index, to_index)
        return sections
    return await _edit(restaurant_id, change, expected_version, actor_email, "move_item")
