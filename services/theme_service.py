# services/theme_service.py
from db.db_operation import mongo_conn
from datetime import datetime, date
from bson import ObjectId
from pydantic import ValidationError
import json
from core.exceptions import NotFoundException
from models.theme import RestaurantTheme
from services.audit_service import record_audit
from settings.config import settings
from utils.colors import get_contrast_color
from utils.logger import get_logger

logger = get_logger("Theme_Service")

THEME_PRESETS = {
    "default": RestaurantTheme(
        name="Default",
        colors={
            "primary": "#8B2635",
            "secondary": "#F5F5DC",
            "accent": "#D4AF37",
            "background": "#FFFFFF",
            "text": "#2D2D2D",
            "heading": "#8B2635"
        },
        fonts={"heading_font": "Playfair Display", "body_font": "Lato"},
        border_radius="0.5rem",
        is_dark=False
    ),
    "dark": RestaurantTheme(
        name="Dark Elegance",
        colors={
            "primary": "#D4AF37",
            "secondary": "#2D2D2D",
            "accent": "#8B2635",
            "background": "#1A1A1A",
            "text": "#FFFFFF",
            "heading": "#D4AF37"
        },
        fonts={"heading_font": "Playfair Display", "body_font": "Lato"},
        border_radius="0.5rem",
        is_dark=True
    ),
    "modern": RestaurantTheme(
        name="Modern",
        colors={
            "primary": "#3498DB",
            "secondary": "#ECF0F1",
            "accent": "#2ECC71",
            "background": "#FFFFFF",
            "text": "#2C3E50",
            "heading": "#2980B9"
        },
        fonts={"heading_font": "Montserrat", "body_font": "Open Sans"},
        border_radius="0.75rem",
        is_dark=False
    ),
    "rustic": RestaurantTheme(
        name="Rustic",
        colors={
            "primary": "#5D4037",
            "secondary": "#EFEBE9",
            "accent": "#8D6E63",
            "background": "#FBF8F6",
            "text": "#3E2723",
            "heading": "#5D4037"
        },
        fonts={"heading_font": "Merriweather", "body_font": "Roboto"},
        border_radius="0.25rem",
        is_dark=False
    )
}

DEFAULT_PRESET = "default"

class InvalidThemeFile(ValueError):
    pass

def default_theme() -> RestaurantTheme:
    return THEME_PRESETS[DEFAULT_PRESET].model_copy(deep=True)

def resolve_theme(doc: dict) -> RestaurantTheme:
    """Saved theme, or the default preset when the owner never picked one."""
    saved = doc.get("theme")
    if not saved:
        return default_theme()
    return RestaurantTheme.model_validate(saved)

def resolve_currency_symbol(doc: dict) -> str:
    theme = doc.get("theme") or {}
    return theme.get("currency_symbol") or doc.get("currency_symbol") or settings.DEFAULT_CURRENCY_SYMBOL

def contrast_for(theme: RestaurantTheme) -> dict:
    return {
        "primary": get_contrast_color(theme.colors.primary),
        "secondary": get_contrast_color(theme.colors.secondary),
        "accent": get_contrast_color(theme.colors.accent)
    }

def theme_view(doc: dict) -> dict:
    theme = resolve_theme(doc)
    return {
        "theme": theme.model_dump(),
        "currency_symbol": resolve_currency_symbol(doc),
        "contrast": contrast_for(theme),
        "is_default": not doc.get("theme")
    }

def list_presets() -> dict:
    return {"presets": {key: preset.model_dump() for key, preset in THEME_PRESETS.items()}}

async def _load(restaurant_id: str) -> dict:
    doc = await mongo_conn.restaurants_collection.find_one({"_id": ObjectId(restaurant_id)})
    if not doc:
        raise NotFoundException("Restaurant not found")
    return doc

async def set_theme(restaurant_id: str, theme: RestaurantTheme, actor_email: str = None):
    """
    Save the whole theme field. Only `theme` is written so menu edits made in between are kept.
    """
    doc = await _load(restaurant_id)
    before = doc.get("theme")
    stored = theme.model_dump()
    await mongo_conn.restaurants_collection.update_one(
        {"_id": doc["_id"]},
        {"$set": {"theme": stored, "updated_at": datetime.utcnow()}}
    )
    await record_audit(actor_email, "set_theme", restaurant_id, before={"theme": before}, after={"theme": stored})
    logger.info("Theme updated", extra={"restaurant_id": restaurant_id, "actor": actor_email, "theme": theme.name})
    doc["theme"] = stored
    return theme_view(doc)

async def apply_preset(restaurant_id: str, preset_name: str, actor_email: str = None):
    preset = THEME_PRESETS.get(preset_name)
    if preset is None:
        raise NotFoundException(f"Unknown theme preset: {preset_name}")
    doc = await _load(restaurant_id)
    theme = preset.model_copy(deep=True)
    # switching presets keeps the currency the owner chose
    current = doc.get("theme") or {}
    if current.get("currency_symbol"):
        theme.currency_symbol = current["currency_symbol"]
    return await set_theme(restaurant_id, theme, actor_email)

async def reset_theme(restaurant_id: str, actor_email: str = None):
    return await set_theme(restaurant_id, default_theme(), actor_email)

async def set_currency_symbol(restaurant_id: str, symbol: str, actor_email: str = None):
    doc = await _load(restaurant_id)
    theme = resolve_theme(doc)
    theme.currency_symbol = symbol
    return await set_theme(restaurant_id, theme, actor_email)

def export_filename(today: date | None = None) -> str:
    today = today or datetime.utcnow().date()
    return f"restaurant-theme-{today.isoformat()}.json"

def export_theme(doc: dict) -> str:
    return json.dumps(resolve_theme(doc).model_dump(), indent=2, ensure_ascii=False)

def parse_theme_file(raw: bytes) -> RestaurantTheme:
    try:
        data = json.loads(raw)
        return RestaurantTheme.model_validate(data)
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        logger.warning(f"Rejected theme file: {e}")
        raise InvalidThemeFile("Invalid theme file format")

async def import_theme(restaurant_id: str, raw: bytes, actor_email: str = None):
    theme = parse_theme_file(raw)
    return await set_theme(restaurant_id, theme, actor_email)
