from fastapi import APIRouter, Depends, HTTPException, status, Body, File, UploadFile
from fastapi.responses import Response
from pymongo.errors import PyMongoError
from core.authorization import require_owner, get_owned_restaurant
from core.dependencies import CurrentUser
from models.theme import RestaurantTheme, ThemeOut, PresetList, CurrencyUpdate
from services import theme_service
from utils.logger import get_logger

logger = get_logger("Theme_Route")
router = APIRouter(prefix="/restaurants/me/theme", tags=["Theme"])

async def _call(operation, *args, **kwargs):
    try:
        return await operation(*args, **kwargs)
    except ValueError as e:
        # InvalidThemeFile lands here too
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PyMongoError:
        logger.exception(f"Database error in {operation.__name__}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database error")

@router.get("", response_model=ThemeOut)
async def api_get_theme(restaurant: dict = Depends(get_owned_restaurant)):
    return theme_service.theme_view(restaurant)

@router.put("", response_model=ThemeOut)
async def api_set_theme(payload: RestaurantTheme = Body(...), restaurant: dict = Depends(get_owned_restaurant),
                        current_user: CurrentUser = Depends(require_owner)):
    return await _call(theme_service.set_theme, str(restaurant["_id"]), payload, actor_email=current_user.email)

@router.get("/presets", response_model=PresetList)
async def api_list_presets():
    return theme_service.list_presets()

@router.post("/presets/{preset_name}", response_model=ThemeOut)
async def api_apply_preset(preset_name: str, restaurant: dict = Depends(get_owned_restaurant),
                           current_user: CurrentUser = Depends(require_owner)):
    return await _call(theme_service.apply_preset, str(restaurant["_id"]), preset_name,
                       actor_email=current_user.email)

@router.post("/reset", response_model=ThemeOut)
async def api_reset_theme(restaurant: dict = Depends(get_owned_restaurant),
                          current_user: CurrentUser = Depends(require_owner)):
    return await _call(theme_service.reset_theme, str(restaurant["_id"]), actor_email=current_user.email)

@router.put("/currency", response_model=ThemeOut)
async def api_set_currency(payload: CurrencyUpdate = Body(...), restaurant: dict = Depends(get_owned_restaurant),
                           current_user: CurrentUser = Depends(require_owner)):
    return await _call(theme_service.set_currency_symbol, str(restaurant["_id"]), payload.symbol,
                       actor_email=current_user.email)

@router.get("/export")
async def api_export_theme(restaurant: dict = Depends(get_owned_restaurant)):
    filename = theme_service.export_filename()
    return Response(
        content=theme_service.export_theme(restaurant),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )

@router.post("/import", response_model=ThemeOut)
async def api_import_theme(file: UploadFile = File(...), restaurant: dict = Depends(get_owned_restaurant),
                           current_user: CurrentUser = Depends(require_owner)):
    raw = await file.read()
    return await _call(theme_service.import_theme, str(restaurant["_id"]), raw, actor_email=current_user.email)
