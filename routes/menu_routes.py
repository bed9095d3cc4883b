from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, status, Body, Query
from pymongo.errors import PyMongoError
from core.authorization import require_owner, get_owned_restaurant
from core.dependencies import CurrentUser
from models.menu import (MenuOut, MenuSave, MenuSectionCreate, MenuSectionUpdate, MenuItemCreate,
                         MenuItemUpdate, MoveRequest)
from services import menu_service
from utils.logger import get_logger

logger = get_logger("Menu_Route")
router = APIRouter(prefix="/restaurants/me/menu", tags=["Menu Builder"])

VersionParam = Annotated[int | None, Query(ge=0, description="Menu version the edit is based on")]

async def _call(operation, *args, **kwargs):
    try:
        return await operation(*args, **kwargs)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PyMongoError:
        logger.exception(f"Database error in {operation.__name__}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database error")

def _rid(restaurant: dict) -> str:
    return str(restaurant["_id"])

@router.get("", response_model=MenuOut)
async def api_get_menu(restaurant: dict = Depends(get_owned_restaurant)):
    return await _call(menu_service.get_menu, _rid(restaurant))

# Whole-menu save, rejected with 409 when the stored version moved on
@router.put("", response_model=MenuOut)
async def api_save_menu(payload: MenuSave = Body(...), restaurant: dict = Depends(get_owned_restaurant),
                        current_user: CurrentUser = Depends(require_owner)):
    return await _call(menu_service.save_menu, _rid(restaurant), payload.sections, payload.version,
                       actor_email=current_user.email)

@router.post("/sections", response_model=MenuOut, status_code=status.HTTP_201_CREATED)
async def api_add_section(payload: MenuSectionCreate = Body(...), version: VersionParam = None,
                          restaurant: dict = Depends(get_owned_restaurant),
                          current_user: CurrentUser = Depends(require_owner)):
    return await _call(menu_service.add_section, _rid(restaurant), payload, version, actor_email=current_user.email)

@router.post("/sections/move", response_model=MenuOut)
async def api_move_section(payload: MoveRequest = Body(...), version: VersionParam = None,
                           restaurant: dict = Depends(get_owned_restaurant),
                           current_user: CurrentUser = Depends(require_owner)):
    return await _call(menu_service.move_section, _rid(restaurant), payload.from_index, payload.to_index, version,
                       actor_email=current_user.email)

@router.patch("/sections/{section_id}", response_model=MenuOut)
async def api_update_section(section_id: str, payload: MenuSectionUpdate = Body(...),
                             version: VersionParam = None,
                             restaurant: dict = Depends(get_owned_restaurant),
                             current_user: CurrentUser = Depends(require_owner)):
    return await _call(menu_service.update_section, _rid(restaurant), section_id, payload, version,
                       actor_email=current_user.email)

@router.delete("/sections/{section_id}", response_model=MenuOut)
async def api_delete_section(section_id: str, version: VersionParam = None,
                             restaurant: dict = Depends(get_owned_restaurant),
                             current_user: CurrentUser = Depends(require_owner)):
    return await _call(menu_service.delete_section, _rid(restaurant), section_id, version,
                       actor_email=current_user.email)

@router.post("/sections/{section_id}/items", response_model=MenuOut, status_code=status.HTTP_201_CREATED)
async def api_add_item(section_id: str, payload: MenuItemCreate = Body(...), version: VersionParam = None,
                       restaurant: dict = Depends(get_owned_restaurant),
                       current_user: CurrentUser = Depends(require_owner)):
    return await _call(menu_service.add_item, _rid(restaurant), section_id, payload, version,
                       actor_email=current_user.email)

@router.post("/sections/{section_id}/items/move", response_model=MenuOut)
async def api_move_item(section_id: str, payload: MoveRequest = Body(...), version: VersionParam = None,
                        restaurant: dict = Depends(get_owned_restaurant),
                        current_user: CurrentUser = Depends(require_owner)):
    return await _call(menu_service.move_item, _rid(restaurant), section_id, payload.from_index, payload.to_index,
                       version, actor_email=current_user.email)

@router.patch("/sections/{section_id}/items/{item_id}", response_model=MenuOut)
async def api_update_item(section_id: str, item_id: str, payload: MenuItemUpdate = Body(...),
                          version: VersionParam = None,
                          restaurant: dict = Depends(get_owned_restaurant),
                          current_user: CurrentUser = Depends(require_owner)):
    return await _call(menu_service.update_item, _rid(restaurant), section_id, item_id, payload, version,
                       actor_email=current_user.email)

@router.delete("/sections/{section_id}/items/{item_id}", response_model=MenuOut)
async def api_delete_item(section_id: str, item_id: str, version: VersionParam = None,
                          restaurant: dict = Depends(get_owned_restaurant),
                          current_user: CurrentUser = Depends(require_owner)):
    return await _call(menu_service.delete_item, _rid(restaurant), section_id, item_id, version,
                       actor_email=current_user.email)
