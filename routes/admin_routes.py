# routes/admin_routes.py
from fastapi import APIRouter, Depends, HTTPException, status, Query, Path, Body
from pymongo.errors import PyMongoError
from core.authorization import require_admin
from core.dependencies import CurrentUser
from models.admin import AuditItem, ModerationPayload
from models.menu import MenuOut, MenuSave
from models.restaurant import RestaurantListItem, RestaurantOut, RestaurantUpdate
from services.admin_service import list_restaurants, block_restaurant, unblock_restaurant
from services.audit_service import list_audit_logs
from services.menu_service import save_menu
from services.restaurant_service import get_restaurant_by_id, update_restaurant
from utils.logger import get_logger
from typing import List

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])
logger = get_logger("Admin_Route")

def _database_error(where: str) -> HTTPException:
    logger.exception(f"Error in {where}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database error")

@router.get("/restaurants", response_model=List[RestaurantListItem])
async def api_list_restaurants(is_blocked: bool | None = Query(None), is_public: bool | None = Query(None),
                               skip: int = Query(0, ge=0), limit: int = Query(50, ge=1, le=200)):
    """
    List restaurants (admin only). Pagination supported via skip & limit.
    """
    try:
        return await list_restaurants(is_blocked=is_blocked, is_public=is_public, skip=skip, limit=limit)
    except PyMongoError:
        raise _database_error("api_list_restaurants")

@router.get("/restaurants/{restaurant_id}", response_model=RestaurantOut)
async def api_get_restaurant(restaurant_id: str = Path(..., description="Restaurant ObjectId string")):
    try:
        restaurant = await get_restaurant_by_id(restaurant_id)
    except PyMongoError:
        raise _database_error("api_get_restaurant")
    if not restaurant:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Restaurant not found")
    return restaurant

@router.patch("/restaurants/{restaurant_id}", response_model=RestaurantOut)
async def api_edit_restaurant(restaurant_id: str, payload: RestaurantUpdate = Body(...),
                              current_admin: CurrentUser = Depends(require_admin)):
    try:
        return await update_restaurant(restaurant_id, payload, actor_email=current_admin.email)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PyMongoError:
        raise _database_error("api_edit_restaurant")

@router.put("/restaurants/{restaurant_id}/menu", response_model=MenuOut)
async def api_save_menu(restaurant_id: str, payload: MenuSave = Body(...),
                        current_admin: CurrentUser = Depends(require_admin)):
    try:
        restaurant = await get_restaurant_by_id(restaurant_id)
        if not restaurant:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Restaurant not found")
        return await save_menu(restaurant_id, payload.sections, payload.version,
                               actor_email=current_admin.email, action="admin_save_menu")
    except PyMongoError:
        raise _database_error("api_save_menu")

@router.post("/restaurants/{restaurant_id}/block", response_model=RestaurantOut)
async def api_block_restaurant(restaurant_id: str, payload: ModerationPayload | None = Body(None),
                               current_admin: CurrentUser = Depends(require_admin)):
    try:
        return await block_restaurant(restaurant_id, current_admin.email, payload.reason if payload else None)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PyMongoError:
        raise _database_error("api_block_restaurant")

@router.post("/restaurants/{restaurant_id}/unblock", response_model=RestaurantOut)
async def api_unblock_restaurant(restaurant_id: str, payload: ModerationPayload | None = Body(None),
                                 current_admin: CurrentUser = Depends(require_admin)):
    try:
        return await unblock_restaurant(restaurant_id, current_admin.email, payload.reason if payload else None)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PyMongoError:
        raise _database_error("api_unblock_restaurant")

@router.get("/audit-logs", response_model=list[AuditItem])
async def api_audit_logs(skip: int = Query(0, ge=0), limit: int = Query(50, ge=1, le=200),
                         restaurant_id: str | None = Query(None)):
    try:
        return await list_audit_logs(skip=skip, limit=limit, resource_id=restaurant_id)
    except PyMongoError:
        raise _database_error("api_audit_logs")
