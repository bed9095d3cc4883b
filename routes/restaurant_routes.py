# routes/restaurant_routes.py
from fastapi import APIRouter, Depends, HTTPException, status, Body
from pymongo.errors import PyMongoError
from core.authorization import require_owner, get_owned_restaurant
from core.dependencies import CurrentUser
from models.restaurant import RestaurantCreate, RestaurantOut, RestaurantUpdate, DashboardStats
from services.restaurant_service import create_restaurant, update_restaurant, serialize_restaurant, dashboard_stats
from utils.logger import get_logger

logger = get_logger("Restaurant_Route")
router = APIRouter(prefix="/restaurants", tags=["Restaurants"])

# Owner: complete the restaurant profile (creates the restaurant)
@router.post("/me", response_model=RestaurantOut, status_code=status.HTTP_201_CREATED)
async def api_create_restaurant(payload: RestaurantCreate = Body(...), current_user: CurrentUser = Depends(require_owner)):
    logger.info(f"Profile completion requested by {current_user.id}")
    try:
        return await create_restaurant(current_user.id, current_user.email, payload)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PyMongoError:
        logger.exception("Database error creating restaurant")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database error")

# Owner: own restaurant with the full editor menu
@router.get("/me", response_model=RestaurantOut)
async def api_get_my_restaurant(restaurant: dict = Depends(get_owned_restaurant)):
    return serialize_restaurant(restaurant)

@router.patch("/me", response_model=RestaurantOut)
async def api_update_my_restaurant(payload: RestaurantUpdate = Body(...),
                                   restaurant: dict = Depends(get_owned_restaurant),
                                   current_user: CurrentUser = Depends(require_owner)):
    try:
        return await update_restaurant(str(restaurant["_id"]), payload, actor_email=current_user.email)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PyMongoError:
        logger.exception("Database error updating restaurant")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database error")

@router.get("/me/dashboard", response_model=DashboardStats)
async def api_dashboard(restaurant: dict = Depends(get_owned_restaurant)):
    return dashboard_stats(restaurant)
