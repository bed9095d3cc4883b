from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from settings.config import settings
from db.db_operation import create_indexes
from core.exceptions import global_exception_handler
from utils.logger import get_logger
from routes import restaurant_routes, menu_routes, theme_routes, public_routes, admin_routes

logger = get_logger("main")

app = FastAPI(title="Restaurant Menu Publisher API", version="1.0.0")

# the public menu page and the editor are served from another origin; auth is a bearer header
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"]
)

@app.get("/")
async def health_check():
    logger.info("Health check is successful")
    return {
        "status": "ok",
        "app": settings.PROJECT_NAME,
        "message": "FastAPI is running"
    }

@app.on_event("startup")
async def startup_event():
    await create_indexes()

app.add_exception_handler(Exception, global_exception_handler)
app.include_router(restaurant_routes.router)
app.include_router(menu_routes.router)
app.include_router(theme_routes.router)
app.include_router(public_routes.router)
app.include_router(admin_routes.router)
