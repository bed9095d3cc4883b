from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, DESCENDING
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("DB_OPERATION")

async def create_indexes():
    restaurants = mongo_conn.restaurants_collection
    await restaurants.create_index("owner_id", unique=True)
    await restaurants.create_index("slug", unique=True)
    await restaurants.create_index("is_blocked")
    await restaurants.create_index("is_public")
    await mongo_conn.audit_logs.create_index([("timestamp", DESCENDING)])
    await mongo_conn.audit_logs.create_index([("resource_id", ASCENDING)])
    logger.info("Indexes created")

class MongoConnection:
    def __init__(self, client=None):
        logger.info("Initializing MongoDB Connection")
        self.bind(client or AsyncIOMotorClient(settings.MONGO_URI))

    def bind(self, client):
        """Point every collection handle at the given client (tests pass a mock client here)."""
        self.client = client
        self.db = self.client[settings.DB_NAME]
        self.restaurants_collection = self.db["restaurants"]
        self.audit_logs = self.db["audit_logs"]

# Create the instance
mongo_conn = MongoConnection()
