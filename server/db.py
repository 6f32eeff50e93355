from typing import Callable
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from dotenv import load_dotenv
from database.BASE import BaseDatabaseOperation
import logging
import os
import certifi

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

mongodb_client = None
db = None
DB_URL = os.environ.get("DB_URL", "mongodb://localhost:27017")
DB_NAME = os.environ.get("DB_NAME", "contact")
DB_TLS = os.environ.get("DB_TLS", "false").lower() == "true"


async def connect_to_mongo():
    global mongodb_client, db
    options = {
        "maxPoolSize": 100,
        "minPoolSize": 5,
        "maxIdleTimeMS": 60000,
        "tz_aware": True,
        "serverSelectionTimeoutMS": 5000,
    }
    if DB_TLS:
        options["tlsCAFile"] = certifi.where()

    mongodb_client = AsyncIOMotorClient(DB_URL, **options)
    db = mongodb_client[DB_NAME]

    # the client connects lazily; a failed ping is logged and requests
    # keep being served until the server is reachable again
    try:
        await mongodb_client.admin.command("ping")
        logger.info("Connected to MongoDB")
    except PyMongoError as e:
        logger.error(f"MongoDB connection error: {e}")


async def close_mongo_connection():
    global mongodb_client, db
    if mongodb_client is not None:
        mongodb_client.close()
        logger.info("Closed MongoDB connection")
    mongodb_client = None
    db = None


def get_database():
    return db


def get_db_ops(class_type: type[BaseDatabaseOperation]) -> Callable:
    def dependency():
        db = get_database()
        return class_type(db)

    return dependency
