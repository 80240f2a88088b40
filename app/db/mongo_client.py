from functools import lru_cache

from pymongo import ASCENDING, MongoClient

from app.core import config

UNIFIED_OBJECTS = "unified_objects"
SYNC_CONFIGS = "connection_sync_configs"


@lru_cache(maxsize=1)
def get_mongo_connection():
    client = MongoClient(config.MONGO_URI, tz_aware=True)
    db = client[config.MONGO_DB]
    ensure_indexes(db)
    return db


def ensure_indexes(db):
    db[UNIFIED_OBJECTS].create_index(
        [("provider", ASCENDING), ("external_id", ASCENDING)], unique=True
    )
    db[SYNC_CONFIGS].create_index(
        [("connection_id", ASCENDING), ("provider", ASCENDING)], unique=True
    )
