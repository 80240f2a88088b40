from datetime import datetime, timezone

from pymongo import ReturnDocument

from app.db.mongo_client import SYNC_CONFIGS, UNIFIED_OBJECTS, get_mongo_connection


def _now():
    return datetime.now(timezone.utc)


class UnifiedObjectStore:
    """Unified objects and per-connection sync configuration, kept in MongoDB."""

    def __init__(self, db):
        self.objects = db[UNIFIED_OBJECTS]
        self.sync_configs = db[SYNC_CONFIGS]

    def find(self, provider: str, external_id: str) -> dict | None:
        return self.objects.find_one({"provider": provider, "external_id": external_id})

    def create(self, obj: dict) -> dict:
        now = _now()
        doc = {**obj, "created_at": now, "updated_at": now}
        self.objects.insert_one(doc)
        return doc

    def update(self, provider: str, external_id: str, fields: dict):
        self.objects.update_one(
            {"provider": provider, "external_id": external_id},
            {"$set": {**fields, "updated_at": _now()}},
        )

    def mark_deleted(self, provider: str, external_id: str) -> int:
        result = self.objects.update_many(
            {"provider": provider, "external_id": external_id},
            {"$set": {"state": "deleted", "updated_at": _now()}},
        )
        return result.modified_count

    def get_sync_config(self, connection_id: str, provider: str) -> dict | None:
        return self.sync_configs.find_one(
            {"connection_id": connection_id, "provider": provider}, {"_id": 0}
        )

    def upsert_sync_config(self, connection_id: str, provider: str, sync_config: dict) -> dict:
        return self.sync_configs.find_one_and_update(
            {"connection_id": connection_id, "provider": provider},
            {
                "$set": {"sync_config": sync_config, "updated_at": _now()},
                "$setOnInsert": {"connection_id": connection_id, "provider": provider},
            },
            upsert=True,
            projection={"_id": 0},
            return_document=ReturnDocument.AFTER,
        )


def get_store() -> UnifiedObjectStore:
    return UnifiedObjectStore(get_mongo_connection())
