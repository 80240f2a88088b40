import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

from app.api.dependencies import get_unified_store
from app.services.data_types import PROVIDER_DATA_TYPES, get_default_sync_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class SyncConfigUpdate(BaseModel):
    provider: str | None = None
    sync_config: dict | None = None


@router.get("/providers/data-types")
def get_provider_data_types():
    return {"providers": list(PROVIDER_DATA_TYPES.values())}


@router.get("/connections/{connection_id}/sync-config")
def get_sync_config(connection_id: str, provider: str | None = None, store=Depends(get_unified_store)):
    if not provider:
        raise HTTPException(status_code=400, detail="Provider query parameter is required")

    provider_info = PROVIDER_DATA_TYPES.get(provider)
    if not provider_info:
        raise HTTPException(status_code=404, detail="Provider not found")

    try:
        existing = store.get_sync_config(connection_id, provider)
    except Exception as e:
        logger.error(f"❌ Error fetching sync config: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch sync configuration") from e

    sync_config = get_default_sync_config(provider)
    if existing and existing.get("sync_config"):
        sync_config.update(existing["sync_config"])

    return jsonable_encoder({
        "connection_id": connection_id,
        "provider": provider,
        "provider_display_name": provider_info["display_name"],
        "sync_config": sync_config,
        "updated_at": existing.get("updated_at") if existing else None,
    })


@router.put("/connections/{connection_id}/sync-config")
def update_sync_config(connection_id: str, body: SyncConfigUpdate, store=Depends(get_unified_store)):
    if not body.provider or body.sync_config is None:
        raise HTTPException(status_code=400, detail="Provider and sync_config are required")

    try:
        updated = store.upsert_sync_config(connection_id, body.provider, body.sync_config)
    except Exception as e:
        logger.error(f"❌ Error updating sync config: {e}")
        raise HTTPException(status_code=500, detail="Failed to update sync configuration") from e

    return jsonable_encoder({
        "success": True,
        "connection_id": updated["connection_id"],
        "provider": updated["provider"],
        "sync_config": updated["sync_config"],
        "updated_at": updated.get("updated_at"),
    })
