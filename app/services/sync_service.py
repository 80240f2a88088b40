import logging
import uuid
from contextlib import contextmanager
from dataclasses import asdict, dataclass

from app.clients.nango_client import get_nango_client
from app.core.errors import SyncFailure
from app.core.normalize import external_id_for, normalize_record
from app.db.unified_store import get_store
from app.services.data_types import get_model_for_provider, should_sync_data_type

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    provider: str
    connection_id: str
    synced: int = 0
    errors: int = 0


def sync_record(store, provider: str, connection_id: str, model: str, record: dict) -> bool:
    """Write one Nango record into the store. Returns True when something was written."""
    external_id = external_id_for(record)

    if (record.get("_nango_metadata") or {}).get("deleted_at"):
        # soft delete; the object stays in the store
        store.mark_deleted(provider, external_id)
        logger.info(f"🗑️ Marked as deleted: {provider}/{external_id}")
        return False

    existing = store.find(provider, external_id)
    normalized = normalize_record(
        provider, connection_id, record, model,
        record_id=existing["id"] if existing else None,
        external_id=external_id,
    )

    if not should_sync_data_type(store, provider, connection_id, normalized["type"]):
        logger.info(f"⏭️ Skipping {normalized['type']} - sync disabled for {provider}")
        return False

    if existing:
        if existing.get("content_hash") == normalized["content_hash"]:
            logger.debug(f"Skipping unchanged record: {provider}/{external_id}")
            return False
        normalized["canonical_url"] = existing["canonical_url"]
        store.update(provider, external_id, normalized)
        logger.info(f"✅ Updated record: {provider}/{external_id}")
        return True

    record_id = str(uuid.uuid4())
    normalized.update(id=record_id, canonical_url=f"/item/{record_id}")
    store.create(normalized)
    logger.info(f"✅ Created new record: {provider}/{external_id} -> {record_id}")
    return True


@contextmanager
def _nango_session(nango=None):
    """Yield ``nango`` as-is, or a fresh client that is closed on exit."""
    if nango is not None:
        yield nango
        return
    with get_nango_client() as client:
        yield client


def sync_integration(provider: str, connection_id: str, model: str, nango=None, store=None) -> SyncResult:
    store = store or get_store()
    result = SyncResult(provider=provider, connection_id=connection_id)

    with _nango_session(nango) as nango:
        try:
            logger.info(f"🔄 Syncing {provider} ({connection_id}) - model: {model}")
            records = nango.list_records(provider, connection_id, model)
            logger.info(f"📥 Found {len(records)} records for {provider}")
        except Exception as e:
            logger.error(f"❌ Failed to sync {provider}: {e}")
            result.errors += 1
            return result

    for record in records:
        try:
            if sync_record(store, provider, connection_id, model, record):
                result.synced += 1
        except Exception as e:
            logger.error(f"❌ Error syncing record {record.get('id')}: {e}")
            result.errors += 1

    logger.info(f"✅ Sync complete for {provider}: {result.synced} synced, {result.errors} errors")
    return result


def sync_all_connections(nango=None, store=None) -> list[dict]:
    """Sync every Nango connection that has a model mapping.

    Per-connection problems are reported in the returned results; only a
    failure to list the connections themselves raises ``SyncFailure``.
    A client created here is closed before returning.
    """
    with _nango_session(nango) as nango:
        store = store or get_store()

        try:
            connections = nango.list_connections()
        except Exception as e:
            logger.error(f"❌ Failed to list connections: {e}")
            raise SyncFailure(f"Failed to list connections: {e}") from e

        logger.info(f"📥 Found {len(connections)} total connections")

        results = []
        for connection in connections:
            provider = connection.get("provider_config_key")
            connection_id = connection.get("connection_id")
            model = get_model_for_provider(provider)

            if not model:
                logger.info(f"⚠️ Skipping {provider} - no model mapping configured")
                continue

            try:
                result = sync_integration(provider, connection_id, model, nango=nango, store=store)
            except Exception as e:
                logger.error(f"❌ Failed to sync {provider}: {e}")
                result = SyncResult(provider=provider, connection_id=connection_id, errors=1)
            results.append(asdict(result))

        return results
