import hashlib
import json
import logging
import uuid

from app.core.mappers import MAPPERS

logger = logging.getLogger(__name__)


def external_id_for(record: dict) -> str:
    return str(record.get("id") or record.get("externalId") or uuid.uuid4())


def content_hash(record: dict) -> str:
    raw = json.dumps(record, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


def normalize_record(provider: str, connection_id: str, record: dict, model: str,
                     record_id: str | None = None, external_id: str | None = None) -> dict:
    """Map a raw Nango record onto the unified object shape.

    ``record_id`` is the id of the stored unified object, when there is one;
    without it the canonical URL is a temporary one keyed on the external id.
    Pass ``external_id`` when the caller already derived one, so a record
    without an id keeps the same generated id for lookup and storage.
    """
    external_id = external_id or external_id_for(record)
    canonical_url = f"/item/{record_id}" if record_id else f"/item/temp-{external_id}"

    mapper = MAPPERS.get(provider)
    if mapper is None:
        logger.warning(f"⚠️ No mapper found for provider: {provider}, using fallback")
        normalized = {
            "type": model.lower(),
            "title": record.get("name") or record.get("title") or "Untitled",
            "description": record.get("description") or None,
            "source_url": record.get("url") or None,
            "mime_type": None,
            "metadata_normalized": {},
        }
    else:
        normalized = mapper(record)

    return {
        "provider": provider,
        "connection_id": connection_id,
        "external_id": external_id,
        **normalized,
        "metadata_raw": record,
        "canonical_url": canonical_url,
        "content_hash": content_hash(record),
        "state": "active",
    }
