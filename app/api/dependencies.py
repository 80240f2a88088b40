import logging

from app.db.unified_store import get_store
from app.services.sync_service import sync_all_connections


def get_sync_all():
    return sync_all_connections


def get_diagnostic_logger():
    return logging.getLogger("app.api.sync")


def get_unified_store():
    return get_store()
