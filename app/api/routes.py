from fastapi import APIRouter, Depends

from app.api.dependencies import get_diagnostic_logger, get_sync_all
from app.api.envelopes import Err, run_sync, to_response
from app.core.errors import format_failure

router = APIRouter()


@router.post("/sync-all")
def sync_all_endpoint(sync=Depends(get_sync_all), log=Depends(get_diagnostic_logger)):
    log.info("🔄 Starting sync of all integrations...")
    outcome = run_sync(sync)
    if isinstance(outcome, Err):
        log.error(f"❌ Sync failed: {format_failure(outcome.failure)}")
    return to_response(outcome)
