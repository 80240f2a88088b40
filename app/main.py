import logging

from fastapi import FastAPI

from app.api.routes import router
from app.api.sync_config import router as sync_config_router
from app.core import config

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Integration Sync")
app.include_router(router)
app.include_router(sync_config_router)


@app.get("/")
def root():
    return {"root": True}
