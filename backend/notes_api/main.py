import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from notes_api.api import notes
from notes_api.api.responses import failure
from notes_api.config import Settings, load_settings
from notes_api.log_config import setup_logging
from notes_api.storage.gateway import StorageGateway
from notes_api.storage.memory_table import InMemoryNotesTable
from notes_api.storage.notes_table import FileNotesTable

logger = logging.getLogger(__name__)


def build_gateway(settings: Settings) -> StorageGateway:
    if settings.storage == "memory":
        table = InMemoryNotesTable()
    else:
        table = FileNotesTable(settings.data_dir, max_workers=settings.storage_max_workers)
    logger.info("Using %s storage for table %s", settings.storage, settings.table_name)
    return StorageGateway(table, table_name=settings.table_name)


def create_app(gateway: Optional[StorageGateway] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    owns_gateway = gateway is None
    if gateway is None:
        gateway = build_gateway(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # a gateway handed in by the caller stays open
        if owns_gateway:
            app.state.gateway.close()

    app = FastAPI(title="Notes API", lifespan=lifespan)
    app.state.gateway = gateway

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return notes.to_response(failure({"status": False}))

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(notes.router)
    return app
