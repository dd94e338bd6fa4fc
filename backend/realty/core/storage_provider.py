"""
Builds the storage backend selected in settings and exposes it to routers.
"""
from typing import Optional
from fastapi import Request
from realty.core.config import Settings, settings as default_settings
from realty.core.database import create_db_engine, create_session_factory, init_db
from realty.modules.storage import Storage, MemoryStorage, DatabaseStorage
from realty.modules.seed import seed_sample_data, seed_if_empty
import logging

logger = logging.getLogger(__name__)

MEMORY_BACKEND = "memory"
DATABASE_BACKEND = "database"


class UnknownStorageBackendError(ValueError):
    """STORAGE_BACKEND names a backend that does not exist"""


def create_storage(config: Optional[Settings] = None) -> Storage:
    """Construct (but do not seed) the configured backend"""
    config = config or default_settings
    backend = config.STORAGE_BACKEND.lower()

    if backend == MEMORY_BACKEND:
        return MemoryStorage()

    if backend == DATABASE_BACKEND:
        engine = create_db_engine(config.DATABASE_URL, echo=config.DATABASE_ECHO)
        init_db(engine)
        return DatabaseStorage(create_session_factory(engine))

    raise UnknownStorageBackendError(
        f"Unknown storage backend '{config.STORAGE_BACKEND}', "
        f"expected '{MEMORY_BACKEND}' or '{DATABASE_BACKEND}'"
    )


async def init_storage(config: Optional[Settings] = None) -> Storage:
    """Construct the configured backend and load sample data once"""
    config = config or default_settings
    storage = create_storage(config)

    if config.SEED_SAMPLE_DATA:
        if isinstance(storage, MemoryStorage):
            # A new in-memory store is always empty
            await seed_sample_data(storage)
        else:
            await seed_if_empty(storage)

    logger.info(f"Storage initialized with {type(storage).__name__}")
    return storage


def get_storage(request: Request) -> Storage:
    """FastAPI dependency returning the storage owned by the application"""
    return request.app.state.storage
