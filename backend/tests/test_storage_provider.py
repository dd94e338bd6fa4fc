import pytest
from realty.core.config import Settings
from realty.core.storage_provider import (
    create_storage, init_storage, UnknownStorageBackendError
)
from realty.modules.storage import MemoryStorage, DatabaseStorage


class TestStorageProvider:
    """Test suite for building the configured storage backend"""

    def test_memory_backend(self):
        storage = create_storage(Settings(STORAGE_BACKEND="memory"))
        assert isinstance(storage, MemoryStorage)

    def test_database_backend(self):
        storage = create_storage(Settings(STORAGE_BACKEND="Database", DATABASE_URL="sqlite:///:memory:"))
        assert isinstance(storage, DatabaseStorage)

    def test_unknown_backend(self):
        with pytest.raises(UnknownStorageBackendError):
            create_storage(Settings(STORAGE_BACKEND="redis"))

    @pytest.mark.asyncio
    async def test_init_storage_seeds_memory(self):
        storage = await init_storage(Settings(STORAGE_BACKEND="memory", SEED_SAMPLE_DATA=True))
        assert len(await storage.get_all_properties()) == 6

    @pytest.mark.asyncio
    async def test_init_storage_without_seeding(self):
        storage = await init_storage(Settings(STORAGE_BACKEND="memory", SEED_SAMPLE_DATA=False))
        assert await storage.get_all_properties() == []

    @pytest.mark.asyncio
    async def test_database_is_seeded_once(self, tmp_path):
        """Restarting against the same database does not duplicate the sample data"""
        config = Settings(
            STORAGE_BACKEND="database",
            DATABASE_URL=f"sqlite:///{tmp_path / 'realty.db'}",
            SEED_SAMPLE_DATA=True,
        )

        first = await init_storage(config)
        second = await init_storage(config)

        assert len(await first.get_all_properties()) == 6
        assert len(await second.get_all_properties()) == 6
        assert len(await second.get_all_agents()) == 4
