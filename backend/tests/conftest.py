import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from realty.core.config import settings
from realty.core.database import create_db_engine, create_session_factory, init_db, Base
from realty.main import create_app
from realty.models import UserCreate, UserType, PropertyCreate
from realty.modules.storage import MemoryStorage, DatabaseStorage
from realty.modules.seed import seed_sample_data

# Use in-memory SQLite for tests; create_db_engine shares one connection
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def test_engine():
    """Create a test database engine with every table created"""
    engine = create_db_engine(TEST_DATABASE_URL)
    init_db(engine)
    try:
        yield engine
    finally:
        # Drop all tables after test
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def memory_storage():
    return MemoryStorage()


@pytest.fixture(scope="function")
def database_storage(test_engine):
    return DatabaseStorage(create_session_factory(test_engine))


@pytest.fixture(params=["memory", "database"])
def storage(request):
    """Run the test once against each storage backend"""
    if request.param == "memory":
        return MemoryStorage()
    return request.getfixturevalue("database_storage")


@pytest_asyncio.fixture
async def seeded_storage(storage):
    """Storage loaded with the sample data set"""
    await seed_sample_data(storage)
    return storage


@pytest.fixture
def landlord_data():
    return UserCreate(
        username="landlord",
        password="secret",
        email="landlord@example.com",
        full_name="Lydia Landlord",
        user_type=UserType.LANDLORD_AND_SELL,
    )


@pytest.fixture
def renter_data():
    return UserCreate(
        username="renter",
        password="secret",
        email="renter@example.com",
        full_name="Robert Renter",
    )


def make_property(owner_id: int, **overrides) -> PropertyCreate:
    """Build a valid listing with sensible defaults"""
    fields = dict(
        owner_id=owner_id,
        title="Garden Cottage",
        description="Two bedroom cottage with a large garden",
        price=250000,
        location="Roma, Lusaka",
        city="Lusaka",
        state="Lusaka Province",
        bedrooms=2,
        bathrooms=1,
        square_feet=900,
        property_type="Cottage",
        image_url="https://example.com/cottage.jpg",
    )
    fields.update(overrides)
    return PropertyCreate(**fields)


@pytest.fixture
def property_factory():
    return make_property


@pytest.fixture
def client(monkeypatch):
    """Test client over an app whose startup builds a seeded in-memory store"""
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "memory")
    monkeypatch.setattr(settings, "SEED_SAMPLE_DATA", True)
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_storage(client):
    """The storage the app under test is using"""
    return client.app.state.storage
