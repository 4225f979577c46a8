"""
Pytest configuration shared by every __tests__ directory.

- Loads .env.local / .env like the app does, then fills in safe defaults
  so Settings() can be built without a real environment
- DATABASE_URL defaults to in-memory SQLite so importing fasttruck.main
  never touches a file database
"""
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).parent

env_local = ROOT_DIR / '.env.local'
env_file = ROOT_DIR / '.env'

if env_local.exists():
    load_dotenv(env_local)
elif env_file.exists():
    load_dotenv(env_file)

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("PREFERENCES_PATH", str(ROOT_DIR / ".pytest-preferences.json"))

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402


@pytest.fixture(scope="function")
def test_session_factory():
    """
    Session factory on a fresh in-memory SQLite database.

    StaticPool keeps a single connection so every session (and the
    TestClient's worker threads) sees the same database.
    """
    from fasttruck.db.session import init_db

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)

    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)

    engine.dispose()


@pytest.fixture(scope="function")
def sql_backend(test_session_factory):
    """SqlMarketplaceBackend bound to the in-memory database."""
    from fasttruck.marketplace.sql_backend import SqlMarketplaceBackend

    return SqlMarketplaceBackend(test_session_factory)


def _postal_payload(
    status: str = "Success",
    offices: list = None,
    message: str = "Number of pincode(s) found:1",
) -> list:
    """Body shaped like the India Post pincode API."""
    if offices is None:
        offices = [{"Name": "A", "District": "B", "State": "C", "Block": "Blk"}]
    return [{"Message": message, "Status": status, "PostOffice": offices}]


@pytest.fixture
def postal_payload():
    """Factory for bodies shaped like the India Post pincode API."""
    return _postal_payload


@pytest.fixture
def make_lookup_client():
    """
    Build a PostalLookupClient whose HTTP calls go to a handler function.

    Usage:
        client = make_lookup_client(lambda request: httpx.Response(200, json=[...]))
    """
    from fasttruck.pincode.lookup import PostalLookupClient

    def _make(handler):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return PostalLookupClient(base_url="https://postal.test/pincode", http_client=http_client)

    return _make
