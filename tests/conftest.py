"""
Configuração do pytest: banco SQLite temporário e fixtures compartilhadas
"""
import os
import tempfile
from pathlib import Path

# Precisa vir antes de importar config/database/main
_TEST_DB = Path(tempfile.mkdtemp()) / "test_employers.db"
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB}"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from database import SessionLocal, build_engine, get_db  # noqa: E402
from main import app  # noqa: E402
from schemas.employers import Employer  # noqa: E402
from services.employer_repository import EmployerRepository  # noqa: E402
from services.employer_store import EmployerStore  # noqa: E402


@pytest.fixture
def db_session():
    db = SessionLocal()
    yield db
    db.close()


@pytest.fixture
def store(db_session) -> EmployerStore:
    """Store com a tabela criada e vazia antes de cada teste."""
    store = EmployerStore(db_session)
    store.ensure_schema()
    store.clear_all()
    return store


@pytest.fixture
def repo(db_session, store) -> EmployerRepository:
    return EmployerRepository(db_session)


@pytest.fixture
def client(store):
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unreachable_db(tmp_path):
    """Sessão apontando para um arquivo SQLite que não pode ser aberto."""
    bad_engine = build_engine(f"sqlite:///{tmp_path / 'missing' / 'employers.db'}")
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=bad_engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()
    bad_engine.dispose()


@pytest.fixture
def four_employers():
    return [
        Employer(name="Salesforce", sector="Tech",
                 summary="An American cloud-based software company focused on customer relationship management services!"),
        Employer(name="Sonos", sector="Tech",
                 summary="Sonos is a developer and manufacturer of audio products best known for its multi-room audio products!"),
        Employer(name="Fedex", sector="Transportation/E-Commerce",
                 summary="An American multinational conglomerate holding company which focuses on transportation, e-commerce and business services!"),
        Employer(name="First Solar", sector="Energy",
                 summary="A leading global provider of comprehensive PV solar solutions!"),
    ]


@pytest.fixture
def two_employers():
    return [
        Employer(name="John", sector="Tech", summary="First"),
        Employer(name="Jack", sector="Tech", summary="Second"),
    ]
