"""Tests for the SQLAlchemy document repository against in-memory SQLite."""
import pytest
import pytest_asyncio
from sqlalchemy import Text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.documents.repository import DocumentRepository
from app.models.models import Base, Document
from app.schemas.schemas import DocumentAnalysisUpdate, DocumentCreate


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def db_repository(session) -> DocumentRepository:
    return DocumentRepository(session)


def new_document(**overrides) -> DocumentCreate:
    data = {
        "original_name": "test.pdf",
        "mime_type": "application/pdf",
        "size": 1024,
        "s3_key": "6f1c2a52-0000-4000-8000-000000000000-test.pdf",
        "extracted_text": "Invoice #42",
    }
    data.update(overrides)
    return DocumentCreate(**data)


async def test_create_assigns_id_and_timestamps(db_repository):
    document = await db_repository.create(new_document())

    assert len(document.id) == 36
    assert document.created_at is not None
    assert document.updated_at is not None
    assert document.summary is None
    assert document.doc_type is None
    assert document.metadata_text is None


async def test_get_by_id(db_repository):
    created = await db_repository.create(new_document())

    fetched = await db_repository.get_by_id(created.id)

    assert fetched is not None
    assert fetched.original_name == "test.pdf"
    assert fetched.extracted_text == "Invoice #42"


async def test_get_by_id_missing(db_repository):
    assert await db_repository.get_by_id("missing") is None


async def test_create_without_text(db_repository):
    document = await db_repository.create(new_document(extracted_text=None))

    assert document.extracted_text is None


async def test_update_analysis_fields(db_repository):
    created = await db_repository.create(new_document())

    updated = await db_repository.update(
        created.id,
        DocumentAnalysisUpdate(summary="An invoice.", doc_type="invoice", metadata_text='{"sender": "Acme"}'),
    )

    assert updated.summary == "An invoice."
    assert updated.doc_type == "invoice"
    assert updated.metadata_text == '{"sender": "Acme"}'
    assert updated.original_name == "test.pdf"

    fetched = await db_repository.get_by_id(created.id)
    assert fetched.doc_type == "invoice"


async def test_update_missing_returns_none(db_repository):
    result = await db_repository.update(
        "missing", DocumentAnalysisUpdate(summary="s", doc_type="letter", metadata_text="{}")
    )

    assert result is None


async def test_long_values_round_trip(db_repository):
    long_name = "a" * 300 + ".pdf"
    created = await db_repository.create(
        new_document(original_name=long_name, s3_key=f"6f1c2a52-0000-4000-8000-000000000000-{long_name}")
    )

    await db_repository.update(
        created.id, DocumentAnalysisUpdate(summary="s", doc_type="t" * 150, metadata_text="{}")
    )

    fetched = await db_repository.get_by_id(created.id)
    assert fetched.original_name == long_name
    assert fetched.doc_type == "t" * 150


@pytest.mark.parametrize("column", ["original_name", "s3_key", "doc_type"])
def test_free_text_columns_are_unbounded(column):
    assert isinstance(Document.__table__.c[column].type, Text)


async def test_duplicate_key_rejected(db_repository):
    await db_repository.create(new_document())

    with pytest.raises(IntegrityError):
        await db_repository.create(new_document(original_name="other.pdf"))

    # 回滚后会话仍可用
    assert await db_repository.get_by_id("missing") is None
