"""Shared test fixtures."""
import os

# 必须在导入 app 之前设置
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("OPENROUTER_API_KEY", "test-key")

import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.core.exceptions import TextExtractionError
from app.documents.dependencies import get_document_service
from app.documents.ports import (
    AnalyzerPort,
    DocumentRepositoryPort,
    StoragePort,
    TextExtractorPort,
)
from app.documents.service import DocumentService
from app.models.models import Document
from app.schemas.schemas import (
    AnalysisResult,
    DocumentAnalysisUpdate,
    DocumentCreate,
    IncomingFile,
    StoredObject,
)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class InMemoryStorage(StoragePort):
    def __init__(self):
        self.objects: dict[str, bytes] = {}
        self.fail_upload: Exception | None = None

    async def upload_file(self, file: IncomingFile) -> StoredObject:
        if self.fail_upload:
            raise self.fail_upload
        key = f"{uuid.uuid4()}-{file.filename}"
        self.objects[key] = file.content
        return StoredObject(key=key, url=f"http://storage.test/documents/{key}")

    async def get_file(self, key: str) -> bytes:
        return self.objects[key]

    async def delete_file(self, key: str) -> None:
        del self.objects[key]


class FakeTextExtractor(TextExtractorPort):
    def __init__(self, text: str | None = "Extracted document text"):
        self.text = text
        self.calls: list[tuple[bytes, str]] = []
        self.fail = False

    async def extract_text(self, content: bytes, mime_type: str) -> str:
        self.calls.append((content, mime_type))
        if self.fail:
            raise TextExtractionError("Failed to extract text from PDF: broken file")
        return self.text


class FakeAnalyzer(AnalyzerPort):
    def __init__(self):
        self.calls: list[str] = []
        self.result = AnalysisResult(
            summary="An invoice from Acme Corp for March services.",
            doc_type="invoice",
            attributes={"sender": "Acme Corp", "totalAmount": "120.00 EUR"},
        )
        self.error: Exception | None = None

    async def analyze_document(self, text: str) -> AnalysisResult:
        self.calls.append(text)
        if self.error:
            raise self.error
        return self.result


class InMemoryDocumentRepository(DocumentRepositoryPort):
    def __init__(self):
        self.rows: dict[str, Document] = {}

    async def create(self, data: DocumentCreate) -> Document:
        now = datetime.now(timezone.utc)
        document = Document(
            id=str(uuid.uuid4()),
            original_name=data.original_name,
            mime_type=data.mime_type,
            size=data.size,
            s3_key=data.s3_key,
            extracted_text=data.extracted_text,
            created_at=now,
            updated_at=now,
        )
        self.rows[document.id] = document
        return document

    async def get_by_id(self, document_id: str) -> Document | None:
        return self.rows.get(document_id)

    async def update(self, document_id: str, data: DocumentAnalysisUpdate) -> Document | None:
        document = self.rows.get(document_id)
        if document is None:
            return None
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(document, key, value)
        document.updated_at = datetime.now(timezone.utc)
        return document


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def text_extractor() -> FakeTextExtractor:
    return FakeTextExtractor()


@pytest.fixture
def analyzer() -> FakeAnalyzer:
    return FakeAnalyzer()


@pytest.fixture
def repository() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture
def service(repository, storage, text_extractor, analyzer) -> DocumentService:
    return DocumentService(repository, storage, text_extractor, analyzer)


@pytest.fixture
def pdf_file() -> IncomingFile:
    return IncomingFile(
        filename="test.pdf",
        content_type=PDF_MIME,
        size=1024,
        content=b"%PDF" + b"0" * 1020,
    )


@pytest.fixture
def client(service):
    from app.main import app

    app.dependency_overrides[get_document_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
