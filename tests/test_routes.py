"""Tests for the HTTP surface."""
import pytest

from conftest import DOCX_MIME, PDF_MIME


def upload(client, filename="test.pdf", content=b"0" * 1024, content_type=PDF_MIME):
    return client.post("/documents/upload", files={"file": (filename, content, content_type)})


class TestUploadRoute:

    def test_upload_pdf(self, client):
        response = upload(client)

        assert response.status_code == 201
        data = response.json()
        assert data["originalName"] == "test.pdf"
        assert data["mimeType"] == "application/pdf"
        assert data["size"] == 1024
        assert set(data) == {"id", "originalName", "mimeType", "size", "createdAt"}

    def test_upload_then_get_file_info(self, client):
        document_id = upload(client).json()["id"]

        response = client.get(f"/documents/{document_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["fileInfo"]["id"] == document_id
        assert data["fileInfo"]["originalName"] == "test.pdf"
        assert data["fileInfo"]["mimeType"] == "application/pdf"
        assert data["fileInfo"]["size"] == 1024
        assert set(data["fileInfo"]) == {
            "id", "originalName", "mimeType", "size", "s3Key", "createdAt", "updatedAt",
        }
        assert data["text"] == "Extracted document text"
        assert data["summary"] is None
        assert data["docType"] is None
        assert data["metadata"] is None

    def test_upload_docx(self, client):
        response = upload(client, filename="report.docx", content_type=DOCX_MIME)

        assert response.status_code == 201
        assert response.json()["mimeType"] == DOCX_MIME

    def test_upload_too_large(self, client):
        response = upload(client, content=b"0" * (6 * 1024 * 1024))

        assert response.status_code == 400
        assert "File size must not exceed 5MB" in response.json()["detail"]

    def test_upload_jpeg_rejected(self, client):
        response = upload(client, filename="photo.jpg", content=b"\xff\xd8\xff" + b"0" * 100, content_type="image/jpeg")

        assert response.status_code == 400
        assert "Only PDF and DOCX" in response.json()["detail"]

    def test_upload_without_file(self, client):
        response = client.post("/documents/upload")

        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    @pytest.mark.parametrize("value", ["not-a-file", ""])
    def test_upload_with_text_field_instead_of_file(self, client, storage, value):
        response = client.post("/documents/upload", data={"file": value})

        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"
        assert storage.objects == {}

    def test_upload_storage_failure(self, client, storage):
        storage.fail_upload = RuntimeError("bucket unreachable")

        response = upload(client)

        assert response.status_code == 400
        assert response.json()["detail"] == "Upload failed: bucket unreachable"


class TestAnalyzeRoute:

    def test_analyze(self, client, analyzer):
        document_id = upload(client).json()["id"]

        response = client.post(f"/documents/{document_id}/analyze")

        assert response.status_code == 200
        assert response.json() == {
            "id": document_id,
            "summary": analyzer.result.summary,
            "docType": "invoice",
            "attributes": {"sender": "Acme Corp", "totalAmount": "120.00 EUR"},
        }

    def test_analyze_not_found(self, client, analyzer):
        response = client.post("/documents/non-existent-id/analyze")

        assert response.status_code == 404
        assert response.json()["detail"] == "Document not found"
        assert analyzer.calls == []

    def test_analyze_without_text(self, client, text_extractor, analyzer):
        text_extractor.text = None
        document_id = upload(client).json()["id"]

        response = client.post(f"/documents/{document_id}/analyze")

        assert response.status_code == 400
        assert "No extracted text" in response.json()["detail"]
        assert analyzer.calls == []

    def test_analyze_failure(self, client, analyzer):
        analyzer.error = RuntimeError("API error")
        document_id = upload(client).json()["id"]

        response = client.post(f"/documents/{document_id}/analyze")

        assert response.status_code == 400
        assert response.json()["detail"] == "Analysis failed: API error"


class TestGetRoute:

    def test_get_not_found(self, client):
        response = client.get("/documents/non-existent-id")

        assert response.status_code == 404
        assert response.json()["detail"] == "Document not found"

    def test_upload_analyze_get_flow(self, client, analyzer):
        document_id = upload(client).json()["id"]
        analyzed = client.post(f"/documents/{document_id}/analyze").json()

        data = client.get(f"/documents/{document_id}").json()

        assert data["summary"] == analyzed["summary"]
        assert data["docType"] == analyzed["docType"]
        assert data["metadata"] == analyzed["attributes"]


class TestDownloadRoute:

    def test_download(self, client):
        content = b"%PDF-1.4 test content"
        document_id = upload(client, filename="Jahresbericht 2024.pdf", content=content).json()["id"]

        response = client.get(f"/documents/{document_id}/download")

        assert response.status_code == 200
        assert response.content == content
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"] == (
            "attachment; filename*=UTF-8''Jahresbericht%202024.pdf"
        )

    def test_download_not_found(self, client):
        response = client.get("/documents/missing/download")

        assert response.status_code == 404


@pytest.mark.parametrize("path", ["/health"])
def test_health(client, path):
    response = client.get(path)

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
