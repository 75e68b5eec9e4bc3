from fastapi import status
from fastapi.testclient import TestClient

from musicare.services.content_codec import encode_data_url

TEST_FILE_CONTENT = b"Hello, world!"
TEST_PDF_CONTENT = b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\ntrailer\n<</Root 1 0 R>>\n%%EOF"
MAX_FILE_SIZE = 5 * 1024 * 1024


def upload(client: TestClient, name="notes.txt", section="docs", data=TEST_FILE_CONTENT, type="text/plain", **overrides):
    body = {
        "name": name,
        "type": type,
        "size": len(data),
        "content": encode_data_url(data, type),
        "section": section,
    }
    body.update(overrides)
    return client.post("/api/files", json=body)


def test_list_starts_empty(client: TestClient):
    response = client.get("/api/files")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"files": []}
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["content-type"].startswith("application/json")


def test_upload_returns_camel_case_record(client: TestClient):
    response = upload(client)

    assert response.status_code == status.HTTP_201_CREATED
    file = response.json()["file"]
    assert set(file) == {"id", "name", "type", "size", "content", "section", "createdAt"}
    assert file["name"] == "notes.txt"
    assert file["size"] == len(TEST_FILE_CONTENT)
    assert file["content"] == encode_data_url(TEST_FILE_CONTENT, "text/plain")


def test_uploads_are_listed_newest_first(client: TestClient):
    first = upload(client, name="first.txt").json()["file"]
    second = upload(client, name="second.pdf", data=TEST_PDF_CONTENT, type="application/pdf").json()["file"]

    files = client.get("/api/files").json()["files"]
    assert [f["id"] for f in files] == [second["id"], first["id"]]


def test_list_by_section(client: TestClient):
    upload(client, section="docs")
    upload(client, section="report")
    upload(client, section="docs")

    files = client.get("/api/files", params={"section": "docs"}).json()["files"]
    assert len(files) == 2
    assert {f["section"] for f in files} == {"docs"}


def test_upload_missing_field(client: TestClient):
    response = upload(client, section=None)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Missing required fields"


def test_upload_too_large(client: TestClient):
    response = upload(client, size=MAX_FILE_SIZE + 1)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "File too large. Maximum size is 5MB."}
    assert client.get("/api/files").json() == {"files": []}


def test_upload_declared_size_smaller_than_content(client: TestClient):
    data = b"a" * (MAX_FILE_SIZE + 1024)
    response = upload(client, data=data, size=1)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "File too large. Maximum size is 5MB."}
    assert client.get("/api/files").json() == {"files": []}


def test_upload_declared_size_mismatch(client: TestClient):
    response = upload(client, size=len(TEST_FILE_CONTENT) + 5)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "File size does not match content"


def test_upload_unsupported_type(client: TestClient):
    response = upload(client, name="cat.png", type="image/png")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Unsupported file type"


def test_upload_non_json_body(client: TestClient):
    response = client.post("/api/files", content=b"not json", headers={"Content-Type": "application/json"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "error" in response.json()


def test_delete_then_delete_again(client: TestClient):
    file_id = upload(client).json()["file"]["id"]

    response = client.delete("/api/files", params={"id": file_id})
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "File deleted successfully"}
    assert client.get("/api/files").json() == {"files": []}

    response = client.delete("/api/files", params={"id": file_id})
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "File not found"}


def test_delete_requires_integer_id(client: TestClient):
    assert client.delete("/api/files").json() == {"error": "File ID is required"}
    assert client.delete("/api/files").status_code == status.HTTP_400_BAD_REQUEST
    assert client.delete("/api/files", params={"id": "abc"}).status_code == status.HTTP_400_BAD_REQUEST


def test_get_single_file(client: TestClient):
    file_id = upload(client).json()["file"]["id"]

    response = client.get(f"/api/files/{file_id}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["file"]["id"] == file_id

    assert client.get("/api/files/9999").status_code == status.HTTP_404_NOT_FOUND


def test_download_returns_original_bytes(client: TestClient):
    file_id = upload(client, name="report.pdf", data=TEST_PDF_CONTENT, type="application/pdf").json()["file"]["id"]

    response = client.get(f"/api/files/{file_id}/download")
    assert response.status_code == status.HTTP_200_OK
    assert response.content == TEST_PDF_CONTENT
    assert response.headers["content-type"] == "application/pdf"
    assert "report.pdf" in response.headers["content-disposition"]
    assert response.headers["access-control-allow-origin"] == "*"


def test_options_preflight(client: TestClient):
    response = client.options("/api/files")
    assert response.status_code == status.HTTP_200_OK
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert "DELETE" in response.headers["access-control-allow-methods"]


def test_unsupported_method(client: TestClient):
    response = client.put("/api/files", json={})
    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert response.json() == {"error": "Method not allowed"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_unknown_api_path(client: TestClient):
    response = client.get("/api/nothing-here")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "API endpoint not found"}


def test_browser_client_is_served(mock_client: TestClient):
    response = mock_client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert "text/html" in response.headers["content-type"]
