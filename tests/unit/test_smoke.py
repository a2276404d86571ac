"""Smoke tests — validate the function app endpoints work end-to-end."""

import json
from unittest.mock import MagicMock

import azure.functions as func


def test_health_check_returns_status() -> None:
    """Health endpoint returns ok status with version from the package."""
    from mfws_folders.functions.http_trigger import health_check

    response = health_check(MagicMock(spec=func.HttpRequest))

    assert response.status_code == 200
    body = json.loads(response.get_body())
    assert body["status"] == "ok"
    assert body["version"] == "0.1.0"


def test_folder_path_encodes_posted_location() -> None:
    """Path endpoint parses, encodes and orders a posted MFWS listing."""
    from mfws_folders.functions.http_trigger import folder_path

    items = [
        {"FolderContentItemType": 1, "View": {"ID": 5, "Name": "Documents"}},
        {"FolderContentItemType": 3, "TraditionalFolder": {"Item": 9, "DisplayValue": "Archive"}},
    ]
    req = func.HttpRequest(
        method="POST",
        url="/api/folders/path",
        body=json.dumps({"items": items}).encode(),
    )

    response = folder_path(req)

    assert response.status_code == 200
    body = json.loads(response.get_body())
    assert body["path"] == "v5/y9/"
    assert body["resource"] == "/REST/views/v5/y9/items"
