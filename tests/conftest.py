from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from certificate_finder.config import AppConfig, GoogleConfig
from certificate_finder.gdrive_search import DriveSearchClient

FOLDER_ID = "folder-123"
API_KEY = "AIza-test-key-0000"

Handler = Callable[[httpx.Request], httpx.Response]


def drive_file(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": "abc123",
        "name": "Sertifikat_1234567890.pdf",
        "mimeType": "application/pdf",
        "size": "1536",
        "createdTime": "2024-03-05T08:15:00.000Z",
        "webViewLink": "https://drive.google.com/file/d/abc123/view?usp=drivesdk",
        "webContentLink": "https://drive.google.com/uc?id=abc123&export=download",
    }
    payload.update(overrides)
    return payload


@dataclass(slots=True)
class FakeDrive:
    """Records requests and answers them with a configurable handler."""

    handler: Handler
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self, config: GoogleConfig | None = None) -> DriveSearchClient:
        http_client = httpx.Client(transport=httpx.MockTransport(self))
        return DriveSearchClient(config or build_google_config(), http_client=http_client)


def build_google_config() -> GoogleConfig:
    return GoogleConfig(folder_id=FOLDER_ID, api_key=API_KEY)


def build_config() -> AppConfig:
    return AppConfig(google=build_google_config())


def json_response(status_code: int, payload: Any) -> Handler:
    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return _handler

