from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from notes_api.errors import NoteError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
}


@dataclass(frozen=True)
class Envelope:
    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    def to_dict(self) -> dict[str, Any]:
        return {"statusCode": self.status_code, "headers": dict(self.headers), "body": self.body}


def build_response(status_code: int, body: Any) -> Envelope:
    return Envelope(status_code=status_code, body=json.dumps(body, ensure_ascii=False), headers=dict(CORS_HEADERS))


def success(body: Any) -> Envelope:
    return build_response(200, body)


def failure(body: Any) -> Envelope:
    return build_response(500, body)


def client_error(error: NoteError) -> Envelope:
    # only the public message goes out, never the exception text
    return build_response(error.status_code, {"status": False, "error": error.public_message})
