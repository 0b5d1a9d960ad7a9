"""Note creation, independent of the HTTP framework.

The handler binds the note to the caller's `sub` claim, stamps it, writes it
once through the storage gateway and maps the outcome to an Envelope.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from notes_api.api import responses
from notes_api.api.responses import Envelope
from notes_api.errors import AuthorizationMissing, NoteError, ValidationError
from notes_api.models.notes import Note, NoteCreate
from notes_api.storage.gateway import StorageGateway
from notes_api.utils.ids import new_note_id

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class CreateNoteRequest:
    body: Union[str, bytes, None]
    claims: Optional[Mapping[str, Any]]


def subject_from_claims(claims: Optional[Mapping[str, Any]]) -> str:
    if not isinstance(claims, Mapping):
        raise AuthorizationMissing("No identity claims")
    sub = claims.get("sub")
    if not isinstance(sub, str) or not sub:
        raise AuthorizationMissing("Claims carry no subject")
    return sub


def decode_body(body: Union[str, bytes, None]) -> NoteCreate:
    if not body:
        raise ValidationError("Empty request body")
    try:
        return NoteCreate.model_validate_json(body)
    except PydanticValidationError as exc:
        raise ValidationError(f"Malformed request body: {exc.error_count()} error(s)") from exc


async def create_note(
    request: CreateNoteRequest,
    gateway: StorageGateway,
    clock: Callable[[], int] = _now_ms,
) -> Envelope:
    try:
        user_id = subject_from_claims(request.claims)
        payload = decode_body(request.body)
    except NoteError as exc:
        logger.info("Rejected note creation (%s): %s", type(exc).__name__, exc)
        return responses.client_error(exc)

    created_at = clock()
    note = Note(
        user_id=user_id,
        note_id=new_note_id(created_at),
        content=payload.content,
        attachment=payload.attachment,
        created_at=created_at,
    )
    item = note.to_dict()

    result = await gateway.call("put", {"TableName": gateway.table_name, "Item": item})
    if not result.ok:
        logger.error(
            "Failed to store note %s for user %s",
            note.note_id,
            user_id,
            exc_info=result.error.cause or result.error,
        )
        return responses.failure({"status": False})

    logger.info("Created note %s for user %s", note.note_id, user_id)
    return responses.success(item)
