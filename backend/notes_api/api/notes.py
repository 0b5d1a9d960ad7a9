from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, Response

from notes_api.api.handlers import CreateNoteRequest, create_note
from notes_api.api.responses import Envelope
from notes_api.storage.gateway import StorageGateway
from notes_api.utils.jwt_auth import get_claims

router = APIRouter(prefix="/notes", tags=["notes"])


def get_gateway(request: Request) -> StorageGateway:
    return request.app.state.gateway


def to_response(envelope: Envelope) -> Response:
    return Response(
        content=envelope.body,
        status_code=envelope.status_code,
        headers=envelope.headers,
        media_type="application/json",
    )


@router.post("")
async def create_note_endpoint(
    request: Request,
    claims: Optional[dict[str, Any]] = Depends(get_claims),
    gateway: StorageGateway = Depends(get_gateway),
) -> Response:
    body = await request.body()
    envelope = await create_note(CreateNoteRequest(body=body, claims=claims), gateway)
    return to_response(envelope)
