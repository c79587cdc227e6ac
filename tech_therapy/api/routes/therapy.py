"""Therapy completion streaming endpoint."""
from typing import Literal
from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from tech_therapy.agent.therapist import Therapist, get_therapist
from tech_therapy.api.models import TherapyRequest
from tech_therapy.logging_config import get_logger, with_data
from tech_therapy.modes import build_prompt, parse_mode
from tech_therapy.streaming import STREAM_HEADERS, relay_sse, relay_text

logger = get_logger("tech_therapy.routes.therapy")

router = APIRouter(prefix="/api", tags=["therapy"])


@router.post("/therapy")
async def therapy_stream(
    request: TherapyRequest,
    format: Literal["text", "sse"] = "text",
    therapist: Therapist = Depends(get_therapist),
):
    """
    Stream a support message for the given technology and mode.

    Args:
        request: TherapyRequest containing tech and mode
        format: 'text' for a plain text body, 'sse' for Server-Sent Events
        therapist: Therapist used to reach the model provider

    Returns:
        StreamingResponse relaying the completion chunk by chunk

    Raises:
        InvalidModeError: Unknown mode, answered with a plain-text 400
    """
    mode = parse_mode(request.mode)
    prompt = build_prompt(request.tech, mode)
    logger.info(
        f"Therapy request received: {mode.value}",
        extra=with_data(mode=mode.value, tech_length=len(request.tech), format=format)
    )

    chunks = therapist.stream(prompt)
    if format == "sse":
        return StreamingResponse(relay_sse(chunks), media_type="text/event-stream", headers=STREAM_HEADERS)

    return StreamingResponse(
        relay_text(chunks),
        media_type="text/plain; charset=utf-8",
        headers=STREAM_HEADERS
    )
