"""Relays completion chunks to the HTTP caller."""
import json
from typing import AsyncIterator, AsyncGenerator
from ..logging_config import get_logger, with_data

logger = get_logger("tech_therapy.streaming")

STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no"
}


async def relay_text(chunks: AsyncIterator[str]) -> AsyncGenerator[str, None]:
    """
    Relay completion chunks verbatim as a plain text body.

    A provider failure is logged and re-raised so the caller sees the
    response body break off instead of a clean end of stream.

    Args:
        chunks: Text fragments from the therapist

    Yields:
        The same fragments, empty ones skipped
    """
    chunk_count = 0
    total_chars = 0
    try:
        async for chunk in chunks:
            if not chunk:
                continue
            chunk_count += 1
            total_chars += len(chunk)
            yield chunk
    except Exception as e:
        logger.error(f"Text stream aborted: {e}", extra=with_data(chunks=chunk_count, chars=total_chars))
        raise

    logger.info("Text stream completed", extra=with_data(chunks=chunk_count, chars=total_chars))


async def relay_sse(chunks: AsyncIterator[str]) -> AsyncGenerator[str, None]:
    """
    Relay completion chunks as Server-Sent Events.

    Args:
        chunks: Text fragments from the therapist

    Yields:
        SSE formatted data events, ending with a ``done`` event
    """
    chunk_count = 0
    total_chars = 0
    try:
        async for chunk in chunks:
            if not chunk:
                continue
            chunk_count += 1
            total_chars += len(chunk)
            yield f"data: {json.dumps({'chunk': chunk, 'done': False})}\n\n"

        yield f"data: {json.dumps({'chunk': '', 'done': True})}\n\n"
        logger.info("SSE stream completed", extra=with_data(chunks=chunk_count, chars=total_chars))

    except Exception as e:
        logger.error(
            f"SSE stream failed: {e}", exc_info=True, extra=with_data(chunks=chunk_count, chars=total_chars)
        )
        yield f"data: {json.dumps({'chunk': f'Error: {str(e)}', 'done': True, 'error': True})}\n\n"
