"""Completion proxy endpoint.

Accepts the chat panel's query and context, forwards a fixed prompt to the
upstream provider, and returns the reply text. Every failure collapses into
the same fallback body so the panel always has something to display.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from nexus_inquire.models.schemas import COMPLETION_PATH, CompletionRequest, CompletionResponse
from nexus_inquire.proxy.completion import (
    CompletionService,
    build_prompt,
    get_completion_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["completion"])

# Everything but POST; OPTIONS preflights are answered by the CORS middleware first
NON_POST_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]

FALLBACK_MESSAGE = (
    "Sorry, I encountered an error while processing your request. Please try again."
)


@router.post(COMPLETION_PATH, response_model=CompletionResponse)
async def create_completion(
    request: Request,
    service: CompletionService = Depends(get_completion_service),
) -> JSONResponse:
    """Answer one chat turn.

    The body is read by hand rather than bound by FastAPI so that malformed
    input lands in the fallback path instead of a 422.

    Args:
        request: Incoming request with a JSON body {"query", "context"}.
        service: Upstream completion service.

    Returns:
        200 with {"response": text}, or 500 with {"response": FALLBACK_MESSAGE}.
    """
    try:
        payload = await request.json()
        completion_request = CompletionRequest.model_validate(payload)
        prompt = build_prompt(completion_request.query, completion_request.context)
        text = await service.complete(prompt)
    except Exception as e:
        logger.error(f"Completion request failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=CompletionResponse(response=FALLBACK_MESSAGE).model_dump(),
        )

    return JSONResponse(content=CompletionResponse(response=text).model_dump())


@router.api_route(
    COMPLETION_PATH,
    methods=NON_POST_METHODS,
    include_in_schema=False,
)
async def completion_method_not_allowed() -> PlainTextResponse:
    """Reject anything but POST without touching the body."""
    return PlainTextResponse(
        "Method Not Allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": "POST"},
    )
