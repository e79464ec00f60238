"""Chat API endpoints.

Routes:
- POST /chat/reply - Next assistant turn, as {content} or {error}
- POST /chat/extract - Requirements extracted so far, as {content} or {error}
- POST /chat/handoff - Extract and store requirements for the report step

Dependencies: reqbot.application.services.chat_service
System role: Requirements elicitation HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from reqbot.api.deps import get_chat_service
from reqbot.application.services.chat_service import ChatService
from reqbot.core.exceptions import GenerationError, StorageError, ValidationError
from reqbot.core.flows.flow_schema import Requirement
from reqbot.models.chat import ChatReplyRequest, ConversationRequest, HandoffResponse
from reqbot.models.common import FlowResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])

REPLY_FAILED = "Sorry, I encountered an error. Please try again."


@router.post(
    "/reply",
    response_model=FlowResult[str],
    response_model_exclude_none=True,
)
async def reply(
    request: ChatReplyRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> FlowResult[str]:
    """Generate the assistant's reply to the latest message.

    Raises:
        HTTPException(422): Blank message
    """
    try:
        response = await chat_service.reply(request.history, request.message)
        return FlowResult[str].ok(response)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except GenerationError as e:
        logger.error(f"{__name__}:reply - {e}")
        return FlowResult[str].fail(REPLY_FAILED)


@router.post(
    "/extract",
    response_model=FlowResult[list[Requirement]],
    response_model_exclude_none=True,
)
async def extract(
    request: ConversationRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> FlowResult[list[Requirement]]:
    """Extract requirements from the conversation.

    Raises:
        HTTPException(422): Empty conversation
    """
    try:
        requirements = await chat_service.extract(request.turns)
        return FlowResult[list[Requirement]].ok(requirements)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except GenerationError as e:
        logger.error(f"{__name__}:extract - {e}")
        return FlowResult[list[Requirement]].fail(f"Failed to extract requirements. {e.message}")


@router.post("/handoff", response_model=HandoffResponse, status_code=201)
async def create_handoff(
    request: ConversationRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> HandoffResponse:
    """Extract requirements and store them with the transcript.

    Raises:
        HTTPException(422): Empty conversation
        HTTPException(502): Requirements extraction failed
        HTTPException(507): Hand-off too large for storage
    """
    try:
        handoff_id = await chat_service.prepare_report(request.turns)
        return HandoffResponse(handoff_id=handoff_id)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except GenerationError as e:
        logger.error(f"{__name__}:create_handoff - {e}")
        raise HTTPException(
            status_code=502,
            detail=f"Failed to extract requirements. {e.message}",
        )
    except StorageError as e:
        logger.error(f"{__name__}:create_handoff - {e}")
        raise HTTPException(
            status_code=507,
            detail="Could not save requirements. It might be too large.",
        )
