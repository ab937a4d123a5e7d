from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.application.dto.messages import EditMessageRequest, PostMessageRequest
from src.application.use_cases.messages.edit_message import EditMessageHandler
from src.application.use_cases.messages.post_message import PostMessageHandler
from src.presentation.api.dependencies import (get_edit_message_handler,
                                               get_post_message_handler)
from src.presentation.api.v1.schemas.message import MessageEdit, MessagePost
from src.shared.telemetry.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("", status_code=status.HTTP_200_OK, response_class=Response)
async def post_message(
    data: MessagePost,
    handler: Annotated[PostMessageHandler, Depends(get_post_message_handler)],
) -> Response:
    """
    Post a new message.

    The id is chosen by the client; the publication date is set by the server.
    Returns 409 if the id is taken, 422 if the text is blank or over 280 characters.
    """
    logger.debug("Post message %s by %s", data.id, data.author)
    await handler.handle(PostMessageRequest(id=data.id, author=data.author, text=data.text))
    return Response(status_code=status.HTTP_200_OK)


@router.put("", status_code=status.HTTP_200_OK, response_class=Response)
async def edit_message(
    data: MessageEdit,
    handler: Annotated[EditMessageHandler, Depends(get_edit_message_handler)],
) -> Response:
    """Replace the text of an existing message (404 if it does not exist)"""
    logger.debug("Edit message %s", data.id)
    await handler.handle(EditMessageRequest(message_id=data.id, text=data.text))
    return Response(status_code=status.HTTP_200_OK)
