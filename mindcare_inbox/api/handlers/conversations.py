"""
Conversation list, detail and send handlers.
"""

from fastapi import APIRouter, HTTPException, status

from ...core.exceptions import ConversationNotFoundError, InvalidMessageError
from ...services.conversations import ConversationQuery, MessageComposer
from ..schemas import (
    ConversationDetailResponse,
    ConversationListResponse,
    ConversationSummary,
    SendMessageRequest,
    SendMessageResponse,
)


class ConversationsHandler:
    """Handler exposing the conversation query and composer."""

    def __init__(self, query: ConversationQuery, composer: MessageComposer):
        self.query = query
        self.composer = composer
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):

        @self.router.get("", response_model=ConversationListResponse)
        async def list_conversations(search: str = ""):
            conversations = self.query.search(search)
            return ConversationListResponse(
                conversations=[ConversationSummary.from_conversation(c) for c in conversations],
                total=len(conversations),
            )

        @self.router.get("/{conversation_id}", response_model=ConversationDetailResponse)
        async def get_conversation(conversation_id: str):
            try:
                conversation = self.query.get(conversation_id)
            except ConversationNotFoundError as e:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
            return ConversationDetailResponse(
                conversation=ConversationSummary.from_conversation(conversation),
                messages=conversation.messages,
            )

        @self.router.post(
            "/{conversation_id}/messages",
            response_model=SendMessageResponse,
            status_code=status.HTTP_201_CREATED,
        )
        async def send_message(conversation_id: str, request: SendMessageRequest):
            try:
                message = self.composer.send(conversation_id, request.content)
            except InvalidMessageError as e:
                raise HTTPException(status_code=422, detail=str(e))
            except ConversationNotFoundError as e:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
            return SendMessageResponse(success=True, sent_message=message)
