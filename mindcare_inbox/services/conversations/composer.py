"""
Outbound message composition.
"""

from datetime import datetime
from typing import Callable, Optional

from ...core.exceptions import InvalidMessageError
from ...core.models import Message
from ...utils.date import now_in_tz
from ...utils.logging import get_logger
from ..identity import IdentityService
from .sync import SyncEngine

logger = get_logger("composer")


class MessageComposer:
    """Appends provider messages to live conversations. Nothing is transmitted."""

    def __init__(
        self,
        engine: SyncEngine,
        identity: IdentityService,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.engine = engine
        self.identity = identity
        self._clock = clock or (lambda: now_in_tz(engine.config.timezone))

    def send(self, conversation_id: str, text: str) -> Message:
        """
        Append ``text`` to a conversation as a message from the current provider.

        Args:
            conversation_id: Target conversation (the patient id)
            text: Message body; surrounding whitespace is dropped

        Returns:
            The appended Message

        Raises:
            InvalidMessageError: if ``text`` is blank
            ConversationNotFoundError: if the conversation does not exist
        """
        content = (text or "").strip()
        if not content:
            raise InvalidMessageError("Message text cannot be empty")

        conversation = self.engine.get(conversation_id)
        sender = self.identity.current
        message = Message(
            id=f"m_{conversation.id}_{len(conversation.messages) + 1}",
            sender_id=sender.sender_id,
            sender_name=sender.display_name,
            content=content,
            timestamp=self._clock(),
            read=True,
        )
        self.engine.append_message(conversation.id, message)
        logger.info(f"composer: message {message.id} appended to {conversation.id}")
        return message
