import logging
from typing import Optional

from chat_api.exceptions import ConfigurationError
from chat_api.services.llm_client import ChatClientBuilder

logger = logging.getLogger(__name__)


class ChatService:
    def __init__(self, chat_client_builder: Optional[ChatClientBuilder]):
        if chat_client_builder is None:
            raise ConfigurationError("chat client builder is required")

        self.chat_client = chat_client_builder.build()

    def chat(self, message: Optional[str]) -> str:
        # no input policy; provider errors propagate to the caller as-is
        logger.info("chat request (%d chars)", len(message) if message is not None else 0)
        return self.chat_client.call(message)
