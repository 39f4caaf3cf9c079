from __future__ import annotations

from dataclasses import dataclass

from chat_api.config import Settings
from chat_api.services.chat_service import ChatService
from chat_api.services.llm_client import OpenAIChatClientBuilder


@dataclass
class ServiceContainer:
    chat_service: ChatService


def build_container(settings: Settings) -> ServiceContainer:
    chat_service = ChatService(OpenAIChatClientBuilder(settings))
    return ServiceContainer(chat_service=chat_service)
