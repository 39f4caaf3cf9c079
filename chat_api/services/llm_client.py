import logging
from typing import Any, Optional, Protocol

from langchain_core.messages import SystemMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI

from chat_api.config import Settings
from chat_api.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ChatClient(Protocol):
    def call(self, message: Optional[str]) -> str: ...


class ChatClientBuilder(Protocol):
    def build(self) -> ChatClient: ...


class LangChainChatClient:
    """Sends one user message (plus an optional system prompt) to a chat model and returns its text."""

    def __init__(self, llm: Any, system_prompt: Optional[str] = None):
        self.llm = llm
        self.system_prompt = system_prompt

        messages: list[Any] = []
        if system_prompt:
            # literal message, so braces in the prompt are not template fields
            messages.append(SystemMessage(content=system_prompt))
        messages.append(("human", "{message}"))
        self.prompt = ChatPromptTemplate.from_messages(messages)

        self.chain = self.prompt | self.llm | StrOutputParser()

    def call(self, message: Optional[str]) -> str:
        return self.chain.invoke({"message": "" if message is None else message})


class OpenAIChatClientBuilder:
    def __init__(self, settings: Settings):
        self.settings = settings

    def build(self) -> LangChainChatClient:
        if not self.settings.OPENAI_API_KEY:
            raise ConfigurationError("OPENAI_API_KEY is not configured")

        options: dict[str, Any] = {
            "model": self.settings.OPENAI_MODEL,
            "temperature": self.settings.OPENAI_TEMPERATURE,
            "api_key": self.settings.OPENAI_API_KEY,
        }
        if self.settings.OPENAI_BASE_URL:
            options["base_url"] = self.settings.OPENAI_BASE_URL
        if self.settings.OPENAI_TIMEOUT is not None:
            options["timeout"] = self.settings.OPENAI_TIMEOUT
        if self.settings.OPENAI_MAX_RETRIES is not None:
            options["max_retries"] = self.settings.OPENAI_MAX_RETRIES

        llm = ChatOpenAI(**options)
        logger.info(
            "Chat model ready: %s (%s)",
            self.settings.OPENAI_MODEL,
            self.settings.OPENAI_BASE_URL or "default endpoint",
        )
        return LangChainChatClient(llm, system_prompt=self.settings.CHAT_SYSTEM_PROMPT)
