import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda
from langchain_openai import ChatOpenAI

from chat_api.config import Settings
from chat_api.exceptions import ConfigurationError
from chat_api.services.llm_client import LangChainChatClient, OpenAIChatClientBuilder


def _capturing_model(captured: list, reply: str = "ok") -> RunnableLambda:
    def _model(prompt_value):  # type: ignore[no-untyped-def]
        captured.extend(prompt_value.to_messages())
        return reply

    return RunnableLambda(_model)


def test_langchain_client_returns_model_text() -> None:
    client = LangChainChatClient(FakeListChatModel(responses=["I'm doing great, thank you for asking!"]))

    assert client.call("Hello, how are you?") == "I'm doing great, thank you for asking!"


def test_langchain_client_sends_system_prompt_then_user_message() -> None:
    captured: list = []
    client = LangChainChatClient(_capturing_model(captured), system_prompt="Reply as {json}")

    client.call("What's 1 + 1 <>&' {x}")

    assert [m.type for m in captured] == ["system", "human"]
    assert captured[0].content == "Reply as {json}"
    assert captured[1].content == "What's 1 + 1 <>&' {x}"


def test_langchain_client_without_system_prompt_sends_only_user_message() -> None:
    captured: list = []
    client = LangChainChatClient(_capturing_model(captured))

    client.call("  \n ")

    assert [m.type for m in captured] == ["human"]
    assert captured[0].content == "  \n "


def test_langchain_client_sends_none_as_empty_turn() -> None:
    captured: list = []
    client = LangChainChatClient(_capturing_model(captured, reply="I didn't receive any message."))

    assert client.call(None) == "I didn't receive any message."
    assert captured[0].content == ""


def test_langchain_client_propagates_model_error() -> None:
    def _failing(_prompt_value):  # type: ignore[no-untyped-def]
        raise RuntimeError("ChatClient error")

    client = LangChainChatClient(RunnableLambda(_failing))

    with pytest.raises(RuntimeError, match="ChatClient error"):
        client.call("message")


def test_openai_builder_requires_api_key() -> None:
    builder = OpenAIChatClientBuilder(Settings(OPENAI_API_KEY=None))

    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        builder.build()


def test_openai_builder_applies_settings() -> None:
    settings = Settings(
        OPENAI_API_KEY="sk-test",
        OPENAI_MODEL="gpt-4o",
        OPENAI_TEMPERATURE=0.2,
        OPENAI_BASE_URL="http://localhost:11434/v1",
        CHAT_SYSTEM_PROMPT="You are a helpful assistant.",
    )

    client = OpenAIChatClientBuilder(settings).build()

    assert isinstance(client, LangChainChatClient)
    assert isinstance(client.llm, ChatOpenAI)
    assert client.llm.model_name == "gpt-4o"
    assert client.llm.temperature == 0.2
    assert client.llm.openai_api_base == "http://localhost:11434/v1"
    assert client.system_prompt == "You are a helpful assistant."
