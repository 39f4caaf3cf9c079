from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: Optional[str] = Field(default=None, description="사용자가 보낸 메시지. 검증 없이 그대로 전달됨")


class ChatResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str = Field(description="LLM이 돌려준 응답 텍스트 (가공 없음)")
