from fastapi import APIRouter, Depends, HTTPException, Request, status

from chat_api.schemas.chat import ChatRequest, ChatResponse
from chat_api.services.chat_service import ChatService

router = APIRouter(tags=["Chat (LLM)"])


def require_json_content_type(request: Request) -> None:
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != "application/json" and not media_type.endswith("+json"):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Content-Type '{content_type or 'none'}' is not supported",
        )


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.container.chat_service


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="챗봇 대화 요청",
    dependencies=[Depends(require_json_content_type)],
)
def chat(request: ChatRequest, chat_service: ChatService = Depends(get_chat_service)):
    return ChatResponse(message=chat_service.chat(request.message))
