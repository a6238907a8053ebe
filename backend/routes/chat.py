from fastapi import APIRouter, Depends, HTTPException
from google import genai

from backend.genai_client import require_client
from backend.schemas.chat_schema import ChatRequest, ChatResponse, ChatResetResponse
from backend.services.chat_sessions import ChatSessionStore, get_chat_store
from backend.services.gemini_service import get_chat_response
from backend.utils.logger import get_logger

router = APIRouter(prefix="/chat", tags=["chat"])
logger = get_logger(__name__)


@router.post("", response_model=ChatResponse)
async def chat(
    payload: ChatRequest,
    client: genai.Client = Depends(require_client),
    store: ChatSessionStore = Depends(get_chat_store),
):
    try:
        reply = await get_chat_response(client, store, payload.session_id, payload.messages)
    except Exception:
        logger.exception("Chat round trip failed (session=%s)", payload.session_id)
        raise HTTPException(status_code=502, detail="Failed to get chat response.")
    return ChatResponse(reply=reply)


@router.delete("/{session_id}", response_model=ChatResetResponse)
def reset_chat(session_id: str, store: ChatSessionStore = Depends(get_chat_store)):
    return ChatResetResponse(dropped=store.drop(session_id))
