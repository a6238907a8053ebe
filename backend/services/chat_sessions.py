from collections import OrderedDict
from typing import Any, Optional

from backend import config
from backend.utils.logger import get_logger

logger = get_logger(__name__)


class ChatSessionStore:
    """
    session_id -> Gen AI chat handle.
    메모리에만 보관 (재시작하면 사라짐). 한 탭의 채팅 패널만 자기 session_id 를 사용한다.
    max_sessions 를 넘으면 가장 오래 안 쓴 handle 부터 버린다 (닫힌 탭 정리용).
    """

    def __init__(self, max_sessions: int = 500):
        self.max_sessions = max(1, max_sessions)
        self._chats: "OrderedDict[str, Any]" = OrderedDict()

    def get(self, session_id: str) -> Optional[Any]:
        chat = self._chats.get(session_id)
        if chat is not None:
            self._chats.move_to_end(session_id)
        return chat

    def put(self, session_id: str, chat: Any):
        self._chats[session_id] = chat
        self._chats.move_to_end(session_id)
        while len(self._chats) > self.max_sessions:
            evicted, _ = self._chats.popitem(last=False)
            logger.info("Evicted chat session %s (cap %d)", evicted, self.max_sessions)

    def drop(self, session_id: str) -> bool:
        return self._chats.pop(session_id, None) is not None

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._chats

    def __len__(self) -> int:
        return len(self._chats)


_store = ChatSessionStore(max_sessions=config.MAX_CHAT_SESSIONS)


def get_chat_store() -> ChatSessionStore:
    return _store
