import uuid
import streamlit as st

CHAT_GREETING = "Hello! I'm your culinary assistant. Ask me anything about recipes or cooking!"


def greeting_messages():
    return [{"role": "model", "content": CHAT_GREETING}]


def new_chat_session_id() -> str:
    return uuid.uuid4().hex


def default_state() -> dict:
    return {
        "view": "suggester",
        # 재료 인식 / 메뉴 추천
        "selected_image": None,
        "image_name": None,
        "image_mime": None,
        "meals": [],
        "ingredients": "",
        "is_loading": False,
        "error": None,
        # 챗봇
        "messages": greeting_messages(),
        "is_thinking": False,
        "chat_session_id": new_chat_session_id(),
        # 이미지 생성
        "prompt": "",
        "generated_image": None,
        "generated_prompt": "",
        "is_generating": False,
        "image_error": None,
    }


def init_state(state=None):
    state = st.session_state if state is None else state
    for k, v in default_state().items():
        if k not in state:
            state[k] = v
