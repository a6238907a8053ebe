import logging
import streamlit as st

from api import send_chat, reset_chat as drop_chat_session
from state import greeting_messages, new_chat_session_id

logger = logging.getLogger(__name__)

CHEF_AVATAR = "🧑‍🍳"
APOLOGY = "Sorry, I'm having trouble connecting. Please try again."


def queue_message(state, text: str) -> bool:
    """사용자 턴을 먼저 대화에 붙이고 is_thinking 을 세운다. 답변은 fetch_reply() 가 받아온다."""
    if not (text or "").strip() or state.get("is_thinking"):
        return False

    state["messages"] = state["messages"] + [{"role": "user", "content": text}]
    state["is_thinking"] = True
    return True


def submit_input(state):
    # form submit on_click: 입력창 값을 꺼내고 비운다
    text = state.get("chat_input") or ""
    state["chat_input"] = ""
    queue_message(state, text)


def fetch_reply(state):
    try:
        reply = send_chat(state["chat_session_id"], state["messages"])
        state["messages"] = state["messages"] + [{"role": "model", "content": reply}]
    except Exception:
        logger.exception("Chat round trip failed")
        state["messages"] = state["messages"] + [{"role": "model", "content": APOLOGY}]
    finally:
        state["is_thinking"] = False


def send_message(state, text: str) -> bool:
    if not queue_message(state, text):
        return False
    fetch_reply(state)
    return True


def reset_chat(state):
    old_session = state.get("chat_session_id")
    if old_session:
        try:
            drop_chat_session(old_session)
        except Exception as e:
            # 새 session_id 로 이미 분리되므로 실패해도 진행
            logger.warning("Could not drop chat session %s: %s", old_session, e)

    state["chat_session_id"] = new_chat_session_id()
    state["messages"] = greeting_messages()
    state["is_thinking"] = False


def _bubble(msg: dict):
    if msg["role"] == "user":
        with st.chat_message("user"):
            st.markdown(msg["content"])
    else:
        with st.chat_message("assistant", avatar=CHEF_AVATAR):
            st.markdown(msg["content"])


def render():
    state = st.session_state
    thinking = state["is_thinking"]

    with st.container(height=480):
        for msg in state["messages"]:
            _bubble(msg)
        # 대기 중이면 답변 말풍선 자리를 먼저 잡아둔다
        pending = st.chat_message("assistant", avatar=CHEF_AVATAR) if thinking else None

    with st.form("chat_form"):
        c1, c2 = st.columns([5, 1])
        with c1:
            st.text_input(
                "Message",
                key="chat_input",
                placeholder="Ask about a recipe...",
                label_visibility="collapsed",
                disabled=thinking,
            )
        with c2:
            st.form_submit_button(
                "Send",
                type="primary",
                disabled=thinking,
                on_click=submit_input,
                args=(state,),
            )

    st.button(
        "🔄 New chat",
        key="new_chat",
        disabled=thinking,
        on_click=reset_chat,
        args=(state,),
    )

    if pending is not None:
        with pending:
            with st.spinner("..."):
                fetch_reply(state)
        st.rerun()
