import logging
import streamlit as st

from api import generate_image
from ui import page_header, decode_data_url

logger = logging.getLogger(__name__)


def request_generate(state) -> bool:
    """버튼 on_click: 플래그만 세운다. 실제 호출은 다음 실행에서 (위젯이 비활성으로 그려진 뒤)"""
    if state.get("is_generating"):
        return False
    if not (state.get("prompt") or "").strip():
        state["image_error"] = "Please enter a prompt."
        return False

    state["is_generating"] = True
    state["image_error"] = None
    return True


def generate(state):
    prompt = state.get("prompt") or ""
    if not prompt.strip():
        state["image_error"] = "Please enter a prompt."
        state["is_generating"] = False
        return

    state["is_generating"] = True
    state["image_error"] = None
    state["generated_image"] = None
    state["generated_prompt"] = ""

    try:
        state["generated_image"] = generate_image(prompt)
        state["generated_prompt"] = prompt
    except Exception:
        logger.exception("Image generation failed")
        state["image_error"] = "Failed to generate image. Please try again."
    finally:
        state["is_generating"] = False


def render():
    state = st.session_state
    page_header("AI Image Generator", "Describe an image and let AI bring it to life!")

    st.text_area(
        "Prompt",
        key="prompt",
        placeholder="e.g., A gourmet pizza shaped like a heart, on a wooden table",
        height=100,
        label_visibility="collapsed",
        disabled=state["is_generating"],
    )
    st.button(
        "✨ Generate Image",
        key="generate_image",
        type="primary",
        disabled=state["is_generating"],
        on_click=request_generate,
        args=(state,),
    )

    if state["is_generating"]:
        with st.spinner("Creating your masterpiece..."):
            generate(state)
        st.rerun()

    if state["image_error"]:
        st.error(state["image_error"])

    if state["generated_image"]:
        st.subheader("Your Generated Image:")
        st.image(decode_data_url(state["generated_image"]), caption=state["generated_prompt"])
