import html
import logging
import streamlit as st

from api import analyze_image, get_meal_suggestions
from ui import page_header, meal_card

logger = logging.getLogger(__name__)

ACCEPTED_TYPES = ["png", "jpg", "jpeg", "webp"]


def select_image(state, file) -> bool:
    """새 이미지를 선택하면 이전 결과를 비운다. 같은 파일(재실행)이면 그대로."""
    file_bytes = file.getvalue()
    if state.get("selected_image") == file_bytes and state.get("image_name") == file.name:
        return False

    state["selected_image"] = file_bytes
    state["image_name"] = file.name
    state["image_mime"] = file.type
    state["meals"] = []
    state["ingredients"] = ""
    state["error"] = None
    return True


def request_analyze(state) -> bool:
    """버튼 on_click: is_loading 만 세우고, 분석은 다음 실행에서 analyze() 가 한다."""
    if state.get("is_loading"):
        return False
    if not state.get("selected_image"):
        state["error"] = "Please select an image first."
        return False

    state["is_loading"] = True
    state["error"] = None
    state["meals"] = []
    state["ingredients"] = ""
    return True


def analyze(state):
    if not state.get("selected_image"):
        state["error"] = "Please select an image first."
        state["is_loading"] = False
        return

    state["is_loading"] = True
    state["error"] = None
    state["meals"] = []
    state["ingredients"] = ""

    try:
        identified = analyze_image(state["selected_image"], state.get("image_name"), state.get("image_mime"))
        state["ingredients"] = identified

        state["meals"] = get_meal_suggestions(identified)
    except Exception:
        logger.exception("Meal suggestion flow failed")
        state["error"] = "Failed to get meal suggestions. Please try again."
    finally:
        state["is_loading"] = False


def render():
    state = st.session_state
    page_header(
        "What's in your fridge?",
        "Upload a photo of your fridge or pantry to get instant meal ideas!",
    )

    file = st.file_uploader(
        "📷 Click to upload an image (PNG, JPG, or WEBP)",
        type=ACCEPTED_TYPES,
        disabled=state["is_loading"],
    )
    if file is not None and not state["is_loading"]:
        select_image(state, file)

    if state["selected_image"]:
        st.image(state["selected_image"], caption=state["image_name"])
        st.button(
            "✨ Get Meal Ideas",
            key="get_meal_ideas",
            type="primary",
            disabled=state["is_loading"],
            on_click=request_analyze,
            args=(state,),
        )

    if state["is_loading"]:
        with st.spinner("Thinking of delicious meals..."):
            analyze(state)
        st.rerun()

    if state["error"]:
        st.error(state["error"])

    if state["ingredients"]:
        st.markdown(
            f"<div class='card'><b>Identified Ingredients:</b><br>{html.escape(state['ingredients'])}</div>",
            unsafe_allow_html=True,
        )

    if state["meals"]:
        st.subheader("Here are your meal ideas!")
        cols = st.columns(3)
        for i, meal in enumerate(state["meals"]):
            with cols[i % 3]:
                meal_card(meal)
