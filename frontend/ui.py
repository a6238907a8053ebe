import base64
import html
import streamlit as st

_APP_CSS = """
<style>
.block-container{
  max-width: 960px !important;
  padding-top: 1.5rem !important;
}

/* 컬러/폰트 */
:root{
  --txt:#292524; --muted:#78716c; --border:#e7e5e4; --panel:#f5f5f4;
  --brand:#f97316; --brand2:#c2410c;
}
html, body, [data-baseweb="baseweb"]{
  font-family: -apple-system, BlinkMacSystemFont, system-ui, Segoe UI, Roboto, Arial, sans-serif;
  color: var(--txt);
}

.h2 {font-size: 24px; font-weight: 800; margin: 10px 0 2px; text-align:center;}
.caption {font-size: 14px; color: var(--muted); margin: 0 0 12px; text-align:center;}
.card{ background: var(--panel); border:1px solid var(--border); border-radius:12px; padding:12px 14px; margin:8px 0 10px; }
.meal-name {font-weight: 800; color: var(--brand2); margin-bottom: 4px;}
.meal-need {font-size: 12px; font-weight: 700; color: var(--muted); margin: 6px 0 0;}

/* 상단 앱바 */
.appbar{
  position: sticky; top:0; z-index:50;
  background: rgba(255,255,255,0.85); border-bottom:1px solid var(--border);
  padding: 10px 14px; margin: -10px -10px 8px -10px; font-weight:800; font-size:22px;
}
.appbar span {color: var(--brand);}

.app-footer{ text-align:center; font-size:12px; color: var(--muted); margin-top:24px; }

/* Streamlit 기본 UI 숨김 */
#MainMenu, footer {visibility:hidden;}
</style>
"""

TABS = [
    ("suggester", "👨‍🍳 Meal Ideas"),
    ("chat", "💬 Chat Bot"),
    ("image", "🖼️ Image Fun"),
]
TAB_VIEWS = [view for view, _ in TABS]
DEFAULT_VIEW = "suggester"


def current_view(state) -> str:
    view = state.get("view")
    return view if view in TAB_VIEWS else DEFAULT_VIEW


def set_view(state, view: str):
    state["view"] = view if view in TAB_VIEWS else DEFAULT_VIEW


def app_shell(title: str, state=None) -> str:
    """
    앱바 + 탭 버튼을 그리고 현재 view 를 돌려준다.
    - 페이지 상단에서 st.set_page_config(...) 먼저 호출할 것
    """
    state = st.session_state if state is None else state
    st.markdown(_APP_CSS, unsafe_allow_html=True)
    st.markdown(f"<div class='appbar'><span>🧊</span> {title}</div>", unsafe_allow_html=True)

    active = current_view(state)
    cols = st.columns(len(TABS))
    for col, (view, label) in zip(cols, TABS):
        with col:
            st.button(
                label,
                key=f"tab_{view}",
                type="primary" if view == active else "secondary",
                on_click=set_view,
                args=(state, view),
            )
    st.divider()
    return current_view(state)


def page_header(title: str, caption: str = ""):
    st.markdown(f"<div class='h2'>{title}</div>", unsafe_allow_html=True)
    if caption:
        st.markdown(f"<p class='caption'>{caption}</p>", unsafe_allow_html=True)


def meal_card(meal: dict):
    with st.container(border=True):
        st.markdown(f"<div class='meal-name'>{html.escape(meal.get('name', 'Meal'))}</div>", unsafe_allow_html=True)
        st.write(meal.get("description", ""))
        st.markdown("<p class='meal-need'>You'll need:</p>", unsafe_allow_html=True)
        st.markdown("\n".join(f"- {ing}" for ing in meal.get("ingredients", [])))


def decode_data_url(data_url: str) -> bytes:
    """'data:image/jpeg;base64,....' → 이미지 바이트"""
    header, _, encoded = data_url.partition(",")
    if not header.startswith("data:") or ";base64" not in header:
        raise ValueError("not a base64 data URL")
    return base64.b64decode(encoded)


def footer(year: int):
    st.markdown(
        f"<div class='app-footer'>© {year} Fridge Feast AI. Powered by Gemini.</div>",
        unsafe_allow_html=True,
    )
