import datetime as dt
import streamlit as st

from state import init_state
from ui import app_shell, footer
from panels import suggester, chat, image_gen

st.set_page_config(page_title="Fridge Feast AI", page_icon="🧊", layout="centered")

init_state()

view = app_shell("Fridge Feast AI")

PANELS = {
    "suggester": suggester.render,
    "chat": chat.render,
    "image": image_gen.render,
}
PANELS[view]()

footer(dt.date.today().year)
