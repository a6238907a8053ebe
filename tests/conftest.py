"""
Shared fixtures: a fake google-genai client and a plain-dict session state.
Project root and frontend/ are put on sys.path by the pytest config in pyproject.toml.
"""

import io
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image


def text_response(text):
    return SimpleNamespace(text=text)


def image_response(image_bytes):
    return SimpleNamespace(
        generated_images=[SimpleNamespace(image=SimpleNamespace(image_bytes=image_bytes))]
    )


@pytest.fixture
def fake_chat():
    return SimpleNamespace(send_message=AsyncMock(return_value=text_response("Try a spinach frittata!")))


@pytest.fixture
def fake_client(fake_chat):
    """Mimics the parts of google.genai.Client used by the adapter (client.aio.*)."""
    return SimpleNamespace(
        aio=SimpleNamespace(
            models=SimpleNamespace(
                generate_content=AsyncMock(return_value=text_response("")),
                generate_images=AsyncMock(return_value=image_response(b"\xff\xd8\xff\xe0fake-jpeg")),
            ),
            chats=SimpleNamespace(create=MagicMock(return_value=fake_chat)),
        )
    )


@pytest.fixture
def jpeg_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (64, 64), (240, 120, 30)).save(buf, format="JPEG", quality=95)
    return buf.getvalue()


@pytest.fixture
def session_state():
    from state import init_state

    state = {}
    init_state(state)
    return state
