import os
import requests
from dotenv import load_dotenv
from typing import List, Optional

load_dotenv()


def _get_base() -> str:
    """
    백엔드 베이스 URL 결정 우선순위:
    1) 환경변수 API_BASE_URL
    2) Streamlit secrets["backend_base"]
    3) 기본값 "http://127.0.0.1:8000"
    """
    base = os.getenv("API_BASE_URL")
    if base:
        return base.rstrip("/")

    try:
        import streamlit as st
        base = st.secrets.get("backend_base")
        if base:
            return str(base).rstrip("/")
    except Exception:
        # secrets.toml 이 없으면 st.secrets 접근 자체가 예외
        pass

    return "http://127.0.0.1:8000"


BASE = _get_base()


def analyze_image(file_bytes: bytes, filename: str, mime_type: Optional[str] = None) -> str:
    """POST /suggest/ingredients (multipart) → 인식된 재료 문자열"""
    files = {"file": (filename or "upload.jpg", file_bytes, mime_type or "application/octet-stream")}
    r = requests.post(f"{BASE}/suggest/ingredients", files=files, timeout=120)
    r.raise_for_status()
    return r.json()["ingredients"]


def get_meal_suggestions(ingredients: str) -> List[dict]:
    """POST /suggest/meals → [{"name", "description", "ingredients"}, ...]"""
    r = requests.post(f"{BASE}/suggest/meals", json={"ingredients": ingredients}, timeout=60)
    r.raise_for_status()
    return r.json()["meals"]


def send_chat(session_id: str, messages: List[dict]) -> str:
    """POST /chat → 모델 답변 텍스트. messages 의 마지막은 항상 user 턴."""
    payload = {"session_id": session_id, "messages": messages}
    r = requests.post(f"{BASE}/chat", json=payload, timeout=60)
    r.raise_for_status()
    return r.json()["reply"]


def reset_chat(session_id: str) -> None:
    r = requests.delete(f"{BASE}/chat/{session_id}", timeout=15)
    r.raise_for_status()


def generate_image(prompt: str) -> str:
    """POST /image → data:image/jpeg;base64,..."""
    r = requests.post(f"{BASE}/image", json={"prompt": prompt}, timeout=120)
    r.raise_for_status()
    return r.json()["image_url"]


__all__ = [
    "analyze_image",
    "get_meal_suggestions",
    "send_chat",
    "reset_chat",
    "generate_image",
]
