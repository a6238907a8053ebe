import os
from dotenv import load_dotenv

load_dotenv()

# Gemini / Imagen
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
TEXT_MODEL = os.getenv("TEXT_MODEL", "gemini-2.5-flash")
IMAGE_MODEL = os.getenv("IMAGE_MODEL", "imagen-4.0-generate-001")

# HTTP
FRONT_ORIGINS = os.getenv("FRONT_ORIGINS", "*")
MAX_UPLOAD_MB = float(os.getenv("MAX_UPLOAD_MB", "10"))
MIN_UPLOAD_BYTES = 100

# 채팅 세션 (메모리) 최대 개수, 넘으면 가장 오래된 것부터 버림
MAX_CHAT_SESSIONS = int(os.getenv("MAX_CHAT_SESSIONS", "500"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
AI_DEBUG_MODE = os.getenv("AI_DEBUG_MODE", "false").lower() == "true"
