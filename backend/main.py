from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend import config
from backend.routes import suggest, chat, image
from backend.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Fridge Feast AI API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

origins_env = config.FRONT_ORIGINS
allow_origins = (
    [o.strip() for o in origins_env.split(",")] if origins_env and origins_env != "*" else ["*"]
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(suggest.router)
app.include_router(chat.router)
app.include_router(image.router)

logger.info("Fridge Feast AI API ready (text=%s, image=%s)", config.TEXT_MODEL, config.IMAGE_MODEL)


@app.get("/")
def health():
    return {"status": "ok"}
