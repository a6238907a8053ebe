from fastapi import APIRouter, Depends, HTTPException
from google import genai

from backend.genai_client import require_client
from backend.schemas.image_schema import ImageRequest, ImageResponse
from backend.services.gemini_service import generate_image
from backend.utils.logger import get_logger

router = APIRouter(prefix="/image", tags=["image"])
logger = get_logger(__name__)


@router.post("", response_model=ImageResponse)
async def create_image(payload: ImageRequest, client: genai.Client = Depends(require_client)):
    try:
        image_url = await generate_image(client, payload.prompt)
    except Exception:
        logger.exception("Image generation failed")
        raise HTTPException(status_code=502, detail="Failed to generate image.")
    return ImageResponse(image_url=image_url)
