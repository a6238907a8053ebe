from fastapi import APIRouter, UploadFile, File, Depends, HTTPException
from google import genai
import io
from PIL import Image, UnidentifiedImageError

from backend import config
from backend.genai_client import require_client
from backend.schemas.meal_schema import IngredientsResponse, MealsRequest, MealsResponse
from backend.services.gemini_service import analyze_image_for_ingredients, get_meal_suggestions
from backend.utils.logger import get_logger

router = APIRouter(prefix="/suggest", tags=["suggest"])
logger = get_logger(__name__)

MIME_BY_FORMAT = {
    "JPEG": "image/jpeg",
    "JPG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
    "GIF": "image/gif",
}


def detect_image_mime(raw: bytes) -> str:
    """Pillow 로 열어서 실제 포맷 확인. 이미지가 아니면 415."""
    try:
        pil = Image.open(io.BytesIO(raw))
        pil.verify()
    except UnidentifiedImageError:
        raise HTTPException(status_code=415, detail="The uploaded file is not a recognizable image (JPG/PNG/WEBP).")
    except Exception as e:
        raise HTTPException(status_code=415, detail=f"Could not read image: {e}")

    return MIME_BY_FORMAT.get((pil.format or "").upper(), "image/jpeg")


@router.post("/ingredients", response_model=IngredientsResponse)
async def suggest_ingredients(
    file: UploadFile = File(...),
    client: genai.Client = Depends(require_client),
):
    # ─────────────────────────────────────
    # 1) 입력 검증
    # ─────────────────────────────────────
    raw = await file.read()
    if not raw or len(raw) < config.MIN_UPLOAD_BYTES:
        raise HTTPException(status_code=400, detail="The uploaded file is empty or corrupted.")
    if len(raw) > config.MAX_UPLOAD_MB * 1024 * 1024:
        raise HTTPException(status_code=413, detail=f"Images must be at most {config.MAX_UPLOAD_MB:g} MB.")

    mime_type = detect_image_mime(raw)

    # ─────────────────────────────────────
    # 2) 재료 인식
    # ─────────────────────────────────────
    try:
        ingredients = await analyze_image_for_ingredients(client, raw, mime_type)
    except Exception:
        logger.exception("Ingredient analysis failed for %s", file.filename)
        raise HTTPException(status_code=502, detail="Failed to analyze image.")

    return IngredientsResponse(ingredients=ingredients)


@router.post("/meals", response_model=MealsResponse)
async def suggest_meals(payload: MealsRequest, client: genai.Client = Depends(require_client)):
    try:
        meals = await get_meal_suggestions(client, payload.ingredients)
    except Exception:
        logger.exception("Meal suggestion failed")
        raise HTTPException(status_code=502, detail="Failed to get meal suggestions.")
    return MealsResponse(meals=meals)
