from __future__ import annotations
import base64
import json
from typing import List

from google import genai
from google.genai import types
from pydantic import ValidationError

from backend import config
from backend.schemas.chat_schema import ChatMessage
from backend.schemas.meal_schema import Meal
from backend.services.chat_sessions import ChatSessionStore
from backend.utils.logger import get_logger, log_debug

logger = get_logger(__name__)

# =========================
#  고정 프롬프트
# =========================
INGREDIENTS_PROMPT = (
    "Analyze this image of a refrigerator and pantry. Identify all the edible food items "
    "and ingredients visible. List them as a single, comma-separated string. For example: "
    "'eggs, milk, cheese, bread, lettuce, tomatoes'. If no food is identifiable, return an "
    "empty string."
)

MEALS_PROMPT_TEMPLATE = (
    "Given the following ingredients: {ingredients}, suggest 3-5 meal ideas. Focus on "
    "simple, creative recipes that primarily use these ingredients."
)

CHEF_SYSTEM_INSTRUCTION = (
    "You are a helpful culinary assistant and chatbot named 'Chef Gemini'. You can answer "
    "questions about recipes, cooking techniques, or anything else food-related. Keep your "
    "answers concise and friendly."
)

MEALS_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "name": types.Schema(
                type=types.Type.STRING,
                description="The name of the meal or recipe.",
            ),
            "description": types.Schema(
                type=types.Type.STRING,
                description="A short, appealing description of the meal.",
            ),
            "ingredients": types.Schema(
                type=types.Type.ARRAY,
                description="A list of ingredients from the provided list that are required for this meal.",
                items=types.Schema(type=types.Type.STRING),
            ),
        },
        required=["name", "description", "ingredients"],
    ),
)


def file_to_generative_part(data: bytes, mime_type: str) -> types.Part:
    """업로드 이미지 -> inline_data Part (base64 인코딩은 SDK 가 처리)"""
    return types.Part.from_bytes(data=data, mime_type=mime_type)


async def analyze_image_for_ingredients(
    client: genai.Client, image_bytes: bytes, mime_type: str
) -> str:
    image_part = file_to_generative_part(image_bytes, mime_type)
    log_debug("analyze_image", {
        "model": config.TEXT_MODEL,
        "mime_type": mime_type,
        "image_bytes": len(image_bytes),
    })

    response = await client.aio.models.generate_content(
        model=config.TEXT_MODEL,
        contents=[image_part, INGREDIENTS_PROMPT],
    )
    return (response.text or "").strip()


def _parse_meals(raw_text: str) -> List[Meal]:
    """
    모델이 준 JSON 텍스트 -> Meal 리스트.
    파싱 실패 / 리스트 아님 -> 빈 리스트. 절대 예외를 올리지 않는다.
    """
    try:
        payload = json.loads(raw_text.strip())
    except (json.JSONDecodeError, TypeError) as e:
        logger.error("Failed to parse meal suggestions JSON: %s", e)
        return []

    if not isinstance(payload, list):
        logger.warning("Meal suggestions payload is %s, not a list", type(payload).__name__)
        return []

    meals: List[Meal] = []
    for idx, item in enumerate(payload):
        try:
            meals.append(Meal.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping malformed meal #%d: %s", idx, e.errors())
    return meals


async def get_meal_suggestions(client: genai.Client, ingredients: str) -> List[Meal]:
    if not ingredients.strip():
        return []

    prompt = MEALS_PROMPT_TEMPLATE.format(ingredients=ingredients)
    log_debug("meal_suggestions", {"model": config.TEXT_MODEL, "prompt_chars": len(prompt)})

    response = await client.aio.models.generate_content(
        model=config.TEXT_MODEL,
        contents=prompt,
        config=types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=MEALS_SCHEMA,
        ),
    )
    return _parse_meals(response.text or "")


def _to_content(message: ChatMessage) -> types.Content:
    return types.Content(role=message.role, parts=[types.Part(text=message.content)])


async def get_chat_response(
    client: genai.Client,
    store: ChatSessionStore,
    session_id: str,
    history: List[ChatMessage],
) -> str:
    """
    session_id 별 chat handle 을 처음 한 번만 만들고 이후 재사용.
    - 생성 시: 마지막 턴을 제외한 전체를 history 로 넣음
    - 전송: 항상 마지막 턴(=새 user 메시지)만 보냄
    """
    if not history:
        raise ValueError("history must contain at least one message")

    chat = store.get(session_id)
    if chat is None:
        chat = client.aio.chats.create(
            model=config.TEXT_MODEL,
            config=types.GenerateContentConfig(system_instruction=CHEF_SYSTEM_INSTRUCTION),
            history=[_to_content(m) for m in history[:-1]],
        )
        store.put(session_id, chat)
        log_debug("chat_created", {
            "model": config.TEXT_MODEL,
            "session_id": session_id,
            "history_len": len(history) - 1,
        })

    last_message = history[-1]
    result = await chat.send_message(last_message.content)
    return result.text or ""


async def generate_image(client: genai.Client, prompt: str) -> str:
    log_debug("generate_image", {"model": config.IMAGE_MODEL, "prompt_chars": len(prompt)})

    response = await client.aio.models.generate_images(
        model=config.IMAGE_MODEL,
        prompt=prompt,
        config=types.GenerateImagesConfig(
            number_of_images=1,
            output_mime_type="image/jpeg",
            aspect_ratio="1:1",
        ),
    )

    generated = response.generated_images or []
    image = generated[0].image if generated else None
    if image is None or not image.image_bytes:
        raise RuntimeError("Image generation returned no image.")

    base64_image = base64.b64encode(image.image_bytes).decode("utf-8")
    return f"data:image/jpeg;base64,{base64_image}"
