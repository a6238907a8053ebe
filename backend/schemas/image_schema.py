from pydantic import BaseModel, field_validator

class ImageRequest(BaseModel):
    prompt: str

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, prompt: str) -> str:
        if not prompt.strip():
            raise ValueError("prompt must not be blank")
        return prompt

class ImageResponse(BaseModel):
    image_url: str
