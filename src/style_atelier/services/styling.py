"""Style request client that prepares edit prompts and extracts results."""

from dataclasses import dataclass
from typing import Protocol

from style_atelier.services.encoder import split_data_url

SYSTEM_INSTRUCTION = (
    "You are a professional digital stylist.\n"
    "The user provides a photo of a person and a styling request, "
    "possibly written in Persian.\n"
    "Your task: modify ONLY the hair, beard, clothing, accessories such as "
    "tattoos, or objects in the background (for example cars) as requested.\n"
    "STRICT CONSTRAINT: Do NOT change the person's facial features "
    "(eyes, nose, mouth shape, skin texture). Keep the face exactly the same.\n"
    "Understand Persian styles, Iranian cars (like Samand, Peykan, Pride) "
    "and foreign cars.\n"
    "Respond with the modified image."
)


class StyleGenerationError(RuntimeError):
    """Raised when the image service fails or returns no image."""


class StyleClient(Protocol):
    """Interface for the external image-editing model."""

    async def generate_image(
        self,
        *,
        model: str,
        image_base64: str,
        mime_type: str,
        prompt: str,
    ) -> str | None:
        """Return the base64 payload of the edited image, if any."""


def build_prompt(instruction: str) -> str:
    """Combine the fixed system instruction with the user's request."""
    return f"{SYSTEM_INSTRUCTION}\n\nUser's request: {instruction.strip()}"


@dataclass
class StyleService:
    """Stateless wrapper around a single image-edit call."""

    client: StyleClient
    model: str

    async def generate(self, encoded_image: str, instruction: str) -> str:
        """Return the edited image as a data URL with the original media type."""
        if not encoded_image:
            raise ValueError("An image is required")
        if not instruction or not instruction.strip():
            raise ValueError("A styling request is required")
        mime_type, payload = split_data_url(encoded_image)
        try:
            result = await self.client.generate_image(
                model=self.model,
                image_base64=payload,
                mime_type=mime_type,
                prompt=build_prompt(instruction),
            )
        except Exception as exc:
            raise StyleGenerationError("Image service request failed") from exc
        if not result:
            raise StyleGenerationError("No image data returned from the image service")
        return f"data:{mime_type};base64,{result}"
