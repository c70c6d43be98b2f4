"""Gemini generateContent client for image editing."""

from dataclasses import dataclass

import httpx

from style_atelier.services.styling import StyleClient

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


@dataclass
class HttpxGeminiClient(StyleClient):
    """Style client backed by the Gemini REST API."""

    api_key: str
    http_client: httpx.AsyncClient
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None

    @classmethod
    def create(
        cls,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> "HttpxGeminiClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(
            api_key=api_key,
            http_client=httpx.AsyncClient(),
            base_url=base_url.rstrip("/"),
            timeout=timeout,
        )

    async def generate_image(
        self,
        *,
        model: str,
        image_base64: str,
        mime_type: str,
        prompt: str,
    ) -> str | None:
        """Submit one image and one instruction, return the first image payload."""
        url = f"{self.base_url}/models/{model}:generateContent"
        body = {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"inlineData": {"mimeType": mime_type, "data": image_base64}},
                        {"text": prompt},
                    ],
                }
            ]
        }
        response = await self.http_client.post(
            url,
            json=body,
            headers={"x-goog-api-key": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return _first_inline_image(response.json())

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _first_inline_image(payload: dict[str, object]) -> str | None:
    """Return the base64 data of the first inline part of the first candidate."""
    candidates = payload.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        return None
    content = candidates[0].get("content") or {}
    for part in content.get("parts") or []:
        inline = part.get("inlineData") or part.get("inline_data")
        if inline and inline.get("data"):
            return inline["data"]
    return None
