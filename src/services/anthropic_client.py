import httpx
from loguru import logger
from ..core.config import Settings
from .errors import InferenceServiceError

# Images are always declared as JPEG; callers are expected to upload JPEG scans.
IMAGE_MEDIA_TYPE = "image/jpeg"
DEFAULT_ERROR_MESSAGE = "Failed to process invoice"


def build_message_request(model: str, max_tokens: int, image_data: str, prompt: str) -> dict:
    return {
        "model": model,
        "max_tokens": max_tokens,
        "messages": [{
            "role": "user",
            "content": [
                {
                    "type": "image",
                    "source": {
                        "type": "base64",
                        "media_type": IMAGE_MEDIA_TYPE,
                        "data": image_data,
                    },
                },
                {"type": "text", "text": prompt},
            ],
        }],
    }


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return DEFAULT_ERROR_MESSAGE

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return DEFAULT_ERROR_MESSAGE


def _first_text(body: dict) -> str:
    for block in body.get("content") or []:
        if isinstance(block, dict) and block.get("type") == "text":
            return block.get("text") or ""
    return ""


class AnthropicClient:
    """Minimal client for the Anthropic Messages API (one request per call)."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def messages_url(self) -> str:
        return f"{self.settings.anthropic_base_url.rstrip('/')}/v1/messages"

    async def create_message(self, image_data: str, prompt: str) -> str:
        """
        Send one image plus prompt to the model and return its text reply.

        Raises:
            InferenceServiceError: the API answered with a non-success status
            httpx.HTTPError: the request could not be completed
        """
        headers = {
            "content-type": "application/json",
            "x-api-key": self.settings.anthropic_api_key or "",
            "anthropic-version": self.settings.anthropic_version,
        }
        payload = build_message_request(
            self.settings.anthropic_model,
            self.settings.anthropic_max_tokens,
            image_data,
            prompt,
        )

        async with httpx.AsyncClient(timeout=self.settings.anthropic_timeout_seconds) as client:
            r = await client.post(self.messages_url, headers=headers, json=payload)

        if not r.is_success:
            message = _error_message(r)
            logger.error(
                "Anthropic API error",
                status_code=r.status_code,
                error_message=message,
                body=r.text[:500],
            )
            raise InferenceServiceError(message, status_code=r.status_code)

        body = r.json()
        usage = body.get("usage") or {}
        logger.debug(
            "Anthropic API reply received",
            model=body.get("model"),
            stop_reason=body.get("stop_reason"),
            input_tokens=usage.get("input_tokens"),
            output_tokens=usage.get("output_tokens"),
        )
        return _first_text(body)
