from loguru import logger
from ..core.config import Settings
from .anthropic_client import AnthropicClient
from .errors import ApiKeyNotConfiguredError, ExtractionError
from .invoice_types import NormalizedInvoice
from .prompts import EXTRACTION_PROMPT
from .reply_parser import ReplyParseError, normalize_invoice, parse_model_reply, strip_data_url_prefix


class InvoiceExtractor:
    """
    Turns a base64 ticket image into a normalized invoice record.

    The settings object is passed in at construction; the API key itself is
    only checked when an extraction is requested, so a missing key is reported
    to the caller rather than failing at startup.
    """

    def __init__(self, settings: Settings, client: AnthropicClient | None = None):
        self.settings = settings
        self.client = client or AnthropicClient(settings)

    async def extract(self, image_base64: str) -> NormalizedInvoice:
        if not self.settings.anthropic_api_key:
            raise ApiKeyNotConfiguredError()

        image_data = strip_data_url_prefix(image_base64)
        logger.info("Sending ticket image for extraction", image_chars=len(image_data))

        reply_text = await self.client.create_message(image_data, EXTRACTION_PROMPT)

        parsed = parse_model_reply(reply_text)
        if isinstance(parsed, ReplyParseError):
            logger.error(
                "Could not parse model reply",
                kind=parsed.kind,
                reason=parsed.message,
                reply_chars=len(reply_text or ""),
            )
            raise ExtractionError(parsed.message)

        result = normalize_invoice(parsed.data)
        logger.info(
            "Invoice extracted",
            vendor=result.vendor,
            amount=result.amount,
            category=result.category,
            cost_code=result.cost_code,
        )
        return result
