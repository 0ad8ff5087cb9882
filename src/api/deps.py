from ..core.config import settings
from ..services.invoice_extractor import InvoiceExtractor


def get_extractor() -> InvoiceExtractor:
    """Build the extractor from process settings (override in tests)."""
    return InvoiceExtractor(settings)
