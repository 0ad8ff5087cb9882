from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from loguru import logger
from ..deps import get_extractor
from ...models.invoice import ProcessInvoiceRequest
from ...services.errors import InvoiceProcessingError
from ...services.invoice_extractor import InvoiceExtractor

router = APIRouter(tags=["invoices"])

# Every method is routed here so unsupported ones get the JSON 405 below
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.api_route("/", methods=ROUTED_METHODS)
@router.api_route("/api/process-invoice", methods=ROUTED_METHODS)
async def process_invoice(request: Request, extractor: InvoiceExtractor = Depends(get_extractor)):
    """
    Extract an invoice record from a base64-encoded ticket image.

    Request body:
    {
        "imageBase64": "data:image/jpeg;base64,/9j/4AAQ..."
    }

    Example response:
    {
        "vendor": "Acme Water Services",
        "amount": 150.5,
        "date": "2024-03-01",
        "description": "water truck",
        "costCode": "8305-160",
        "category": "Water Hauling"
    }

    OPTIONS answers CORS preflight with an empty 200; other methods besides
    POST get a 405.
    """
    if request.method == "OPTIONS":
        return Response(status_code=200)

    if request.method != "POST":
        return error_response(405, "Method not allowed")

    try:
        req = ProcessInvoiceRequest.model_validate(await request.json())
    except ValueError:
        req = ProcessInvoiceRequest()

    if not req.image_base64:
        return error_response(400, "No image provided")

    try:
        result = await extractor.extract(req.image_base64)
    except InvoiceProcessingError as e:
        return error_response(e.status_code, e.message)
    except Exception as e:
        logger.exception("Processing error")
        return error_response(500, str(e) or "Failed to process invoice")

    return JSONResponse(status_code=200, content=result.model_dump(by_alias=True))
