from pydantic import BaseModel, Field

class ProcessInvoiceRequest(BaseModel):
    image_base64: str | None = Field(default=None, alias="imageBase64")
