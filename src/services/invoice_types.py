from typing import Any
from pydantic import BaseModel, ConfigDict, Field

class NormalizedInvoice(BaseModel):
    """Invoice record returned to callers; every field is always populated."""

    model_config = ConfigDict(populate_by_name=True)

    vendor: str
    amount: float
    date: str  # YYYY-MM-DD
    description: str
    cost_code: str = Field(alias="costCode")
    category: Any = None  # passed through from the model, not validated
