"""
Category taxonomy and the accounting cost codes each category books to.
"""

CATEGORIES = (
    "Trucking",
    "Water Hauling",
    "Water Disposal",
    "Labour",
    "Equipment Rental",
    "Fuel",
    "Chemicals",
    "Maintenance",
    "Supplies",
    "Other",
)

# Keys are matched exactly (case-sensitive). "Other" has no code of its own.
COST_CODES: dict[str, str] = {
    "Trucking": "8306",
    "Water Hauling": "8305-160",
    "Water Disposal": "8305-170",
    "Labour": "8301",
    "Equipment Rental": "8302",
    "Fuel": "8303",
    "Chemicals": "8307",
    "Maintenance": "8401",
    "Supplies": "8403",
}

OTHER_COST_CODE = "OTHER"


def cost_code_for(category) -> str:
    """Return the cost code for a category, or OTHER when it is unmapped or missing."""
    if not isinstance(category, str):
        return OTHER_COST_CODE
    return COST_CODES.get(category, OTHER_COST_CODE)
