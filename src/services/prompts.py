from .cost_codes import CATEGORIES

# Keyword hints shown to the model, in the order it should consider them
CATEGORY_HINTS = (
    ("Water truck, fluid hauling, water transport", "Water Hauling"),
    ("Water disposal, SWD", "Water Disposal"),
    ("Trucking, transportation, hauling (non-water)", "Trucking"),
    ("Labour, wages, operator", "Labour"),
    ("Equipment rental, rig rental", "Equipment Rental"),
    ("Fuel, diesel, gas", "Fuel"),
    ("Chemicals, treating", "Chemicals"),
    ("Repairs, maintenance, service", "Maintenance"),
    ("Supplies, parts, materials", "Supplies"),
)


def build_extraction_prompt() -> str:
    category_list = ", ".join(CATEGORIES)
    hints = "\n".join(f'- {keywords} → "{category}"' for keywords, category in CATEGORY_HINTS)
    return f"""Extract data from this oilfield invoice/ticket. Return ONLY valid JSON:

{{
  "vendor": "company name",
  "amount": number,
  "date": "YYYY-MM-DD",
  "description": "service description",
  "category": "one of: {category_list}"
}}

Category mapping:
{hints}

Use null if field cannot be determined. Be accurate with numbers."""


EXTRACTION_PROMPT = build_extraction_prompt()
