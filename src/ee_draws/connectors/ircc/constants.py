"""IRCC Express Entry rounds feed constants."""

IRCC_ROUNDS_URL = "https://www.canada.ca/content/dam/ircc/documents/json/ee_rounds_123_en.json"

# Payload keys
ROUNDS_KEY = "rounds"
DRAW_NUMBER = "drawNumber"
DRAW_DATE = "drawDate"
DRAW_SIZE = "drawSize"
DRAW_CRS = "drawCRS"
DRAW_NAME = "drawName"

# drawName substring -> program category (checked in order, first match wins)
CATEGORY_RULES: list[tuple[str, str]] = [
    ("Provincial Nominee Program", "PNP"),
    ("Canadian Experience Class", "CEC"),
    ("Federal Skilled Worker", "FSW"),
    ("French", "French-language"),
    ("Healthcare", "Healthcare"),
    ("STEM", "STEM"),
    ("Trade", "Trade"),
    ("Transport", "Transport"),
    ("Agriculture", "Agriculture"),
]

# Checked before category: a PNP round naming another category is still program-specific
PROGRAM_SPECIFIC_MARKER = "Provincial Nominee"

ROUND_TYPE_GENERAL = "General"
ROUND_TYPE_PROGRAM_SPECIFIC = "Program-specific"
ROUND_TYPE_CATEGORY_BASED = "Category-based"
