"""
Domain constants shared by the form collector, the Gemini requester and
the response presenter.
"""

# Uploaded algae images are held in memory; anything strictly larger is rejected
MAX_IMAGE_SIZE_MB = 5
MAX_IMAGE_SIZE_BYTES = MAX_IMAGE_SIZE_MB * 1024 * 1024

# Cultivation parameter ranges (inclusive bounds)
PH_MIN = 0.0
PH_MAX = 14.0
TEMPERATURE_MIN_C = 0.0
TEMPERATURE_MAX_C = 50.0

HARVEST_FREQUENCIES = ("Daily", "Weekly", "Monthly")

# Initial form values shown on the Cultivation Parameters tab
FORM_DEFAULTS = {
    "ph": 7.0,
    "temperature": 25.0,
    "volume": 1000.0,
    "harvest_frequency": "Weekly",
}

# Fixed generation parameters sent with every Gemini request
GENERATION_CONFIG = {
    "temperature": 0.4,
    "topP": 0.8,
    "topK": 40,
    "maxOutputTokens": 2048,
}

# Section titles in display order. IMAGE_ANALYSIS_TITLE is only expected
# when an image was sent with the request.
SECTION_TITLES = (
    "Strain Recommendations",
    "Harvesting Schedule",
    "Lipid Optimization Techniques",
    "Biofuel Yield Potential",
)
IMAGE_ANALYSIS_TITLE = "Image Analysis"

# Fallback hints used when a heading doesn't contain the full title
SECTION_KEYWORDS = ("strain", "harvest", "lipid", "yield", "image")

IMAGE_ANALYSIS_NOTICE = {
    "title": "Image Analysis Included",
    "description": "The recommendations include analysis of your uploaded algae image.",
}

# Tabs of the single page UI
TABS = ("info", "form", "settings")
