"""
Cultivation Advisor Prompt Templates

Builds the single natural-language instruction sent to Gemini for a set of
cultivation parameters.

Structure of the prompt:
- Role line with the four parameters embedded inline
- a) strain table with fixed columns
- b) harvesting schedule
- c) lipid optimization techniques
- d) biofuel yield estimate
- e) image analysis (only when an image is attached)

The response presenter later looks for headings matching these topics, so
the wording of items a) to e) and SECTION_TITLES should stay aligned.
"""

from algae_advisor.schemas.cultivation import CultivationParameters

STRAIN_TABLE_COLUMNS = ("Strain", "Growth Rate", "Lipid %", "Ideal pH", "Ideal Temp")


def format_number(value: float) -> str:
    """
    Render a parameter the way a user typed it.

    Whole numbers lose the trailing '.0' so the prompt reads "pH 7" rather
    than "pH 7.0"; other values keep their shortest repr.
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def build_cultivation_prompt(params: CultivationParameters) -> str:
    """
    Build the user prompt for one submission.

    Args:
        params: Validated cultivation parameters

    Returns:
        Prompt text. Item e) is present only when params.image is set.

    Example:
        >>> build_cultivation_prompt(params).splitlines()[0]
        'Act as an algae biofuel expert. For pH 7, temperature 25°C, volume 1000L, and Weekly harvesting:'
    """
    columns = ", ".join(STRAIN_TABLE_COLUMNS)

    lines = [
        (
            f"Act as an algae biofuel expert. For pH {format_number(params.ph)}, "
            f"temperature {format_number(params.temperature)}°C, "
            f"volume {format_number(params.volume_liters)}L, "
            f"and {params.harvest_frequency} harvesting:"
        ),
        f"a) Recommend top 3 algae strains in a markdown table with columns: {columns}",
        "b) Provide optimal harvesting schedule",
        "c) Suggest lipid optimization techniques",
        "d) Estimate biofuel yield potential",
    ]

    if params.image is not None:
        lines.append("e) Analyze the uploaded algae image and provide insights")

    return "\n".join(lines)
