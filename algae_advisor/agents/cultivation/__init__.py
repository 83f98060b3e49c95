"""
Cultivation Advisor Package

Turns validated cultivation parameters into one Gemini generateContent call
and returns the markdown answer.

Main Components:
- types: TypedDicts for the generateContent wire payload
- prompts: Prompt builder for the cultivation parameters
- agent: Request runner (encode image, build payload, POST, extract text)

Usage:
    from algae_advisor.agents.cultivation import obtain_recommendations

    text = await obtain_recommendations(params, api_key)
"""

from algae_advisor.agents.cultivation.agent import (
    build_request_body,
    extract_response_text,
    get_gemini_http_client,
    obtain_recommendations,
)
from algae_advisor.agents.cultivation.prompts import (
    STRAIN_TABLE_COLUMNS,
    build_cultivation_prompt,
    format_number,
)
from algae_advisor.agents.cultivation.types import GenerateContentRequest

__all__ = [
    # Main runner
    "obtain_recommendations",
    "build_request_body",
    "extract_response_text",
    "get_gemini_http_client",
    # Prompts
    "build_cultivation_prompt",
    "format_number",
    "STRAIN_TABLE_COLUMNS",
    # Types
    "GenerateContentRequest",
]
