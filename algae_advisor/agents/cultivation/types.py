"""
Gemini generateContent wire types.

TypedDicts mirroring the JSON the REST endpoint accepts and returns.
Only the fields the advisor sends or reads are declared.
"""

from typing import List, TypedDict


class InlineData(TypedDict):
    """Base64 image payload (no data-URL prefix)."""
    mimeType: str
    data: str


class TextPart(TypedDict):
    text: str


class InlineDataPart(TypedDict):
    inlineData: InlineData


class Content(TypedDict):
    parts: List[dict]  # TextPart first, then an optional InlineDataPart


class GenerationConfig(TypedDict):
    temperature: float
    topP: float
    topK: int
    maxOutputTokens: int


class GenerateContentRequest(TypedDict):
    """Request body for models/{model}:generateContent."""
    contents: List[Content]
    generationConfig: GenerationConfig
