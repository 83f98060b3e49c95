"""
Cultivation Advisor Runner

Single-shot multimodal call to the Gemini generateContent REST method.
One prompt (plus an optional image) in, one markdown answer out.
"""

import asyncio
from typing import Any, AsyncIterator, Dict, Optional

import httpx

from algae_advisor.agents.cultivation.prompts import build_cultivation_prompt
from algae_advisor.agents.cultivation.types import GenerateContentRequest
from algae_advisor.config import settings
from algae_advisor.errors import (
    MalformedResponseError,
    MissingApiKeyError,
    RemoteCallError,
    RemoteConnectionError,
)
from algae_advisor.schemas.cultivation import CultivationParameters, ImageAttachment
from algae_advisor.utils.constants import GENERATION_CONFIG
from algae_advisor.utils.logging import get_logger

logger = get_logger(__name__)

# No read timeout: generation runs until Gemini answers
TIMEOUT = httpx.Timeout(None, connect=settings.GEMINI_CONNECT_TIMEOUT)


async def get_gemini_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """FastAPI dependency: an HTTP client scoped to one request."""
    async with httpx.AsyncClient(timeout=TIMEOUT) as client:
        yield client


async def encode_image(image: ImageAttachment) -> str:
    """Base64-encode the image as a data URL without blocking the event loop."""
    return await asyncio.to_thread(image.to_data_url)


def build_request_body(
    prompt_text: str,
    image: Optional[ImageAttachment] = None,
    image_data_url: Optional[str] = None
) -> GenerateContentRequest:
    """
    Assemble the generateContent payload.

    The text part always comes first. When an image is given, a second
    inlineData part carries its MIME type and the base64 payload, i.e. only
    what follows the first comma of the data URL.
    """
    parts: list = [{"text": prompt_text}]

    if image is not None and image_data_url:
        parts.append({
            "inlineData": {
                "mimeType": image.mime_type,
                "data": image_data_url.split(",", 1)[1],
            }
        })

    return {
        "contents": [{"parts": parts}],
        "generationConfig": {
            "temperature": GENERATION_CONFIG["temperature"],
            "topP": GENERATION_CONFIG["topP"],
            "topK": GENERATION_CONFIG["topK"],
            "maxOutputTokens": GENERATION_CONFIG["maxOutputTokens"],
        },
    }


def extract_response_text(response: httpx.Response) -> str:
    """
    Pull candidates[0].content.parts[0].text out of a Gemini response.

    Raises:
        RemoteCallError: Non-2xx status (carries status code and error body)
        MalformedResponseError: 2xx without the expected text path
    """
    if not response.is_success:
        try:
            error_body: Any = response.json()
        except ValueError:
            error_body = response.text
        logger.error(f"Gemini API error: status={response.status_code}")
        raise RemoteCallError(response.status_code, error_body)

    try:
        data: Dict[str, Any] = response.json()
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        logger.error(f"Unexpected Gemini response format: {type(e).__name__}")
        raise MalformedResponseError()

    if not isinstance(text, str):
        logger.error("Unexpected Gemini response format: text is not a string")
        raise MalformedResponseError()

    return text


async def obtain_recommendations(
    params: CultivationParameters,
    api_key: str,
    http_client: Optional[httpx.AsyncClient] = None
) -> str:
    """
    Ask Gemini for cultivation recommendations.

    Flow:
    1. Encode the image (if any) to a data URL
    2. Build the prompt and the request payload
    3. POST once to generateContent with the key as `key` query parameter
    4. Return the markdown text of the first candidate

    Args:
        params: Validated parameters from the form collector
        api_key: User-supplied Gemini API key
        http_client: Optional client to send the request with (a new one
            is opened and closed per call otherwise)

    Returns:
        Markdown answer from Gemini

    Raises:
        MissingApiKeyError: api_key is empty (no request is made)
        RemoteCallError, MalformedResponseError, RemoteConnectionError

    Notes:
        - Exactly one attempt; no retries, no cancellation
        - The key is never logged; only status codes and sizes are
    """
    if not api_key:
        logger.error("Gemini API key not configured")
        raise MissingApiKeyError()

    image_data_url = None
    if params.image is not None:
        image_data_url = await encode_image(params.image)
        logger.info(
            f"Attaching image: mime={params.image.mime_type}, "
            f"size={params.image.size_bytes} bytes"
        )

    prompt_text = build_cultivation_prompt(params)
    request_body = build_request_body(prompt_text, params.image, image_data_url)

    logger.info(
        f"Sending generateContent request: model={settings.GEMINI_MODEL}, "
        f"parts={len(request_body['contents'][0]['parts'])}"
    )

    try:
        if http_client is None:
            async with httpx.AsyncClient(timeout=TIMEOUT) as client:
                response = await _post(client, request_body, api_key)
        else:
            response = await _post(http_client, request_body, api_key)
    except httpx.HTTPError as e:
        # Message only: the exception's request URL would carry the key
        logger.error(f"Gemini request failed: {type(e).__name__}")
        raise RemoteConnectionError(f"Could not reach the Gemini API ({type(e).__name__})")

    text = extract_response_text(response)
    logger.info(f"Gemini answered: status={response.status_code}, chars={len(text)}")
    return text


async def _post(
    client: httpx.AsyncClient,
    request_body: GenerateContentRequest,
    api_key: str
) -> httpx.Response:
    return await client.post(
        settings.GEMINI_GENERATE_CONTENT_URL,
        params={"key": api_key},
        json=request_body,
        headers={"Content-Type": "application/json"},
    )
