#!/usr/bin/env python3
"""
Local Gemini Test Script

Runs one cultivation request against the real Gemini API without starting
the web app, then prints the sections the presenter found.

Usage:
    GEMINI_API_KEY=... python scripts/try_recommendations.py
    python scripts/try_recommendations.py --ph 6.5 --temperature 28 --volume 500 --frequency Daily
    python scripts/try_recommendations.py --image samples/culture.jpg --api-key ...
"""

import argparse
import asyncio
import logging
import mimetypes
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

load_dotenv()

from algae_advisor.agents.cultivation import obtain_recommendations  # noqa: E402
from algae_advisor.errors import AdvisorError  # noqa: E402
from algae_advisor.schemas.cultivation import ImageAttachment  # noqa: E402
from algae_advisor.services.form_collector import CultivationForm  # noqa: E402
from algae_advisor.services.response_presenter import present_response  # noqa: E402
from algae_advisor.utils.constants import HARVEST_FREQUENCIES  # noqa: E402
from algae_advisor.utils.logging import configure_logging, get_logger  # noqa: E402

# Configure logging
configure_logging(logging.INFO)
logger = get_logger(__name__)


def load_image(path: str) -> ImageAttachment:
    image_path = Path(path)
    mime_type, _ = mimetypes.guess_type(image_path.name)
    return ImageAttachment(
        filename=image_path.name,
        mime_type=mime_type or "application/octet-stream",
        data=image_path.read_bytes(),
    )


async def run(args: argparse.Namespace) -> int:
    form = CultivationForm()
    form.set_numeric_field("ph", args.ph)
    form.set_numeric_field("temperature", args.temperature)
    form.set_numeric_field("volume", args.volume)
    form.set_harvest_frequency(args.frequency)

    try:
        if args.image:
            form.select_image(load_image(args.image))
    except AdvisorError as e:
        print(f"❌ {e.title}: {e.message}")
        return 1

    submitted = []
    if not form.submit(submitted.append):
        for field, message in form.errors.items():
            print(f"❌ {field}: {message}")
        return 1

    params = submitted[0]
    logger.info(f"Requesting recommendations: has_image={params.image is not None}")

    try:
        text = await obtain_recommendations(params, args.api_key)
    except AdvisorError as e:
        print(f"❌ {e.title}: {e.message}")
        return 1

    presented = present_response(text, has_image=params.image is not None)

    print("=" * 60)
    if not presented.segmented:
        print("(no known section headings, full response below)")
        print(presented.response_text)
    for section in presented.sections:
        print(f"## {section.title}")
        print(section.body)
    if presented.image_notice:
        print(f"ℹ️  {presented.image_notice.title}: {presented.image_notice.description}")
    print("=" * 60)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Send one cultivation request to Gemini and print the sections",
    )
    parser.add_argument("--ph", default="7", help="Water pH (0-14)")
    parser.add_argument("--temperature", default="25", help="Temperature in °C (0-50)")
    parser.add_argument("--volume", default="1000", help="Culture volume in liters")
    parser.add_argument("--frequency", default="Weekly", choices=HARVEST_FREQUENCIES)
    parser.add_argument("--image", help="Optional path to an algae image (max 5MB)")
    parser.add_argument(
        "--api-key",
        default=os.getenv("GEMINI_API_KEY", ""),
        help="Gemini API key (defaults to $GEMINI_API_KEY)",
    )
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
