"""
Response presenter: splits Gemini's markdown into the known sections.

Pure functions, no I/O. Heading wording varies between answers, so the
matching is loose:

- any markdown heading line (`#`, `##`, ...) is a candidate
- it matches a title if either text contains the other (case-insensitive),
  or if both mention the same keyword (strain/harvest/lipid/yield/image)
- the first matching title in SECTION_TITLES order wins

If no heading matches anything, the whole answer is shown as one block.
"""

import logging
import re
from typing import Dict, List, Optional

from algae_advisor.schemas.recommendations import (
    NoticeResponse,
    PresentedRecommendation,
    SectionResponse,
)
from algae_advisor.utils.constants import (
    IMAGE_ANALYSIS_NOTICE,
    IMAGE_ANALYSIS_TITLE,
    SECTION_KEYWORDS,
    SECTION_TITLES,
)

logger = logging.getLogger(__name__)

HEADING_PATTERN = re.compile(r"^#+\s*(.+)$")


def expected_titles(has_image: bool) -> List[str]:
    titles = list(SECTION_TITLES)
    if has_image:
        titles.append(IMAGE_ANALYSIS_TITLE)
    return titles


def match_heading(heading_text: str, titles: List[str]) -> Optional[str]:
    """
    Return the first title the heading matches, or None.

    Args:
        heading_text: Heading text without the leading '#' characters
        titles: Candidate titles in priority order
    """
    heading = heading_text.strip().lower()

    for title in titles:
        section_title = title.lower()
        if heading in section_title or section_title in heading:
            return title
        for keyword in SECTION_KEYWORDS:
            if keyword in heading and keyword in section_title:
                return title

    return None


def split_sections(content: str, has_image: bool) -> Optional[List[SectionResponse]]:
    """
    Split markdown into sections.

    Returns:
        None if no heading matched any expected title. Otherwise the
        sections with a non-blank body, in fixed title order (not the order
        the headings appeared in).
    """
    titles = expected_titles(has_image)
    bodies: Dict[str, str] = {title: "" for title in titles}
    current: Optional[str] = None
    sections_found = False

    for line in content.split("\n"):
        heading_match = HEADING_PATTERN.match(line)
        if heading_match:
            title = match_heading(heading_match.group(1), titles)
            if title is not None:
                current = title
                sections_found = True
                continue

        if current is not None and line.strip():
            bodies[current] += line + "\n"

    if not sections_found:
        return None

    return [
        SectionResponse(title=title, body=bodies[title])
        for title in titles
        if bodies[title].strip()
    ]


def present_response(response_text: str, has_image: bool) -> PresentedRecommendation:
    """
    Build the display model for a Gemini answer.

    The image-analysis notice is attached whenever an image was sent,
    whether or not an "Image Analysis" section was found.
    """
    sections = split_sections(response_text, has_image)

    if sections is None:
        logger.info("No known section headings found; showing full response")
    else:
        logger.info(f"Sections found: {[section.title for section in sections]}")

    image_notice = NoticeResponse(**IMAGE_ANALYSIS_NOTICE) if has_image else None

    return PresentedRecommendation(
        response_text=response_text,
        has_image=has_image,
        segmented=sections is not None,
        sections=sections or [],
        image_notice=image_notice,
    )
