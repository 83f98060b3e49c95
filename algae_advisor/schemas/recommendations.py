"""
Pydantic schemas for recommendation results.

These models define the contract between the response presenter and the
results panel: the raw markdown from Gemini, the sections it was split into,
and the notices/notifications displayed around them.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class SectionResponse(BaseModel):
    """One recognized part of the Gemini answer."""
    title: str = Field(..., description="Fixed section title", examples=["Harvesting Schedule"])
    body: str = Field(..., description="Markdown body (heading line removed)")


class NoticeResponse(BaseModel):
    """Informational box shown below the sections."""
    title: str
    description: str


class NotificationResponse(BaseModel):
    """Transient toast shown by the page."""
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class PresentedRecommendation(BaseModel):
    """
    Display-ready form of a Gemini answer.

    INVARIANT:
    - segmented=True: `sections` follows the fixed title order, no title repeats
      (it can be empty when every matched heading had a blank body)
    - segmented=False: `sections` is empty and the page renders `response_text` as one block
    - image_notice is present iff has_image
    """
    response_text: str = Field(..., description="Unmodified markdown returned by Gemini")
    has_image: bool = Field(False, description="Whether an image was sent with the request")
    segmented: bool = Field(..., description="False when no heading matched a known section")
    sections: List[SectionResponse] = Field(default_factory=list)
    image_notice: Optional[NoticeResponse] = None


class RecommendationResponse(PresentedRecommendation):
    """Response of POST /form/submit and GET /recommendations/latest."""
    status: Literal["OK"] = "OK"
    notification: Optional[NotificationResponse] = Field(
        None,
        description="Success toast; only set right after a submission"
    )
