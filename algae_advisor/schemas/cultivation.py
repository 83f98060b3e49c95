"""
Pydantic schemas for the cultivation parameters form.

CultivationParameters is the validated record handed from the form collector
to the Gemini requester. The request/response models below are the contract
of the /form endpoints used by the Cultivation Parameters tab.
"""

import base64
from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

HarvestFrequency = Literal["Daily", "Weekly", "Monthly"]


# --- Domain records ---

class ImageAttachment(BaseModel):
    """
    An uploaded algae image held in memory.

    The raw bytes are what gets transmitted; the data URL is only used as
    the on-screen preview and as the source of the base64 payload.
    """
    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., description="Original filename of the upload")
    mime_type: str = Field(..., description="Content type, e.g. 'image/png'")
    data: bytes = Field(..., repr=False, description="Raw image bytes")

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    def to_data_url(self) -> str:
        """Encode as `data:<mime>;base64,<payload>`."""
        encoded = base64.b64encode(self.data).decode("utf-8")
        return f"data:{self.mime_type};base64,{encoded}"


class CultivationParameters(BaseModel):
    """
    Validated cultivation parameters for one submission.

    Immutable once created; the form collector only builds it after every
    field passed validation.
    """
    model_config = ConfigDict(frozen=True)

    ph: float = Field(..., ge=0, le=14, description="Water pH (0-14)")
    temperature: float = Field(..., ge=0, le=50, description="Temperature in °C (0-50)")
    volume_liters: float = Field(..., gt=0, description="Culture volume in liters")
    harvest_frequency: HarvestFrequency = Field(..., description="Harvest cadence")
    image: Optional[ImageAttachment] = Field(None, description="Optional algae image")


# --- Request models ---

class FormUpdateRequest(BaseModel):
    """
    Partial update of the form fields.

    Numeric fields accept either numbers or the raw text typed by the user;
    empty or non-numeric text is stored as 0 and caught by validation on
    submit. Omitted fields are left unchanged.
    """
    ph: Optional[Union[float, str]] = Field(None, examples=[7, "6.5"])
    temperature: Optional[Union[float, str]] = Field(None, examples=[25])
    volume: Optional[Union[float, str]] = Field(None, examples=[1000])
    harvest_frequency: Optional[str] = Field(None, examples=["Weekly"])


# --- Response models ---

class ImagePreviewResponse(BaseModel):
    """Currently attached image, as shown under the upload field."""
    filename: str
    mime_type: str
    size_bytes: int
    preview_data_url: Optional[str] = Field(
        None,
        description="base64 data URL for <img src>; omitted by PATCH /form"
    )


class FormStateResponse(BaseModel):
    """Snapshot of the Cultivation Parameters form."""
    ph: float
    temperature: float
    volume: float
    harvest_frequency: str
    errors: Dict[str, str] = Field(
        default_factory=dict,
        description="Per-field messages from the last submit attempt"
    )
    image: Optional[ImagePreviewResponse] = None
