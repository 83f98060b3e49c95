"""
Form collector for the Cultivation Parameters tab.

Holds the field values typed by the user and the optional algae image, and
turns them into a validated CultivationParameters record on submit.

This module does no network access. Errors are reported two ways:
- field problems are kept in `errors` (shown inline under each field)
- image problems raise immediately, leaving the current image untouched
"""

import logging
import math
from typing import Callable, Dict, Optional, Union

from algae_advisor.errors import InvalidImageTypeError, OversizedImageError
from algae_advisor.schemas.cultivation import (
    CultivationParameters,
    FormStateResponse,
    ImageAttachment,
    ImagePreviewResponse,
)
from algae_advisor.utils.constants import (
    FORM_DEFAULTS,
    HARVEST_FREQUENCIES,
    MAX_IMAGE_SIZE_BYTES,
    PH_MAX,
    PH_MIN,
    TEMPERATURE_MAX_C,
    TEMPERATURE_MIN_C,
)

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = ("ph", "temperature", "volume")

FIELD_ERROR_MESSAGES = {
    "ph": "pH must be between 0 and 14",
    "temperature": "Temperature must be between 0°C and 50°C",
    "volume": "Volume must be greater than 0",
    "harvest_frequency": "Please select a harvest frequency",
}


def normalize_numeric_input(raw: Union[float, int, str, None]) -> float:
    """
    Parse numeric input the way the number inputs do.

    Empty, non-numeric and non-finite values become 0, which range
    validation then accepts or rejects as appropriate.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return 0.0

    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0

    if not math.isfinite(value):
        return 0.0
    return value


class CultivationForm:
    """
    State of the cultivation parameters form.

    Attributes:
        ph, temperature, volume: Current numeric values
        harvest_frequency: Selected frequency (validated on submit)
        image: Attached image or None
        image_preview: data URL of `image`; always set and cleared with it
        errors: Per-field messages from the last submit attempt
    """

    def __init__(self):
        self.ph: float = FORM_DEFAULTS["ph"]
        self.temperature: float = FORM_DEFAULTS["temperature"]
        self.volume: float = FORM_DEFAULTS["volume"]
        self.harvest_frequency: str = FORM_DEFAULTS["harvest_frequency"]
        self.image: Optional[ImageAttachment] = None
        self.image_preview: Optional[str] = None
        self.errors: Dict[str, str] = {}

    # --- Field input ---

    def set_numeric_field(self, name: str, raw: Union[float, int, str, None]) -> float:
        """Store a numeric field; returns the normalized value."""
        if name not in NUMERIC_FIELDS:
            raise ValueError(f"Unknown numeric field: {name}")

        value = normalize_numeric_input(raw)
        setattr(self, name, value)
        return value

    def set_harvest_frequency(self, value: Optional[str]) -> None:
        self.harvest_frequency = (value or "").strip()

    # --- Image handling ---

    def select_image(self, attachment: Optional[ImageAttachment]) -> None:
        """
        Attach an image, or clear it when `attachment` is None.

        Raises:
            OversizedImageError: larger than MAX_IMAGE_SIZE_BYTES (exactly
                the limit is accepted)
            InvalidImageTypeError: content type is not image/*

        On either error the previously attached image is kept as is.
        """
        if attachment is None:
            self.remove_image()
            return

        if attachment.size_bytes > MAX_IMAGE_SIZE_BYTES:
            logger.warning(f"Image too large: {attachment.size_bytes} bytes")
            raise OversizedImageError(attachment.size_bytes)

        if not attachment.mime_type.startswith("image/"):
            logger.warning(f"Invalid content type: {attachment.mime_type}")
            raise InvalidImageTypeError(attachment.mime_type)

        self.image = attachment
        self.image_preview = attachment.to_data_url()
        logger.info(
            f"Image attached: filename={attachment.filename}, "
            f"size={attachment.size_bytes} bytes"
        )

    def remove_image(self) -> None:
        self.image = None
        self.image_preview = None

    # --- Validation & submit ---

    def validate(self) -> Dict[str, str]:
        """Return per-field error messages for the current values."""
        errors: Dict[str, str] = {}

        if self.ph < PH_MIN or self.ph > PH_MAX:
            errors["ph"] = FIELD_ERROR_MESSAGES["ph"]

        if self.temperature < TEMPERATURE_MIN_C or self.temperature > TEMPERATURE_MAX_C:
            errors["temperature"] = FIELD_ERROR_MESSAGES["temperature"]

        if self.volume <= 0:
            errors["volume"] = FIELD_ERROR_MESSAGES["volume"]

        if self.harvest_frequency not in HARVEST_FREQUENCIES:
            errors["harvest_frequency"] = FIELD_ERROR_MESSAGES["harvest_frequency"]

        return errors

    def submit(self, on_submit: Callable[[CultivationParameters], None]) -> bool:
        """
        Validate the current state and hand it to `on_submit`.

        Returns:
            True if the callback was invoked, False if validation failed (in
            which case `errors` holds the field messages).
        """
        self.errors = self.validate()

        if self.errors:
            logger.info(f"Form validation failed: fields={sorted(self.errors)}")
            return False

        params = CultivationParameters(
            ph=self.ph,
            temperature=self.temperature,
            volume_liters=self.volume,
            harvest_frequency=self.harvest_frequency,
            image=self.image,
        )
        on_submit(params)
        return True

    def to_response(self, include_preview: bool = True) -> FormStateResponse:
        """
        Snapshot of the form.

        With include_preview=False the image is described by name, type and
        size only; the base64 preview (about 4/3 of the image size) is left out.
        """
        image = None
        if self.image is not None and self.image_preview is not None:
            image = ImagePreviewResponse(
                filename=self.image.filename,
                mime_type=self.image.mime_type,
                size_bytes=self.image.size_bytes,
                preview_data_url=self.image_preview if include_preview else None,
            )

        return FormStateResponse(
            ph=self.ph,
            temperature=self.temperature,
            volume=self.volume,
            harvest_frequency=self.harvest_frequency,
            errors=dict(self.errors),
            image=image,
        )
