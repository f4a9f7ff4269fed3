from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import Optional, Tuple
import numpy as np

# Plate located but no text could be read
UNKNOWN_TEXT = "unknown"

# Only characters a plate read may contain
PLATE_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


class BoundingBox(BaseModel):
    x: int
    y: int
    w: int
    h: int


class DetectionPolicy(BaseModel):
    """
    Colour ranges and contour thresholds used by the colour/contour plate detector.
    HSV bounds follow OpenCV's 8-bit convention (H in [0, 180], S and V in [0, 255]).
    """
    model_config = ConfigDict(frozen=True)

    yellow_lower: Tuple[int, int, int] = (10, 50, 50)
    yellow_upper: Tuple[int, int, int] = (40, 255, 255)
    white_lower: Tuple[int, int, int] = (0, 0, 200)
    white_upper: Tuple[int, int, int] = (180, 30, 255)

    kernel_size: int = 5
    max_candidates: int = 10
    approx_epsilon_ratio: float = 0.02
    min_vertices: int = 4
    max_vertices: int = 8
    min_aspect_ratio: float = 1.0
    max_aspect_ratio: float = 6.0
    min_area: float = 500.0


DEFAULT_POLICY = DetectionPolicy()


class RecognitionStatus(str, Enum):
    NO_PLATE = "no_plate"
    TEXT_FOUND = "text_found"
    TEXT_UNKNOWN = "text_unknown"


class RecognitionResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    plate_image: Optional[np.ndarray] = None
    text: Optional[str] = None
    box: Optional[BoundingBox] = None

    @property
    def status(self) -> RecognitionStatus:
        if self.plate_image is None:
            return RecognitionStatus.NO_PLATE
        if self.text == UNKNOWN_TEXT:
            return RecognitionStatus.TEXT_UNKNOWN
        return RecognitionStatus.TEXT_FOUND

    def as_tuple(self) -> Tuple[Optional[np.ndarray], Optional[str]]:
        return self.plate_image, self.text
