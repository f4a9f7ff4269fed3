import re
import numpy as np

from plate_reader.ports.detector_port import PlateDetectorPort
from plate_reader.ports.reporter_port import ReporterPort
from plate_reader.domain.models import PLATE_CHARSET, UNKNOWN_TEXT, RecognitionResult
from plate_reader.domain import image_utils

# =========================
# DOMAIN LOGIC (Pure Python)
# =========================

FILENAME_UNSAFE_RE = re.compile(r"[^A-Za-z0-9]")


def clean_plate_text(raw_text: str, charset: str = PLATE_CHARSET) -> str:
    """
    Trims the OCR output and drops anything outside `charset`
    (spaces, punctuation, lowercase noise).
    """
    trimmed = (raw_text or "").strip()
    return "".join(ch for ch in trimmed if ch in charset)


def sanitize_for_filename(text: str) -> str:
    return FILENAME_UNSAFE_RE.sub("", text or "")


class PlateRecognitionService:
    """
    Detect -> crop -> recognize, one pass per image.

    Outcomes:
      - no plate:            (None, None)
      - plate, no text:      (plate, "unknown")
      - plate and text:      (plate, text)
    Logging and file dumps go through the reporter; nothing is kept between calls.
    """

    def __init__(self, detector: PlateDetectorPort, recognizer, reporter: ReporterPort):
        self.detector = detector
        self.recognizer = recognizer
        self.reporter = reporter

    async def process(self, img_bgr: np.ndarray) -> RecognitionResult:
        box = self.detector.detect_plate(img_bgr)
        if box is None:
            self.reporter.no_plate()
            return RecognitionResult()

        plate = image_utils.crop_region(img_bgr, box)
        text = await self.recognizer.recognize(plate)

        self.reporter.persist(img_bgr, plate, text or UNKNOWN_TEXT)

        if text:
            self.reporter.text_recognized(text)
        else:
            self.reporter.text_missing()

        return RecognitionResult(plate_image=plate, text=text or UNKNOWN_TEXT, box=box)
