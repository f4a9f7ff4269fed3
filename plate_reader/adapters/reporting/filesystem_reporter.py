from datetime import datetime
from typing import Callable
import logging
import os
import numpy as np
from plate_reader.ports.reporter_port import ReporterPort
from plate_reader.ports.codec_port import ImageCodecPort
from plate_reader.domain.models import UNKNOWN_TEXT
from plate_reader.domain.services import sanitize_for_filename
from plate_reader.core.exceptions import ImageCodecError

logger = logging.getLogger(__name__)


class LoggingReporter(ReporterPort):
    """Writes pipeline events to the log and persists nothing."""

    def no_plate(self) -> None:
        logger.warning("No license plate detected")

    def text_missing(self) -> None:
        logger.warning("No text detected on the license plate")

    def text_recognized(self, text: str) -> None:
        logger.info(f"Detected license plate text: {text}")

    def ocr_error(self, engine: str, message: str) -> None:
        logger.error(f"{engine} OCR error: {message}")

    def persist(self, image: np.ndarray, plate: np.ndarray, text: str) -> None:
        return None


class FileSystemReporter(LoggingReporter):
    """
    Saves the original frame and the plate crop under <output_dir>/<YYYY-MM-DD>/.
    Write failures are logged and never interrupt the pipeline.
    """
    def __init__(
        self,
        output_dir: str,
        codec: ImageCodecPort,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.output_dir = output_dir
        self.codec = codec
        self.now = now

    def plate_filename(self, text: str, stamp: int) -> str:
        label = ""
        if text and text != UNKNOWN_TEXT:
            label = sanitize_for_filename(text)
        return f"plate_{label or 'unrecognized'}_{stamp}.jpg"

    def persist(self, image: np.ndarray, plate: np.ndarray, text: str) -> None:
        moment = self.now()
        stamp = int(moment.timestamp() * 1000)
        folder = os.path.join(self.output_dir, moment.date().isoformat())
        original_path = os.path.join(folder, f"original_{stamp}.jpg")
        plate_path = os.path.join(folder, self.plate_filename(text, stamp))
        try:
            os.makedirs(folder, exist_ok=True)
            self.codec.write(original_path, image)
            logger.info(f"Original image saved as {original_path}")
            self.codec.write(plate_path, plate)
            logger.info(f"License plate image saved as {plate_path}")
        except (ImageCodecError, OSError) as exc:
            logger.error(f"Could not save result images: {exc}")
