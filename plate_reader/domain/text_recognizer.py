from typing import Sequence
import asyncio
import logging
import numpy as np
from plate_reader.ports.ocr_port import OcrPort
from plate_reader.ports.codec_port import ImageCodecPort
from plate_reader.ports.reporter_port import ReporterPort
from plate_reader.domain.models import PLATE_CHARSET
from plate_reader.domain.services import clean_plate_text
from plate_reader.core.exceptions import ImageCodecError, OcrEngineError

logger = logging.getLogger(__name__)


class TextRecognizer:
    """
    Runs the OCR engines in order until one returns text.

    The plate crop is encoded to PNG once and handed to every engine.
    Engine failures are reported and treated like an empty read, so
    `recognize` never raises; an empty string means no text was found.
    """

    def __init__(
        self,
        engines: Sequence[OcrPort],
        codec: ImageCodecPort,
        reporter: ReporterPort,
        charset: str = PLATE_CHARSET,
    ):
        self.engines = list(engines)
        self.codec = codec
        self.reporter = reporter
        self.charset = charset

    async def recognize(self, plate_bgr: np.ndarray) -> str:
        try:
            image_bytes = self.codec.encode_png(plate_bgr)
        except ImageCodecError as exc:
            self.reporter.ocr_error("PNG encoder", exc.message)
            return ""

        for engine in self.engines:
            try:
                raw_text = await asyncio.to_thread(engine.extract_text, image_bytes)
            except OcrEngineError as exc:
                self.reporter.ocr_error(engine.name, exc.message)
                continue
            except Exception as exc:
                logger.exception(f"Unexpected failure in {engine.name} OCR")
                self.reporter.ocr_error(engine.name, str(exc))
                continue

            text = clean_plate_text(raw_text, self.charset)
            if text:
                logger.info(f"Text recognized by {engine.name} OCR: {text}")
                return text
            logger.debug(f"{engine.name} OCR returned no usable text (raw={raw_text!r})")

        return ""
