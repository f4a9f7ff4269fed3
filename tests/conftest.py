import numpy as np
import pytest

from plate_reader.adapters.codec.opencv_codec import OpenCvCodec
from plate_reader.adapters.detector.color_contour_adapter import ColorContourAdapter
from plate_reader.core.exceptions import OcrEngineError
from plate_reader.domain.services import PlateRecognitionService
from plate_reader.domain.text_recognizer import TextRecognizer

YELLOW = (0, 255, 255)
WHITE = (255, 255, 255)
BACKGROUND = (60, 30, 20)  # dark blue, outside both plate colour ranges


class FakeOcr:
    """OCR engine double: returns a canned text or raises an engine error."""

    def __init__(self, text="", error=None, name="Fake"):
        self.text = text
        self.error = error
        self.name = name
        self.calls = []

    def extract_text(self, image_bytes):
        self.calls.append(image_bytes)
        if self.error:
            raise OcrEngineError(self.name, self.error)
        return self.text


class RecordingReporter:
    def __init__(self):
        self.events = []
        self.persisted = []

    def no_plate(self):
        self.events.append(("no_plate",))

    def text_missing(self):
        self.events.append(("text_missing",))

    def text_recognized(self, text):
        self.events.append(("text_recognized", text))

    def ocr_error(self, engine, message):
        self.events.append(("ocr_error", engine, message))

    def persist(self, image, plate, text):
        self.persisted.append((image, plate, text))


def make_scene(rects=(), size=(240, 320)):
    """Background image with filled rectangles given as (x, y, w, h, bgr)."""
    img = np.zeros((size[0], size[1], 3), dtype=np.uint8)
    img[:] = BACKGROUND
    for x, y, w, h, color in rects:
        img[y:y + h, x:x + w] = color
    return img


@pytest.fixture
def scene():
    return make_scene


@pytest.fixture
def plate_scene():
    # one 78x26 yellow plate (aspect 3.0, ~2000 px2)
    return make_scene([(100, 80, 78, 26, YELLOW)])


@pytest.fixture
def codec():
    return OpenCvCodec()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def fake_ocr():
    return FakeOcr


@pytest.fixture
def make_service(codec, reporter):
    def _make(*engines):
        recognizer = TextRecognizer(list(engines), codec, reporter)
        return PlateRecognitionService(ColorContourAdapter(), recognizer, reporter)
    return _make
