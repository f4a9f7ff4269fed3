import asyncio
import numpy as np

from plate_reader.domain.services import clean_plate_text
from plate_reader.domain.text_recognizer import TextRecognizer


def _plate():
    img = np.full((26, 78, 3), (0, 255, 255), dtype=np.uint8)
    img[8:18, 10:60] = 0
    return img


def test_engine_gets_png_bytes(codec, reporter, fake_ocr):
    engine = fake_ocr("AB123")
    recognizer = TextRecognizer([engine], codec, reporter)

    text = asyncio.run(recognizer.recognize(_plate()))

    assert text == "AB123"
    assert engine.calls[0].startswith(b"\x89PNG")
    # PNG is lossless: the engine sees exactly the crop pixels
    assert np.array_equal(codec.decode_bytes(engine.calls[0]), _plate())


def test_output_restricted_to_plate_characters(codec, reporter, fake_ocr):
    recognizer = TextRecognizer([fake_ocr("AB 123 unknown!!")], codec, reporter)

    assert asyncio.run(recognizer.recognize(_plate())) == "AB123"


def test_whitespace_only_read_is_empty(codec, reporter, fake_ocr):
    recognizer = TextRecognizer([fake_ocr("  \n\x0c")], codec, reporter)

    assert asyncio.run(recognizer.recognize(_plate())) == ""
    assert reporter.events == []


def test_engine_error_returns_empty_string(codec, reporter, fake_ocr):
    recognizer = TextRecognizer([fake_ocr(error=RuntimeError("tesseract crashed"), name="Tesseract")], codec, reporter)

    assert asyncio.run(recognizer.recognize(_plate())) == ""
    kind, engine, message = reporter.events[0]
    assert (kind, engine) == ("ocr_error", "Tesseract")
    assert "tesseract crashed" in message


def test_first_engine_with_text_wins(codec, reporter, fake_ocr):
    first = fake_ocr("KJ4410", name="Primary")
    second = fake_ocr("ZZZ999", name="Secondary")
    recognizer = TextRecognizer([first, second], codec, reporter)

    assert asyncio.run(recognizer.recognize(_plate())) == "KJ4410"
    assert second.calls == []


def test_falls_through_to_next_engine(codec, reporter, fake_ocr):
    broken = fake_ocr(error=OSError("missing binary"), name="Primary")
    blank = fake_ocr("", name="Blank")
    backup = fake_ocr("XY9", name="Backup")
    recognizer = TextRecognizer([broken, blank, backup], codec, reporter)

    assert asyncio.run(recognizer.recognize(_plate())) == "XY9"
    assert [e[0] for e in reporter.events] == ["ocr_error"]
    assert len(blank.calls) == 1


def test_unencodable_crop_is_reported_not_raised(codec, reporter, fake_ocr):
    engine = fake_ocr("AB123")
    recognizer = TextRecognizer([engine], codec, reporter)

    assert asyncio.run(recognizer.recognize(np.zeros((0, 0, 3), dtype=np.uint8))) == ""
    assert engine.calls == []
    assert reporter.events[0][0] == "ocr_error"


def test_no_engines_means_no_text(codec, reporter):
    assert asyncio.run(TextRecognizer([], codec, reporter).recognize(_plate())) == ""


def test_clean_plate_text():
    assert clean_plate_text("  KA 01-AB 1234\n") == "KA01AB1234"
    assert clean_plate_text("") == ""
    assert clean_plate_text(None) == ""


class ExplodingOcr:
    name = "Exploding"

    def extract_text(self, image_bytes):
        raise ValueError("engine blew up")


def test_unexpected_engine_exception_is_contained(codec, reporter, fake_ocr):
    backup = fake_ocr("QW12", name="Backup")
    recognizer = TextRecognizer([ExplodingOcr(), backup], codec, reporter)

    assert asyncio.run(recognizer.recognize(_plate())) == "QW12"
    assert reporter.events == [("ocr_error", "Exploding", "engine blew up")]
