from typing import Optional
from plate_reader.adapters.codec.opencv_codec import OpenCvCodec
from plate_reader.adapters.detector.color_contour_adapter import ColorContourAdapter
from plate_reader.adapters.ocr.tesseract_adapter import TesseractPlateAdapter
from plate_reader.adapters.reporting.filesystem_reporter import FileSystemReporter, LoggingReporter
from plate_reader.domain.services import PlateRecognitionService
from plate_reader.domain.text_recognizer import TextRecognizer
from plate_reader.core.config import settings


def build_service(
    save_results: Optional[bool] = None,
    output_dir: Optional[str] = None,
) -> PlateRecognitionService:
    codec = OpenCvCodec()
    if save_results is None:
        save_results = settings.save_results

    if save_results:
        reporter = FileSystemReporter(output_dir or settings.output_dir, codec)
    else:
        reporter = LoggingReporter()

    # Additional engines go after Tesseract; they only run when it reads nothing
    recognizer = TextRecognizer([TesseractPlateAdapter()], codec, reporter)
    return PlateRecognitionService(ColorContourAdapter(), recognizer, reporter)
