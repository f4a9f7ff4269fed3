import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence, Tuple
import numpy as np

from plate_reader.adapters.codec.opencv_codec import OpenCvCodec
from plate_reader.core.config import settings
from plate_reader.core.container import build_service
from plate_reader.core.exceptions import ImageDecodeError
from plate_reader.core.logging_setup import setup_logging
from plate_reader.domain.services import PlateRecognitionService

logger = logging.getLogger(__name__)


def recognize_license_plate(
    image_path: str,
    service: Optional[PlateRecognitionService] = None,
) -> Tuple[Optional[np.ndarray], Optional[str]]:
    """
    Reads the image at `image_path` and runs the plate pipeline on it.
    Raises ImageDecodeError when the file is missing or unreadable.
    """
    image = OpenCvCodec().decode(image_path)
    service = service or build_service()
    result = asyncio.run(service.process(image))
    return result.as_tuple()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="plate-reader", description="Find a license plate in a photo and read it.")
    parser.add_argument("image_path", help="path to the input image")
    parser.add_argument("--no-save", action="store_true", help="do not write result images to the output folder")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)
    service = build_service(save_results=False if args.no_save else None)

    try:
        plate, text = recognize_license_plate(args.image_path, service)
    except ImageDecodeError as exc:
        logger.error(exc.message)
        return 1

    if plate is None:
        print("No license plate detected")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
