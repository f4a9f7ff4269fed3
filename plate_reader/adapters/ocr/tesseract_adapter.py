from typing import Optional
import io
import os
import pytesseract
from PIL import Image
from plate_reader.ports.ocr_port import OcrPort
from plate_reader.domain.models import PLATE_CHARSET
from plate_reader.core.config import settings
from plate_reader.core.exceptions import OcrEngineError

# Configure Tesseract executable path (env first, then the Windows default install)
if settings.tesseract_cmd:
    pytesseract.pytesseract.tesseract_cmd = settings.tesseract_cmd
elif os.name == 'nt':  # Windows
    tesseract_cmd = r'C:\Program Files\Tesseract-OCR\tesseract.exe'
    if os.path.exists(tesseract_cmd):
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd


def build_tesseract_config(psm: int, oem: int, whitelist: str) -> str:
    return f"--oem {oem} --psm {psm} -c tessedit_char_whitelist={whitelist}"


class TesseractPlateAdapter(OcrPort):
    """
    OCR for a single plate line: uppercase letters and digits only.
    """
    name = "Tesseract"

    def __init__(self, psm: int = 7, oem: int = 3, whitelist: str = PLATE_CHARSET, config: Optional[str] = None):
        self.psm = psm
        self.oem = oem
        self.whitelist = whitelist
        self.config = config or build_tesseract_config(psm, oem, whitelist)

    def extract_text(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                return pytesseract.image_to_string(img, config=self.config)
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, OSError) as exc:
            raise OcrEngineError(self.name, exc) from exc
