from typing import Protocol


class OcrPort(Protocol):
    """
    Accepts a losslessly encoded image (PNG bytes) and returns the raw text.
    Engine failures are raised as OcrEngineError.
    """
    name: str

    def extract_text(self, image_bytes: bytes) -> str:
        ...
