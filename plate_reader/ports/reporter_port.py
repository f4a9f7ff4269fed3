from typing import Protocol
import numpy as np


class ReporterPort(Protocol):
    """Sink for pipeline events and result persistence. Nothing is read back."""

    def no_plate(self) -> None:
        ...

    def text_missing(self) -> None:
        ...

    def text_recognized(self, text: str) -> None:
        ...

    def ocr_error(self, engine: str, message: str) -> None:
        ...

    def persist(self, image: np.ndarray, plate: np.ndarray, text: str) -> None:
        ...
