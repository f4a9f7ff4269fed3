from typing import Protocol
import numpy as np


class ImageCodecPort(Protocol):
    def decode(self, path: str) -> np.ndarray:
        ...

    def decode_bytes(self, data: bytes) -> np.ndarray:
        ...

    def encode_png(self, img: np.ndarray) -> bytes:
        ...

    def encode_jpeg(self, img: np.ndarray) -> bytes:
        ...

    def write(self, path: str, img: np.ndarray) -> None:
        ...
