import os
import cv2
import numpy as np
from plate_reader.ports.codec_port import ImageCodecPort
from plate_reader.core.exceptions import ImageDecodeError, ImageCodecError


class OpenCvCodec(ImageCodecPort):
    """Reads and writes BGR images with OpenCV."""

    def decode(self, path: str) -> np.ndarray:
        if not os.path.isfile(path):
            raise ImageDecodeError(path, FileNotFoundError(path))
        img = cv2.imread(path, cv2.IMREAD_COLOR)
        if img is None:
            raise ImageDecodeError(path)
        return img

    def decode_bytes(self, data: bytes) -> np.ndarray:
        if not data:
            raise ImageDecodeError("empty buffer")
        img_array = np.frombuffer(data, np.uint8)
        img = cv2.imdecode(img_array, cv2.IMREAD_COLOR)
        if img is None:
            raise ImageDecodeError("buffer")
        return img

    def encode_png(self, img: np.ndarray) -> bytes:
        return self._encode(".png", img)

    def encode_jpeg(self, img: np.ndarray) -> bytes:
        return self._encode(".jpg", img)

    def write(self, path: str, img: np.ndarray) -> None:
        try:
            ok = cv2.imwrite(path, img)
        except cv2.error as exc:
            raise ImageCodecError(f"write {path}", exc) from exc
        if not ok:
            raise ImageCodecError(f"write {path}")

    def _encode(self, ext: str, img: np.ndarray) -> bytes:
        if img is None or img.size == 0:
            raise ImageCodecError(f"encode {ext}", ValueError("empty image"))
        try:
            success, buffer = cv2.imencode(ext, img)
        except cv2.error as exc:
            raise ImageCodecError(f"encode {ext}", exc) from exc
        if not success:
            raise ImageCodecError(f"encode {ext}")
        return buffer.tobytes()
