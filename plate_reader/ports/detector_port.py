from typing import Protocol, Optional
import numpy as np
from plate_reader.domain.models import BoundingBox


class PlateDetectorPort(Protocol):
    def detect_plate(self, img_bgr: np.ndarray) -> Optional[BoundingBox]:
        ...
