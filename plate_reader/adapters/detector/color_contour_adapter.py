from typing import Optional
import numpy as np
from plate_reader.ports.detector_port import PlateDetectorPort
from plate_reader.domain.models import BoundingBox, DetectionPolicy, DEFAULT_POLICY
from plate_reader.domain import image_utils


class ColorContourAdapter(PlateDetectorPort):
    """
    Proposes a plate region from yellow/white colour masks and contour shape.
    Stateless: the same image always yields the same box.
    """
    def __init__(self, policy: DetectionPolicy = DEFAULT_POLICY):
        self.policy = policy

    def detect_plate(self, img_bgr: np.ndarray) -> Optional[BoundingBox]:
        return image_utils.find_plate_region(img_bgr, self.policy)
