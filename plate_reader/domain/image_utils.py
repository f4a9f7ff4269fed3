from typing import List, Optional
import numpy as np
import cv2

from plate_reader.domain.models import BoundingBox, DetectionPolicy, DEFAULT_POLICY


def build_plate_mask(img_bgr: np.ndarray, policy: DetectionPolicy = DEFAULT_POLICY) -> np.ndarray:
    """
    Binary mask (0/255) of the yellow-ish and white-ish pixels, cleaned with
    a close followed by an open.
    """
    hsv = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2HSV)

    yellow = cv2.inRange(
        hsv,
        np.array(policy.yellow_lower, dtype=np.uint8),
        np.array(policy.yellow_upper, dtype=np.uint8)
    )
    white = cv2.inRange(
        hsv,
        np.array(policy.white_lower, dtype=np.uint8),
        np.array(policy.white_upper, dtype=np.uint8)
    )
    mask = cv2.bitwise_or(yellow, white)

    # CLOSE first to merge plate fragments, then OPEN to drop specks
    kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (policy.kernel_size, policy.kernel_size))
    mask = cv2.morphologyEx(mask, cv2.MORPH_CLOSE, kernel)
    mask = cv2.morphologyEx(mask, cv2.MORPH_OPEN, kernel)
    return mask


def largest_contours(mask: np.ndarray, limit: int) -> List[np.ndarray]:
    cnts, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    # sorted() is stable, equal areas keep discovery order
    return sorted(cnts, key=cv2.contourArea, reverse=True)[:limit]


def is_plate_shaped(contour: np.ndarray, policy: DetectionPolicy = DEFAULT_POLICY) -> bool:
    perimeter = cv2.arcLength(contour, True)
    approx = cv2.approxPolyDP(contour, policy.approx_epsilon_ratio * perimeter, True)
    if not policy.min_vertices <= len(approx) <= policy.max_vertices:
        return False

    _, _, w, h = cv2.boundingRect(contour)
    if h == 0:
        return False
    aspect = w / float(h)
    if not policy.min_aspect_ratio <= aspect <= policy.max_aspect_ratio:
        return False

    return cv2.contourArea(contour) > policy.min_area


def find_plate_region(img_bgr: np.ndarray, policy: DetectionPolicy = DEFAULT_POLICY) -> Optional[BoundingBox]:
    """
    Returns the bounding box of the largest plate-shaped contour among the
    `policy.max_candidates` biggest ones, or None when nothing qualifies.
    """
    if img_bgr is None or img_bgr.size == 0:
        return None

    mask = build_plate_mask(img_bgr, policy)
    for contour in largest_contours(mask, policy.max_candidates):
        if is_plate_shaped(contour, policy):
            x, y, w, h = cv2.boundingRect(contour)
            return BoundingBox(x=x, y=y, w=w, h=h)
    return None


def crop_region(img_bgr: np.ndarray, box: BoundingBox) -> np.ndarray:
    return img_bgr[box.y:box.y + box.h, box.x:box.x + box.w].copy()
