from functools import lru_cache
import io
import logging
from fastapi import APIRouter, UploadFile, File, HTTPException, Depends
from fastapi.responses import StreamingResponse
from plate_reader.ports.detector_port import PlateDetectorPort
from plate_reader.ports.codec_port import ImageCodecPort
from plate_reader.adapters.codec.opencv_codec import OpenCvCodec
from plate_reader.adapters.detector.color_contour_adapter import ColorContourAdapter
from plate_reader.domain import image_utils
from plate_reader.domain.services import PlateRecognitionService
from plate_reader.core.container import build_service
from plate_reader.core.exceptions import ImageCodecError, ImageDecodeError

logger = logging.getLogger(__name__)

router = APIRouter()

ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/png", "image/webp")


# Dependency Injection (Cached)
@lru_cache()
def get_detector() -> PlateDetectorPort:
    return ColorContourAdapter()

@lru_cache()
def get_codec() -> ImageCodecPort:
    return OpenCvCodec()

@lru_cache()
def get_service() -> PlateRecognitionService:
    return build_service()


async def _read_image(file: UploadFile, codec: ImageCodecPort):
    if file.content_type not in ALLOWED_CONTENT_TYPES:
        raise HTTPException(status_code=415, detail="Only JPG/PNG/WEBP supported")

    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Empty file")

    try:
        return codec.decode_bytes(data)
    except ImageDecodeError:
        raise HTTPException(status_code=400, detail="Could not decode image")


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/detect")
async def detect(
    file: UploadFile = File(...),
    detector: PlateDetectorPort = Depends(get_detector),
    codec: ImageCodecPort = Depends(get_codec),
):
    img = await _read_image(file, codec)

    box = detector.detect_plate(img)
    if box is None:
        raise HTTPException(status_code=404, detail="No plate detected")

    plate = image_utils.crop_region(img, box)
    try:
        buffer = codec.encode_jpeg(plate)
    except ImageCodecError as exc:
        logger.error(exc.message)
        raise HTTPException(status_code=500, detail="Could not encode image")

    return StreamingResponse(
        io.BytesIO(buffer),
        media_type="image/jpeg",
        headers={"Content-Disposition": "attachment; filename=plate.jpg"}
    )


@router.post("/recognize", response_model=dict)
async def recognize(
    file: UploadFile = File(...),
    service: PlateRecognitionService = Depends(get_service),
    codec: ImageCodecPort = Depends(get_codec),
):
    img = await _read_image(file, codec)
    result = await service.process(img)

    return {
        "fileName": file.filename,
        "status": result.status.value,
        "plateText": result.text,
        "bbox": result.box.model_dump() if result.box else None,
    }
