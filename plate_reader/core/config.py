from pydantic import BaseModel
from typing import Optional
import os


class Settings(BaseModel):
    # Root folder for the per-day result dumps (output/<YYYY-MM-DD>/...)
    output_dir: str = os.getenv("OUTPUT_DIR", "output")
    save_results: bool = os.getenv("SAVE_RESULTS", "true").lower() in ("true", "1", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Explicit path to the tesseract binary, only needed when it is not on PATH
    tesseract_cmd: Optional[str] = os.getenv("TESSERACT_CMD")

settings = Settings()
