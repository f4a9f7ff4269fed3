from fastapi import FastAPI
from plate_reader.api.routers import router
from plate_reader.core.config import settings
from plate_reader.core.logging_setup import setup_logging


def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title="Plate Reader Service", version="1.0.0")
    app.include_router(router)
    return app


app = create_app()
