"""
FastAPI Application: DNI Scanner.

Text in, JSON out: the OCR engine runs elsewhere and posts the text
of each document side here.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dni_scanner.api.routes.scan import router as scan_router
from dni_scanner.config.settings import get_settings
from dni_scanner.core.exceptions import ParsingError
from dni_scanner.core.use_cases.scan_document import ScanDocumentUseCase

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="DNI Scanner",
    description="Extracts structured identity fields from the OCR text of Argentine DNI cards.",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register scan routes
app.include_router(scan_router, prefix="/api/v1", tags=["Scan"])


@app.exception_handler(ParsingError)
async def parsing_error_handler(request: Request, exc: ParsingError):
    logger.warning(f"Parsing failed on {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# ── Health ──
@app.get("/health")
async def health():
    settings = get_settings()
    return {
        "status": "ok",
        "version": VERSION,
        "engine_version": ScanDocumentUseCase.ENGINE_VERSION,
        "env": settings.env,
        "parallel_sides": settings.parallel_sides,
        "birth_year_window": [settings.birth_year_min, settings.birth_year_max],
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("dni_scanner.api.main:app", host=settings.api_host, port=settings.api_port, reload=settings.debug)
