from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse

from app.core.config import settings
from app.routers import trips
from app.schemas.trip import ErrorEnvelope

STATIC_DIR = Path(__file__).parent / "static"

app = FastAPI(
    title=settings.project_name,
    version="1.0.0",
    debug=settings.debug,
)

# Include routers
app.include_router(trips.router, prefix=settings.api_prefix)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report bad query parameters in the same {"errors": ...} envelope as lookup failures."""
    envelope = ErrorEnvelope(
        errors={"error": "invalid_coordinates", "detail": jsonable_encoder(exc.errors())}
    )
    return JSONResponse(status_code=422, content=envelope.model_dump())


@app.get("/", include_in_schema=False)
def root():
    """Coordinate input page."""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
