"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kicks_match.api.v1 import analyze as analyze_router, pages as pages_router
from kicks_match.api.v1.router import router as v1_router
from kicks_match.core.config import get_settings
from kicks_match.core.logging_config import init_logging
from kicks_match.core.middleware import TraceIdMiddleware

init_logging()
logger = logging.getLogger(__name__)

settings = get_settings()
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Kicks Match - match clothes to your kicks.

    Upload a photo of a shoe and get back a structured description
    (brand guess, colors, materials, style tags) produced by a hosted
    multimodal model.

    ## Main endpoints

    - `GET /` - upload page
    - `POST /api/analyze` - analyze one shoe photo (multipart field `image`)
    - `GET /health` - health check
    """,
    license_info={
        "name": "MIT",
    },
    tags_metadata=[
        {
            "name": "analyze",
            "description": "Shoe photo analysis",
        },
        {
            "name": "ui",
            "description": "Server-rendered upload page",
        },
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(TraceIdMiddleware)

# Include routers
app.include_router(v1_router)
app.include_router(analyze_router.router)
app.include_router(pages_router.router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": settings.app_version}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("kicks_match.main:app", host="0.0.0.0", port=8000, reload=True)
