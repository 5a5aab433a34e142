from dotenv import load_dotenv

# Load environment variables before config is read
load_dotenv()

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from huekit import __version__
from huekit.api.v1 import router as v1_router
from huekit.config import config
from huekit.schemas import HealthResponse
from huekit.utils.logging import get_logger
from huekit.utils.metrics import get_metrics

app = FastAPI(
    title="HueKit Color API",
    description="Color conversion, palette generation and color naming",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)


get_logger().info(
    "HueKit color API initialized",
    extra={"version": __version__, "namer_backend": config.NAMER_BACKEND},
)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(ok=True, version=__version__, service="huekit-colors")


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "HueKit Color API",
        "version": __version__,
        "docs": "/docs"
    }


@app.get("/metrics")
def metrics_summary():
    """Get in-process request metrics."""
    try:
        return get_metrics().get_summary()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get metrics: {str(e)}")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=False)
