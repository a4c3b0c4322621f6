"""
FastAPI Server for Geohash Coverage

Provides API endpoints for:
- Computing the geohash coverage of a country geometry
- Decoding a single geohash
"""

from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .config import API_HOST, API_PORT, MAX_ALLOWED_DEPTH
from .coverage import find_country_geohashes, format_for_display, summarize_by_depth
from .geo.codec import geohash_info, is_valid_geohash


# FastAPI app
app = FastAPI(title="Geohash Coverage API")

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request Models
class CoverageRequest(BaseModel):
    geometry: Any = None
    country_code: str
    country_name: str
    max_depth: Optional[int] = Field(default=None, ge=1)
    include_summary: Optional[bool] = False


# API Endpoints
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/geohash/{geohash}")
async def get_geohash(geohash: str):
    """Bounding box, center and precision of a geohash."""
    if not is_valid_geohash(geohash):
        raise HTTPException(status_code=400, detail=f"Invalid geohash: {geohash}")
    return geohash_info(geohash)


@app.post("/api/coverage")
def compute_coverage(request: CoverageRequest):
    """Compute the geohash coverage of a country geometry.

    Declared sync so the CPU-bound search runs in the threadpool.
    """
    max_depth = request.max_depth
    if max_depth is not None and max_depth > MAX_ALLOWED_DEPTH:
        raise HTTPException(
            status_code=422,
            detail=f"max_depth must be <= {MAX_ALLOWED_DEPTH}",
        )

    result = find_country_geohashes(
        request.geometry,
        request.country_code,
        request.country_name,
        max_depth,
    )

    response = result.to_dict()
    if request.include_summary:
        response["summary"] = {str(k): v for k, v in summarize_by_depth(result).items()}
        response["byDepth"] = format_for_display(result)
    return response


def run_server(host: str = None, port: int = None):
    """Run the API server (defaults read from config at call time)."""
    import uvicorn
    uvicorn.run(app, host=host or API_HOST, port=port or API_PORT)


if __name__ == "__main__":
    run_server()
