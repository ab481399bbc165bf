"""
FastAPI server — stateless mock ML prediction service.

POST /predict     {mag, floors, soil, material} -> 200 {damageScore, confidence, modelTags, timestamp}
                  invalid JSON / missing or mistyped fields -> 400 {"error": "Invalid data"}
OPTIONS /predict  -> 204 (CORS preflight)
anything else     -> 404 {"error": "Not found"}

Run with: uvicorn seismo_damage.api_server.app:app --host 0.0.0.0 --port 3001
"""

from __future__ import annotations

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from seismo_damage import __version__
from seismo_damage.api_server.middleware import install_middleware
from seismo_damage.config import get_settings
from seismo_damage.ml.predictor import DamagePredictor
from seismo_damage.seismo_logging import get_logger

logger = get_logger(__name__)

INVALID_DATA = {"error": "Invalid data"}
NOT_FOUND = {"error": "Not found"}


# -----------------------------------------------------------------------------
# Request / response models
# -----------------------------------------------------------------------------

class PredictRequest(BaseModel):
    """POST /predict body. Unknown keys (e.g. pga) are ignored."""

    model_config = ConfigDict(extra="ignore")

    mag: float = Field(..., strict=True, allow_inf_nan=False, description="Moment magnitude (Mw)")
    floors: int = Field(..., strict=True, ge=1, description="Number of floors")
    soil: str = Field(..., strict=True, description="Soil type, case-insensitive")
    material: str = Field(..., strict=True, description="Construction material, case-insensitive")


class PredictResponse(BaseModel):
    damageScore: float = Field(..., ge=0, le=100, description="Predicted damage percent, 1 decimal")
    confidence: float = Field(..., ge=0.85, le=0.95, description="Model confidence")
    modelTags: list[str] = Field(default_factory=list)
    timestamp: str = Field(..., description="ISO-8601 UTC time of prediction")


# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------

_predictor: DamagePredictor | None = None


def get_predictor() -> DamagePredictor:
    """Dependency: process-wide predictor, seeded from PREDICTION_SEED when set."""
    global _predictor
    if _predictor is None:
        seed = get_settings().prediction_seed
        _predictor = DamagePredictor(seed)
        logger.info("predictor_initialized", seeded=seed is not None)
    return _predictor


def reset_predictor_for_test() -> None:
    global _predictor
    _predictor = None


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Seismo Damage Prediction Service",
    description="Mock regression model for earthquake structural damage.",
    version=__version__,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)
install_middleware(app)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown paths and unsupported methods both answer 404 Not found."""
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content=NOT_FOUND)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.options("/predict", status_code=204)
async def predict_preflight() -> Response:
    return Response(status_code=204)


@app.post("/predict", response_model=PredictResponse)
async def predict(request: Request, predictor: DamagePredictor = Depends(get_predictor)):
    """Score one building; body parsed by hand so bad JSON is a 400, not a 422."""
    raw = await request.body()
    try:
        body = PredictRequest.model_validate_json(raw)
    except ValidationError as e:
        logger.info("predict_invalid_payload", error_count=e.error_count(), body_bytes=len(raw))
        return JSONResponse(status_code=400, content=INVALID_DATA)

    result = predictor.predict(body.mag, body.floors, body.soil, body.material)
    logger.info(
        "prediction_served",
        mag=body.mag,
        floors=body.floors,
        soil=body.soil,
        material=body.material,
        damage_score=result.damage_score,
    )
    return PredictResponse(**result.to_dict())
