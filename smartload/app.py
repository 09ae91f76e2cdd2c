from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Dict, Any
import logging
import time

from . import __version__
from .models import ErrorDetail, ErrorResponse, OptimizeRequest, OptimizeResponse, ParetoResponse
from .models.config import Algorithm
from .objectives import PARETO_WEIGHTS, utilization_metrics
from .service import LoadOptimizerService
from .settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()
service = LoadOptimizerService.from_settings(settings)

app = FastAPI(title="SmartLoad Optimizer API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_methods=["*"], allow_headers=["*"],
)


ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {code: {"model": ErrorResponse} for code in (400, 413, 500)}


def _error(code: int, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=code, content=body.model_dump())


def _validation_message(exc: RequestValidationError) -> str:
    errs = exc.errors()
    if not errs:
        return "validation failed"
    first = errs[0]
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = str(first.get("msg", "invalid value")).replace("Value error, ", "")
    return f"validation failed: {loc}: {msg}" if loc else f"validation failed: {msg}"


# ----------- middleware -----------
@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    length = request.headers.get("content-length")
    if length is not None and length.isdigit() and int(length) > settings.max_body_bytes:
        return _error(413, "Request body too large")
    return await call_next(request)


@app.middleware("http")
async def access_log(request: Request, call_next):
    t0 = time.perf_counter()
    response = await call_next(request)
    latency_ms = (time.perf_counter() - t0) * 1000
    logger.info("%d - %.2fms %s %s", response.status_code, latency_ms, request.method, request.url.path)
    return response


# ----------- error envelope -----------
@app.exception_handler(RequestValidationError)
async def on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(400, _validation_message(exc))


@app.exception_handler(StarletteHTTPException)
async def on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def on_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error")


# ----------- health -----------
def _health() -> Dict[str, str]:
    return {"status": "UP", "service": "SmartLoad Optimizer API", "version": __version__}

app.get("/health")(_health)
app.get("/healthz")(_health)
app.get("/actuator/health")(_health)


# ----------- optimizer endpoints -----------
@app.post("/api/v1/load-optimizer/optimize", response_model=OptimizeResponse, responses=ERROR_RESPONSES)
def endpoint_optimize(req: OptimizeRequest) -> Dict[str, Any]:
    truck, orders, cfg = req.to_domain()
    result, algorithm = service.optimize(truck, orders, cfg)
    return {
        "truck_id": truck.id,
        "selected_order_ids": result.order_ids,
        "total_payout_cents": result.total_payout,
        "total_weight_lbs": result.total_weight,
        "total_volume_cuft": result.total_volume,
        **utilization_metrics(result.total_weight, result.total_volume, truck),
        "algorithm": algorithm.value,
        "compute_time_ms": result.compute_time_ms,
    }


@app.post("/api/v1/load-optimizer/pareto-solutions", response_model=ParetoResponse, responses=ERROR_RESPONSES)
def endpoint_pareto(
    req: OptimizeRequest,
    max_solutions: int = Query(settings.pareto_max_solutions, ge=1, le=len(PARETO_WEIGHTS)),
) -> Dict[str, Any]:
    truck, orders, cfg = req.to_domain()
    algorithm = cfg.algorithm if cfg is not None else Algorithm.AUTO
    solutions = service.pareto_solutions(truck, orders, max_solutions, algorithm)
    return {
        "truck_id": truck.id,
        "solutions": [s.as_payload() for s in solutions],
        "count": len(solutions),
    }
