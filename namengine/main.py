import math
from typing import Any, List

from fastapi import Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn
import logging

from namengine.core.types import ParameterDescriptor
from namengine.params.errors import SchemaError
from namengine.params.parametric import (
    parse_parameter_descriptors,
    default_values,
    descriptors_to_schema,
)

# Configure Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("nam-parametric")

app = FastAPI(
    title="NAM Parametric",
    version="1.0.0",
    description="Parametric control descriptors for neural amp models"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SchemaError)
async def schema_error_handler(request: Request, exc: SchemaError):
    logger.warning("[Parametric] Rejected config (%s): %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "parameter": exc.parameter},
    )


def _parse_for_response(config: Any) -> List[ParameterDescriptor]:
    """Parse, then reject values that JSON responses cannot carry (NaN, +/-inf)."""
    descriptors = parse_parameter_descriptors(config)
    for d in descriptors:
        for field in ("default_value", "min_value", "max_value"):
            value = getattr(d, field)
            if value is not None and not math.isfinite(value):
                raise SchemaError(
                    f"Parameter `{d.name}` has non-finite `{field}` ({value}).",
                    parameter=d.name,
                )
    return descriptors


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "nam-parametric"}


@app.post("/parametric/descriptors")
async def parametric_descriptors(config: Any = Body(...)):
    """
    Parses a `config.parametric` object.
    Returns descriptors in trainer order plus the matching default vector.
    """
    descriptors = _parse_for_response(config)
    return {
        "descriptors": [d.to_dict() for d in descriptors],
        "defaults": default_values(descriptors).tolist(),
    }


@app.post("/parametric/schema")
async def parametric_schema(config: Any = Body(...)):
    """Parses a `config.parametric` object into a name-keyed schema (type, default, min, max)."""
    return descriptors_to_schema(_parse_for_response(config))


if __name__ == "__main__":
    uvicorn.run("namengine.main:app", host="0.0.0.0", port=8000, reload=True)
