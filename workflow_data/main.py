import logging
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, File, HTTPException, Query, Request, UploadFile
from fastapi.responses import JSONResponse

from .aggregate import pivot
from .config import get_settings
from .errors import ContractError, DataError
from .logging_config import setup_logging
from .models import DatasetSummary, HealthResponse, RowsResponse
from .ordering import sort
from .rules import SORT_ASC
from .tabular import decode_bytes, parse_csv
from .views import summary

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="workflow-data",
    description="Summaries, pivots and sorts over uploaded CSV files",
    version="0.1.0",
)


@app.exception_handler(DataError)
async def data_error_handler(request: Request, exc: DataError):
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(ContractError)
async def contract_error_handler(request: Request, exc: ContractError):
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _read_records(file: UploadFile):
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    limit = get_settings().max_upload_bytes
    raw = await file.read(limit + 1)
    if len(raw) > limit:
        raise HTTPException(status_code=413, detail=f"Upload exceeds {limit} bytes")

    decoded = decode_bytes(raw)
    records = parse_csv(decoded.text)
    logger.info("Parsed %s: %d rows (%s)", file.filename, len(records), decoded.encoding)
    return records


def _json_keys(row: Dict[Any, Any]) -> Dict[str, Any]:
    """JSON object keys must be text; a missing column (None) becomes "".

    Raises DataError if two keys collapse to the same text, e.g. 1 and "1".
    """
    out: Dict[str, Any] = {}
    for key, value in row.items():
        name = "" if key is None else str(key)
        if name in out:
            raise DataError(f"pivot: columns collide as JSON key \"{name}\".")
        out[name] = value
    return out


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/summary", response_model=DatasetSummary)
async def summarize_csv(file: UploadFile = File(...)):
    return summary(await _read_records(file))


@app.post("/pivot", response_model=RowsResponse)
async def pivot_csv(
    row_key: str = Query(...),
    col_key: str = Query(...),
    value_key: str = Query(...),
    file: UploadFile = File(...),
):
    records = await _read_records(file)
    rows = pivot(records, row_key, col_key, value_key)
    return {"rows": [_json_keys(row) for row in rows]}


@app.post("/sort", response_model=RowsResponse)
async def sort_csv(
    keys: str = Query(..., description="Comma-separated field names, highest priority first"),
    order: str = Query(SORT_ASC),
    file: UploadFile = File(...),
):
    records = await _read_records(file)
    key_list = [k.strip() for k in keys.split(",") if k.strip()]
    return {"rows": sort(records, key_list, order)}
