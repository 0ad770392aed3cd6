# bookstore/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .catalog import stock_router, storefront_router
from .catalog.schemas import ErrorBody
from .config import settings
from .errors import AlreadyExists, BookStoreError, InvalidArgument, NotFound, OutOfStock

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="A Certain Bookstore",
    description=(
        "In-memory book inventory and rating store with a storefront API "
        "for customers and a stock API for staff."
    ),
    version="1.0.0",
)

app.include_router(storefront_router)
app.include_router(stock_router)


def _status_for(exc: BookStoreError) -> int:
    # AlreadyExists is an InvalidArgument, so it is checked first
    if isinstance(exc, (AlreadyExists, OutOfStock)):
        return 409
    if isinstance(exc, NotFound):
        return 404
    if isinstance(exc, InvalidArgument):
        return 400
    return 500


@app.exception_handler(BookStoreError)
async def bookstore_error_handler(request: Request, exc: BookStoreError) -> JSONResponse:
    status_code = _status_for(exc)
    logger.info("%s %s -> %s %s", request.method, request.url.path, status_code, exc)
    body = ErrorBody(detail=str(exc), error=type(exc).__name__, isbns=exc.isbns)
    return JSONResponse(status_code=status_code, content=body.model_dump())


# Basic route for quick liveness checks
@app.get("/")
def health_check():
    return {"status": "ok", "message": "A Certain Bookstore is open"}
