import logging
from pathlib import Path
from typing import Any, Dict, Tuple

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.concurrency import run_in_threadpool

import config
from logic.results import Ok, StorageError, ValidationError, WaitlistResult
from services.waitlist_service import submit_waitlist
from services.waitlist_store import WaitlistStore, close_pool, get_store, init_db

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

LANDING_PAGE = Path(__file__).resolve().parent / "static" / "index.html"


app = FastAPI(
    title="Cachet Waitlist",
    description="Landing page + waitlist email capture for Cachet.",
    version="0.1.0",
)

if config.CORS_ORIGIN_REGEX:
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=config.CORS_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["POST"],
        allow_headers=["*"],
    )


def response_for(result: WaitlistResult) -> Tuple[int, Dict[str, Any]]:
    """
    Map a submission outcome to (status code, JSON body).
    Storage detail stays in the logs.
    """
    if isinstance(result, Ok):
        return 200, {"ok": True}
    if isinstance(result, ValidationError):
        return 400, {"error": result.message}
    if isinstance(result, StorageError):
        return 500, {"error": "Server error"}
    raise TypeError(f"Unknown waitlist result: {result!r}")


@app.on_event("startup")
def _startup() -> None:
    if config.WAITLIST_INIT_DB:
        try:
            init_db()
        except Exception:
            logger.exception("waitlist init_db failed")


@app.on_event("shutdown")
def _shutdown() -> None:
    close_pool()


@app.get("/", include_in_schema=False)
def landing_page() -> FileResponse:
    return FileResponse(LANDING_PAGE, media_type="text/html")


@app.post("/api/waitlist")
async def waitlist(request: Request, store: WaitlistStore = Depends(get_store)) -> JSONResponse:
    # Raw body on purpose: a non-string email must be a 400, not a 422.
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    result = await run_in_threadpool(submit_waitlist, payload, store)
    status_code, body = response_for(result)
    return JSONResponse(body, status_code=status_code)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
