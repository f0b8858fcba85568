import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from . import config
from .intent import extract_intent
from .logging_config import setup_logging
from .models import PlanBody, PlanRequest, PlanResult, QueryRequest, RequestedFacet
from .orchestrator import plan

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Inkle Multi-Agent Tourism System")


def _invalid(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"ok": False, "error": "invalid_request", "message": message},
    )


def _as_text(value) -> Optional[str]:
    return value if isinstance(value, str) else None


def _respond(result: PlanResult, **extra) -> JSONResponse:
    code = status.HTTP_200_OK if result.ok else status.HTTP_404_NOT_FOUND
    return JSONResponse(status_code=code, content={**result.model_dump(mode="json"), **extra})


async def _run_plan(place: Optional[str], what: Optional[str]) -> JSONResponse:
    if not place or not place.strip():
        return _invalid("Place parameter is required")
    req = PlanRequest(place=place.strip(), what=RequestedFacet.from_hint(what))
    logger.info(f"Planning {req.what.value} for {req.place!r}")
    return _respond(await plan(req))


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "ok": False,
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
        },
    )


@app.get("/health")
def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/plan")
async def plan_get(place: Optional[str] = None, what: Optional[str] = None):
    return await _run_plan(place, what)


@app.post("/plan")
async def plan_post(req: Optional[PlanBody] = None):
    req = req or PlanBody()
    return await _run_plan(_as_text(req.place), _as_text(req.what))


@app.post("/query")
async def query(req: Optional[QueryRequest] = None):
    text = (_as_text(req.query if req else None) or "").strip()
    if not text:
        return _invalid("Query parameter is required")

    intent = extract_intent(text)
    if not intent.place:
        return _invalid("Could not extract place name from query")

    logger.info(f"Query {text!r} parsed as {intent.facet.value} for {intent.place!r}")
    result = await plan(PlanRequest(place=intent.place, what=intent.facet))
    return _respond(result, intent={"place": intent.place, "what": intent.facet.value})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=config.API_HOST, port=config.API_PORT)
