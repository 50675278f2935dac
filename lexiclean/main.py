import logging

from fastapi import FastAPI, HTTPException

from .models import CleanReport, HealthResponse, NormalizeRequest, NormalizeResponse
from .normalize import clean
from .paths import parse, render
from .settings import get_settings

logging.basicConfig(level=get_settings().log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="lexiclean",
    description="Lexical path normalization without touching the filesystem",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/normalize", response_model=NormalizeResponse)
def normalize_path(request: NormalizeRequest):
    if (request.path is None) == (request.components is None):
        logger.info("rejected /normalize request: need exactly one of path or components")
        raise HTTPException(status_code=422, detail="Provide exactly one of 'path' or 'components'")

    settings = get_settings()
    flavor = request.flavor or settings.default_flavor
    empty_policy = request.empty_policy or settings.empty_path_policy

    if request.path is not None:
        components = parse(request.path, flavor)
    else:
        components = request.components

    cleaned, summary = clean(components, empty_policy)
    return NormalizeResponse(
        path=render(cleaned, flavor),
        components=cleaned,
        report=CleanReport(summary=summary, flavor=flavor, empty_policy=empty_policy),
    )
