"""SEO Tags Checker API – FastAPI app and endpoints."""

import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from advisor import suggest
from extractor import extract
from fetcher import RetrievalError, fetch_document, normalize_url
from previews import build_previews
from schemas import AnalysisResponse, AnalyzeHtmlRequest, AnalyzeRequest
from scorer import score

logger = logging.getLogger(__name__)

app = FastAPI(
    title="SEO Tags Checker API",
    description="Meta tag extraction, scoring and preview data for a single page",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def analyze_html(html: str, url: str) -> AnalysisResponse:
    """Pipeline: extract tags -> score, suggestions and previews from the same tags."""
    tags = extract(html)
    result = score(tags)
    response = AnalysisResponse.build(
        url=url,
        tags=tags,
        result=result,
        suggestions=suggest(tags),
        previews=build_previews(tags, url),
    )
    logger.info("Analyzed url=%s score=%d issues=%d", url or "-", result.score, len(result.issues))
    return response


@app.post("/analyze", response_model=AnalysisResponse)
def analyze(body: AnalyzeRequest) -> AnalysisResponse:
    """Fetch the page at `url` and analyze its tags."""
    normalized = normalize_url(body.url)
    if normalized is None:
        raise HTTPException(status_code=422, detail="Enter a valid URL")

    try:
        html = fetch_document(normalized)
    except RetrievalError as exc:
        logger.warning("Retrieval failed for %s: %s", normalized, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return analyze_html(html, normalized)


@app.post("/analyze/html", response_model=AnalysisResponse)
def analyze_raw_html(body: AnalyzeHtmlRequest) -> AnalysisResponse:
    """Analyze HTML supplied by the caller; nothing is fetched."""
    return analyze_html(body.html, body.url)


@app.get("/health")
def health() -> dict:
    """Health check for deployment."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=int(os.getenv("PORT", "8000")), reload=True)
