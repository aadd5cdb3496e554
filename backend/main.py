"""SEO Meta Checker API – FastAPI app."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from analyzer import analyze_url
from markup import render_tags
from schemas import AnalysisResult, AnalyzeRequest
from scraper import FetchError

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
CORS_ALLOW_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
]

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SEO Meta Checker API",
    description="Extract, score and preview a page's SEO meta tags",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _analyze_or_502(url: str) -> AnalysisResult:
    try:
        return analyze_url(url)
    except FetchError as exc:
        logger.error("Analysis of %s failed: %s", url, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@app.post("/api/analyze", response_model=AnalysisResult)
def analyze(body: AnalyzeRequest) -> AnalysisResult:
    """
    Pipeline: fetch page -> extract tags -> evaluate -> score, recommend, preview.
    """
    return _analyze_or_502(body.url)


@app.post("/api/analyze/markup", response_class=PlainTextResponse)
def analyze_markup(body: AnalyzeRequest) -> str:
    """Return the page's analyzable tags as copyable HTML, one per line."""
    result = _analyze_or_502(body.url)
    return render_tags(result.raw_tags)


@app.get("/health")
def health() -> dict:
    """Health check for deployment."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting SEO Meta Checker API")
    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
