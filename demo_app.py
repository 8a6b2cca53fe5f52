"""Demo FastAPI application with the ETag middleware.

This application demonstrates conditional request handling.
Run with: python demo_app.py
Then try:
    curl -i http://localhost:8000/api/articles/1
    curl -i -H 'If-None-Match: <etag from above>' http://localhost:8000/api/articles/1
    curl -i -X PUT -H 'If-Match: "stale"' -H 'Content-Type: application/json' \\
        -d '{"title": "x", "body": "y"}' http://localhost:8000/api/articles/1
"""

from datetime import UTC, datetime

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from etag_middleware.adapters.asgi import ASGIETagMiddleware
from etag_middleware.config import ETagConfig
from etag_middleware.observability.logging import configure_logging

configure_logging(level="INFO", json_output=False)

# Create FastAPI app
app = FastAPI(
    title="ETag Middleware Demo",
    description="Demo API showing ETag revalidation and preconditions",
    version="0.1.0",
)

# ETAG_STRENGTH=weak switches to weak validators
app.add_middleware(ASGIETagMiddleware, config=ETagConfig.from_env())


class Article(BaseModel):
    title: str
    body: str


articles: dict[str, Article] = {
    "1": Article(title="Conditional requests", body="If-None-Match saves bandwidth."),
}


@app.get("/")
async def root():
    """Root endpoint - returns API info."""
    return {
        "name": "ETag Middleware Demo",
        "version": "0.1.0",
        "endpoints": {
            "GET /api/articles/{id}": "Fetch an article (revalidate with If-None-Match)",
            "PUT /api/articles/{id}": "Replace an article (guard with If-Match)",
            "GET /api/time": "Changes every second, so never 304s for long",
        },
    }


@app.get("/api/articles/{article_id}")
async def get_article(article_id: str):
    if article_id not in articles:
        raise HTTPException(status_code=404, detail="Article not found")
    return articles[article_id]


@app.put("/api/articles/{article_id}")
async def put_article(article_id: str, article: Article):
    """Replace an article.

    The middleware evaluates If-Match after this handler has run. On a 412
    the response is discarded, not the write.
    """
    articles[article_id] = article
    return article


@app.get("/api/time")
async def get_time():
    return {"now": datetime.now(UTC).replace(microsecond=0).isoformat()}


if __name__ == "__main__":
    print("=" * 60)
    print("ETag Middleware Demo Server")
    print("=" * 60)
    print("\nStarting server at http://localhost:8000")
    print("\nPress Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
