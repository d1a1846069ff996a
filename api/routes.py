"""
API Routes

Read-only HTTP surface over ReadComicsClient. Successful results are
returned as JSON; failed results are mapped to an HTTP error by kind:

- transport -> 502 (the comic site could not be reached)
- schema    -> 422 (the page no longer matches the selectors)
- input     -> 400 (a rejected argument, e.g. a relative url)

Usage:
    from fastapi import FastAPI
    from api.routes import router

    app = FastAPI()
    app.state.comics_client = ReadComicsClient()
    app.include_router(router)
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from readcomics.client import ReadComics
from readcomics.models.categories import ComicCategory
from readcomics.models.extraction_result import ExtractionResult

# Create router for all comic routes
router = APIRouter(
    prefix="",
    tags=["comics"]
)

STATUS_BY_KIND = {
    "transport": status.HTTP_502_BAD_GATEWAY,
    "schema": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "input": status.HTTP_400_BAD_REQUEST,
}


def get_comics_client(request: Request) -> ReadComics:
    """Client stored on the application state at startup."""
    return request.app.state.comics_client


def _respond(result: ExtractionResult) -> Any:
    if result.success:
        return result.data
    raise HTTPException(
        status_code=STATUS_BY_KIND.get(result.error_kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail={
            "error": result.error,
            "kind": result.error_kind,
            "source": result.source,
        }
    )


@router.get("/")
def read_root():
    """
    Root endpoint.

    Returns:
        dict: Status message
    """
    return {"status": "ReadComics API is running."}


@router.get("/health")
def health_check():
    """
    Health check endpoint for Docker and monitoring.

    Returns:
        dict: Health status
    """
    return {
        "status": "healthy",
        "service": "readcomics",
        "version": "1.0.0"
    }


@router.get("/search")
async def search(q: str = Query("", description="Search term"), client: ReadComics = Depends(get_comics_client)):
    return _respond(await client.search_for_comic(q))


@router.get("/latest")
async def latest(page: int = Query(1, ge=1), client: ReadComics = Depends(get_comics_client)):
    return _respond(await client.get_latest_comics(page))


@router.get("/popular")
async def popular(client: ReadComics = Depends(get_comics_client)):
    return _respond(await client.get_popular_comics())


@router.get("/hot")
async def hot_updates(client: ReadComics = Depends(get_comics_client)):
    """
    Hot updates accumulated since the last reset.

    Every call parses the home page again and appends to what was
    gathered before; DELETE /hot starts over.
    """
    return _respond(await client.get_hot_comic_updates())


@router.delete("/hot", status_code=status.HTTP_204_NO_CONTENT)
def clear_hot_updates(client: ReadComics = Depends(get_comics_client)):
    client.clear_hot_updates()


@router.get("/categories")
def list_categories() -> List[Dict[str, str]]:
    return [
        {"name": category.name, "display_name": category.display_name, "url": category.url}
        for category in ComicCategory
    ]


@router.get("/categories/{name}")
async def comics_by_category(
    name: str,
    page: int = Query(1, ge=1),
    client: ReadComics = Depends(get_comics_client)
):
    category = ComicCategory.from_name(name)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown category: {name}")
    return _respond(await client.get_comics_by_category(page, category))


@router.get("/weekly")
async def weekly_packs(client: ReadComics = Depends(get_comics_client)):
    return _respond(await client.get_weekly_comic_packs())


@router.get("/details")
async def comic_details(url: str = Query(..., description="Absolute comic url"), client: ReadComics = Depends(get_comics_client)):
    return _respond(await client.get_comic_details(url))


@router.get("/pages")
async def chapter_pages(url: str = Query(..., description="Absolute chapter url"), client: ReadComics = Depends(get_comics_client)):
    return _respond(await client.get_chapter_pages(url))
