"""HTTP route definitions for the service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas import (
    CollectionItemModel,
    CollectionResponse,
    DepotResponse,
    LoadIssueModel,
    StatsResponse,
)
from services.aggregator import Aggregator
from services.depot import extract_depot
from services.loader import CollectionLoader, LoadResult
from settings import get_settings
from storage.collection_file import (
    CollectionFile,
    CollectionLoadError,
    build_default_collection_file,
)

router = APIRouter()


def get_collection_file() -> CollectionFile:
    return build_default_collection_file()


def get_load_result(
    source: CollectionFile = Depends(get_collection_file),
) -> LoadResult:
    loader = CollectionLoader(default_currency=get_settings().currency)
    try:
        return loader.load_file(source)
    except FileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except CollectionLoadError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc


@router.get(
    "/collection",
    response_model=CollectionResponse,
    summary="List the collection elements.",
)
async def list_collection(
    result: LoadResult = Depends(get_load_result),
) -> CollectionResponse:
    collection = result.collection
    return CollectionResponse(
        description=collection.description,
        version=collection.version,
        modified_at=collection.modified_at,
        items=[CollectionItemModel.from_item(item) for item in collection.sorted_items()],
        issues=[LoadIssueModel.from_issue(issue) for issue in result.issues],
    )


@router.get(
    "/collection/stats",
    response_model=StatsResponse,
    summary="Yearly statistics by category with a TOTAL row.",
)
async def collection_stats(
    result: LoadResult = Depends(get_load_result),
) -> StatsResponse:
    stats = Aggregator(default_currency=get_settings().currency).aggregate(result.collection)
    return StatsResponse.from_stats(stats, result.issues)


@router.get(
    "/collection/depot",
    response_model=DepotResponse,
    summary="Locomotives with their decoder information.",
)
async def collection_depot(
    result: LoadResult = Depends(get_load_result),
) -> DepotResponse:
    return DepotResponse.from_depot(extract_depot(result.collection))


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
