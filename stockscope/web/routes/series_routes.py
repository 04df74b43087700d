"""
Series API routes
Upload, inspect, clear and analyze the active price series.
"""

from fastapi import APIRouter, BackgroundTasks, HTTPException, Query, Request

from stockscope.core.services.statistics import date_range_label
from stockscope.web.models import APIResponse, InsightModel, SeriesModel, StatisticsModel
from stockscope.web.utils import get_request_id, get_session

router = APIRouter()


def _series_data(request: Request) -> dict:
    snapshot = get_session(request).snapshot()
    return SeriesModel.from_snapshot(snapshot, date_range_label(snapshot.points)).model_dump(mode="json")


@router.post("/series", response_model=APIResponse)
async def upload_series(
    request: Request,
    background_tasks: BackgroundTasks,
    insights: bool = Query(True, description="Request an AI insight once the series is loaded"),
) -> APIResponse:
    """
    Replace the active series with the CSV sent as the request body.

    Ingestion errors return 422 and leave the current series in place.
    An upload overtaken by a newer one returns 409.
    """
    session = get_session(request)
    outcome = await session.upload(request.body())
    if not outcome.applied:
        raise HTTPException(status_code=409, detail="Upload superseded by a newer upload")

    if insights:
        background_tasks.add_task(session.refresh_insight)

    ingestion = outcome.ingestion
    rows = ingestion.surviving_rows if ingestion else len(outcome.snapshot)
    return APIResponse(
        success=True,
        data={
            "series": _series_data(request),
            "statistics": StatisticsModel.from_statistics(session.statistics).model_dump(),
            "parsed_rows": ingestion.parsed_rows if ingestion else rows,
            "rejected_rows": ingestion.rejected_rows if ingestion else 0,
        },
        message=f"Loaded {rows} rows.",
        request_id=get_request_id(request),
    )


@router.get("/series", response_model=APIResponse)
async def get_series(request: Request) -> APIResponse:
    """Current series in chronological order."""
    return APIResponse(success=True, data=_series_data(request), request_id=get_request_id(request))


@router.delete("/series", response_model=APIResponse)
async def clear_series(request: Request) -> APIResponse:
    """Discard the active series."""
    get_session(request).clear()
    return APIResponse(
        success=True,
        data=_series_data(request),
        message="Series cleared",
        request_id=get_request_id(request),
    )


@router.get("/series/statistics", response_model=APIResponse)
async def get_statistics(request: Request) -> APIResponse:
    """Min, max, mean and period return of the active series."""
    statistics = get_session(request).statistics
    return APIResponse(
        success=True,
        data=StatisticsModel.from_statistics(statistics).model_dump(),
        request_id=get_request_id(request),
    )


@router.get("/series/export", response_model=APIResponse)
async def export_series(request: Request) -> APIResponse:
    """Down-sampled payload handed to the insight service."""
    points = [point.to_dict() for point in get_session(request).export()]
    return APIResponse(success=True, data=points, request_id=get_request_id(request))


@router.get("/series/insights", response_model=APIResponse)
async def get_insight(request: Request) -> APIResponse:
    """Latest insight for the active series, if one has been generated."""
    result = get_session(request).latest_insight
    return APIResponse(
        success=result is not None,
        data=InsightModel.from_result(result).model_dump() if result else None,
        message=None if result else "No insight generated yet",
        request_id=get_request_id(request),
    )


@router.post("/series/insights", response_model=APIResponse)
async def regenerate_insight(request: Request) -> APIResponse:
    """Request a fresh insight for the active series."""
    result = await get_session(request).refresh_insight()
    if result is None:
        raise HTTPException(status_code=404, detail="No series loaded")
    return APIResponse(
        success=result.ok,
        data=InsightModel.from_result(result).model_dump(),
        message=result.text,
        request_id=get_request_id(request),
    )
