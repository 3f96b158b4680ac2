"""
Estimate log router.

The log itself lives with the client for the length of a session; these
endpoints extend it and turn it into a CSV download.
"""

from http import HTTPStatus

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from tradein.estimate_log.csv_log import CSV_MEDIA_TYPE, LOG_FILE_NAMES, append_estimate_row
from tradein.estimate_log.schemas import (
    AppendEstimateRequest,
    AppendEstimateResponse,
    DownloadLogRequest,
)
from tradein.utils.logger import logger

router = APIRouter(prefix="/estimate-log", tags=["Estimate Log"])


@router.post("/append", response_model=AppendEstimateResponse)
async def append_to_log(request: AppendEstimateRequest) -> AppendEstimateResponse:
    """
    Append an estimate to the session log.

    Failed (zero-valued) estimates are not logged; the log comes back unchanged.

    Args:
        request: The submitted boat, its estimate and the log so far

    Returns:
        AppendEstimateResponse: The updated log
    """
    if not request.estimate.is_successful:
        logger.info("Skipping failed estimate in log")
        return AppendEstimateResponse(log=request.existing_log, logged=False)

    log = append_estimate_row(request.form_data, request.estimate, request.existing_log)
    return AppendEstimateResponse(log=log, logged=True)


@router.post("/download")
async def download_log(request: DownloadLogRequest) -> Response:
    """
    Return the session log as a CSV attachment.

    Args:
        request: The log text and which tool it came from

    Returns:
        Response: CSV file download

    Raises:
        HTTPException: If the log is empty
    """
    if not request.log:
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail="No estimates have been generated yet.",
        )

    file_name = LOG_FILE_NAMES[request.audience]
    return Response(
        content=request.log,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
    )
