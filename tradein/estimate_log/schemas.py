"""Pydantic schemas for the estimate log endpoints."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tradein.estimates.constants import Audience
from tradein.estimates.schemas import BoatProfile, Estimate


class EstimateLogModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AppendEstimateRequest(EstimateLogModel):
    """Body of POST /api/estimate-log/append."""

    form_data: BoatProfile
    estimate: Estimate
    existing_log: str = ""


class AppendEstimateResponse(EstimateLogModel):
    """The log after the append, and whether a row was added."""

    log: str
    logged: bool


class DownloadLogRequest(EstimateLogModel):
    """Body of POST /api/estimate-log/download."""

    log: str
    audience: Audience = Audience.CUSTOMER
