"""
Estimate service layer.

Grounds a submitted boat in similar historical trades, asks Gemini for an
estimate, and turns the reply into an Estimate.
"""

from tradein.ai.gemini.client import GeminiClient
from tradein.ai.gemini.config import GeminiSettings
from tradein.ai.gemini.schemas import GenerateContentRequest
from tradein.config import AppSettings
from tradein.estimates.exceptions import MalformedResponse
from tradein.estimates.historical_data import HistoricalDataProvider
from tradein.estimates.prompt_builder import (
    build_estimate_prompt,
    build_system_instruction,
)
from tradein.estimates.response_extractor import extract_estimate
from tradein.estimates.schemas import Estimate, EstimateRequest
from tradein.estimates.similarity import find_similar_trades
from tradein.utils.logger import logger


class EstimateService:
    """Service class for trade-in estimates."""

    def __init__(
        self,
        gemini_client: GeminiClient,
        historical_data: HistoricalDataProvider,
        app_settings: AppSettings,
        gemini_settings: GeminiSettings,
    ):
        """
        Initialize the estimate service.

        Args:
            gemini_client: Client used for the model call
            historical_data: Loaded historical trade-in records
            app_settings: Application settings (dealership, currency, top-K)
            gemini_settings: Gemini settings (temperature, search tool)
        """
        self.gemini_client = gemini_client
        self.historical_data = historical_data
        self.app_settings = app_settings
        self.gemini_settings = gemini_settings

    def build_prompt(self, request: EstimateRequest) -> str:
        """Build the grounded estimate prompt for a submission."""
        profile = request.form_data
        similar_trades = find_similar_trades(
            profile,
            self.historical_data.records,
            count=self.app_settings.similar_trade_count,
        )
        logger.info(
            "Selected similar historical trades",
            boat=profile.description,
            matches=len(similar_trades),
            top_score=similar_trades[0].score if similar_trades else None,
        )
        return build_estimate_prompt(
            profile,
            similar_trades,
            dealership_name=self.app_settings.dealership_name,
            currency=self.app_settings.currency,
        )

    async def generate_estimate(self, request: EstimateRequest) -> Estimate:
        """
        Generate a trade-in estimate.

        An unparseable model reply yields a zero-valued Estimate rather than
        an error. Failures of the API call itself propagate.

        Args:
            request: The submitted form and photos

        Returns:
            Estimate: The parsed or degraded estimate

        Raises:
            UpstreamCallFailure: If the Gemini call fails
        """
        prompt = self.build_prompt(request)

        response = await self.gemini_client.generate_content(
            GenerateContentRequest(
                prompt=prompt,
                system_instruction=build_system_instruction(
                    self.app_settings.dealership_name
                ),
                images=request.image_parts,
                temperature=self.gemini_settings.estimate_temperature,
                enable_google_search=self.gemini_settings.enable_google_search,
            )
        )

        try:
            estimate = extract_estimate(response.text)
        except MalformedResponse as e:
            logger.error(
                "Could not parse estimate from model reply",
                error=e.message,
                finish_reason=response.finish_reason,
            )
            return Estimate.failed(e.message)

        logger.info(
            "Generated estimate",
            boat=request.form_data.description,
            low=estimate.low,
            high=estimate.high,
            lead_quality=estimate.lead_quality.value,
        )
        return estimate
