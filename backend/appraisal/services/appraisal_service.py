"""Appraisal service for running loan applications through the engine."""

import logging
from typing import List, Optional, Sequence

from appraisal.config import settings
from appraisal.models.domain.appraisal import AppraisalResult
from appraisal.models.schemas.application import LoanApplicationCreate
from appraisal.services.rule_engine import AppraisalEngine, RuleDescription

logger = logging.getLogger(__name__)


class AppraisalService:
    """
    Appraisal service used by the API layer.

    This service:
    - Converts validated request schemas into engine input
    - Runs single and batch appraisals
    - Exposes the compliance rule catalogue
    - Logs the outcome of every appraisal
    """

    def __init__(
        self,
        engine: Optional[AppraisalEngine] = None,
        max_batch_size: Optional[int] = None,
    ):
        """
        Initialize the appraisal service.

        Args:
            engine: Engine to evaluate with (a new default engine if omitted)
            max_batch_size: Largest accepted batch (settings value if omitted)
        """
        self.engine = engine or AppraisalEngine()
        self.max_batch_size = (
            max_batch_size if max_batch_size is not None else settings.MAX_BATCH_SIZE
        )

    def appraise(self, request: LoanApplicationCreate) -> AppraisalResult:
        """
        Appraise a single loan application.

        Args:
            request: Validated loan application

        Returns:
            AppraisalResult for the application
        """
        result = self.engine.evaluate(request.to_domain())

        logger.info(
            f"Appraised application for {request.applicant_name!r}: "
            f"decision={result.decision.value} score={result.score} "
            f"overall_risk={result.risk_assessment.overall_risk.value}"
        )
        return result

    def appraise_batch(
        self, requests: Sequence[LoanApplicationCreate]
    ) -> List[AppraisalResult]:
        """
        Appraise several applications independently.

        Args:
            requests: Validated loan applications

        Returns:
            One AppraisalResult per application, in input order

        Raises:
            ValueError: If the batch exceeds the configured maximum size
        """
        if len(requests) > self.max_batch_size:
            raise ValueError(
                f"Batch of {len(requests)} applications exceeds maximum of "
                f"{self.max_batch_size}"
            )

        logger.info(f"Appraising batch of {len(requests)} applications")
        return [self.appraise(request) for request in requests]

    def list_rules(self) -> List[RuleDescription]:
        """Return the compliance rule catalogue in evaluation order."""
        return self.engine.describe_rules()
