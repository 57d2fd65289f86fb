"""Appraisal engine orchestrating ratios, compliance, risk and decision."""

from dataclasses import dataclass
from typing import List

from appraisal.core.enums import RuleSet
from appraisal.models.domain.application import LoanApplication
from appraisal.models.domain.appraisal import AppraisalResult
from appraisal.services.rule_engine.base import EvaluationContext, RuleSetEvaluator
from appraisal.services.rule_engine.evaluators import (
    PolicyEvaluator,
    RegulatoryEvaluator,
)
from appraisal.services.rule_engine.ratios import derive_ratios
from appraisal.services.rule_engine.risk import RiskAssessor
from appraisal.services.rule_engine.scoring import ScoringEngine


@dataclass(frozen=True)
class RuleDescription:
    """Catalogue entry for one compliance rule."""

    rule_set: RuleSet
    parameter: str
    guideline: str


class AppraisalEngine:
    """
    Appraisal engine mapping a loan application to an appraisal result.

    This class:
    - Derives financial ratios from the application
    - Runs the regulatory and bank policy rule sets
    - Assesses composite credit and collateral risk
    - Scores the checks and selects a decision with rationale

    The engine holds no mutable state. One instance may serve concurrent
    callers without locking.
    """

    def __init__(self):
        """Initialize the engine with the standard rule sets."""
        self._regulatory: RuleSetEvaluator = RegulatoryEvaluator()
        self._policy: RuleSetEvaluator = PolicyEvaluator()

    def evaluate(self, application: LoanApplication) -> AppraisalResult:
        """
        Evaluate a loan application.

        Args:
            application: The loan application to appraise

        Returns:
            A freshly built AppraisalResult
        """
        ratios = derive_ratios(application)
        context = EvaluationContext(application=application, ratios=ratios)

        regulatory = self._regulatory.evaluate(context)
        policy = self._policy.evaluate(context)

        risk = RiskAssessor.assess(application, ratios)
        outcome = ScoringEngine.score_and_decide(
            regulatory, policy, risk, application, ratios
        )

        return AppraisalResult(
            decision=outcome.decision,
            score=outcome.score,
            reasons=outcome.reasons,
            regulatory_compliance=tuple(regulatory),
            policy_compliance=tuple(policy),
            risk_assessment=risk,
            recommendations=outcome.recommendations,
        )

    def describe_rules(self) -> List[RuleDescription]:
        """
        List every compliance rule in evaluation order.

        Returns:
            Regulatory rules followed by bank policy rules
        """
        return [
            RuleDescription(
                rule_set=evaluator.rule_set,
                parameter=rule.parameter,
                guideline=rule.guideline,
            )
            for evaluator in (self._regulatory, self._policy)
            for rule in evaluator.rules
        ]


_default_engine = AppraisalEngine()


def evaluate(application: LoanApplication) -> AppraisalResult:
    """Evaluate a loan application with the shared default engine."""
    return _default_engine.evaluate(application)
