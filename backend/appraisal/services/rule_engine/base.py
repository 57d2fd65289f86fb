"""Rule engine foundation with evaluation context, thresholds and base rule."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from appraisal.core.enums import CheckStatus, RuleSet
from appraisal.models.domain.application import DerivedRatios, LoanApplication
from appraisal.models.domain.appraisal import ComplianceCheck


@dataclass(frozen=True)
class EvaluationContext:
    """
    Evaluation context passed to every compliance rule.

    Attributes:
        application: The loan application being evaluated
        ratios: Ratios derived from the application
    """

    application: LoanApplication
    ratios: DerivedRatios


@dataclass(frozen=True)
class Thresholds:
    """
    Two cut points splitting a metric into PASS, WARNING and FAIL.

    For an upper-bound metric (``higher_is_better=False``) values at or below
    ``pass_at`` pass, values at or below ``warn_at`` warn, anything else
    fails. A lower-bound metric mirrors this with ``>=``. A NaN value never
    satisfies a comparison and therefore fails.
    """

    pass_at: float
    warn_at: float
    higher_is_better: bool = False

    def classify(self, value: float) -> CheckStatus:
        if self.higher_is_better:
            if value >= self.pass_at:
                return CheckStatus.PASS
            if value >= self.warn_at:
                return CheckStatus.WARNING
            return CheckStatus.FAIL

        if value <= self.pass_at:
            return CheckStatus.PASS
        if value <= self.warn_at:
            return CheckStatus.WARNING
        return CheckStatus.FAIL


class ComplianceRule(ABC):
    """
    Abstract base class for a named compliance rule.

    Each concrete rule checks one parameter of the application and returns a
    ComplianceCheck. Rules hold no per-call state, so a single instance can
    be shared by concurrent evaluations.

    Attributes:
        rule_set: The rule set this rule belongs to
        parameter: Label reported on the resulting check
        guideline: Reference to the guideline the thresholds come from
    """

    rule_set: RuleSet
    parameter: str
    guideline: str

    @abstractmethod
    def evaluate(self, context: EvaluationContext) -> ComplianceCheck:
        """
        Evaluate the rule against the provided context.

        Args:
            context: EvaluationContext containing the application and ratios

        Returns:
            ComplianceCheck with status and details
        """
        pass

    def _check(self, status: CheckStatus, details: str) -> ComplianceCheck:
        return ComplianceCheck(parameter=self.parameter, status=status, details=details)


class RuleSetEvaluator:
    """
    Evaluates an ordered list of rules belonging to one rule set.

    Subclasses declare ``rule_set`` and ``rules``. Order of ``rules`` is the
    order checks are reported in.
    """

    rule_set: RuleSet
    rules: tuple[ComplianceRule, ...] = ()

    def evaluate(self, context: EvaluationContext) -> list[ComplianceCheck]:
        """
        Evaluate every rule of the set.

        Args:
            context: EvaluationContext containing the application and ratios

        Returns:
            One ComplianceCheck per rule, in rule order
        """
        return [rule.evaluate(context) for rule in self.rules]
