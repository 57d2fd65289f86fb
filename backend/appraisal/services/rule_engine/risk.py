"""Credit and collateral risk banding."""

from decimal import Decimal

from appraisal.core.enums import RiskLevel
from appraisal.models.domain.application import DerivedRatios, LoanApplication
from appraisal.models.domain.appraisal import RiskAssessment

RISK_WEIGHTS = {
    RiskLevel.LOW: Decimal("100"),
    RiskLevel.MEDIUM: Decimal("65"),
    RiskLevel.HIGH: Decimal("30"),
}


class RiskAssessor:
    """
    Classifies credit and collateral risk and combines them.

    The assessment depends only on the credit score and the loan-to-value
    ratio. Compliance check outcomes play no part in it.

    Bands:
    - Credit: LOW from 750, MEDIUM from 650, HIGH below
    - Collateral: LOW up to 0.70 LTV, MEDIUM up to 0.85, HIGH above
    - Overall: LOW when the mean weight is at least 80, MEDIUM from 50, HIGH below
    """

    @staticmethod
    def credit_risk(credit_score: float) -> RiskLevel:
        if credit_score >= 750:
            return RiskLevel.LOW
        if credit_score >= 650:
            return RiskLevel.MEDIUM
        return RiskLevel.HIGH

    @staticmethod
    def collateral_risk(loan_to_value: float) -> RiskLevel:
        if loan_to_value <= 0.70:
            return RiskLevel.LOW
        if loan_to_value <= 0.85:
            return RiskLevel.MEDIUM
        return RiskLevel.HIGH

    @staticmethod
    def overall_risk(risk_score: Decimal) -> RiskLevel:
        if risk_score >= 80:
            return RiskLevel.LOW
        if risk_score >= 50:
            return RiskLevel.MEDIUM
        return RiskLevel.HIGH

    @classmethod
    def assess(
        cls, application: LoanApplication, ratios: DerivedRatios
    ) -> RiskAssessment:
        """
        Assess composite risk for an application.

        Args:
            application: The loan application
            ratios: Ratios derived from the application

        Returns:
            RiskAssessment with the three bands and the mean risk score
        """
        credit_risk = cls.credit_risk(application.credit_score)
        collateral_risk = cls.collateral_risk(ratios.loan_to_value)

        risk_score = (RISK_WEIGHTS[credit_risk] + RISK_WEIGHTS[collateral_risk]) / 2

        return RiskAssessment(
            credit_risk=credit_risk,
            collateral_risk=collateral_risk,
            overall_risk=cls.overall_risk(risk_score),
            risk_score=risk_score,
        )


def assess_risk(application: LoanApplication, ratios: DerivedRatios) -> RiskAssessment:
    """Assess composite risk for an application."""
    return RiskAssessor.assess(application, ratios)
