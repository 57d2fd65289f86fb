import itertools
from decimal import Decimal

import pytest

from appraisal.core.enums import RiskLevel
from appraisal.services.rule_engine.ratios import derive_ratios
from appraisal.services.rule_engine.risk import RiskAssessor, assess_risk

RISK_ORDER = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}


@pytest.mark.parametrize(
    ("credit_score", "expected"),
    [
        (900, RiskLevel.LOW),
        (750, RiskLevel.LOW),
        (749, RiskLevel.MEDIUM),
        (650, RiskLevel.MEDIUM),
        (649, RiskLevel.HIGH),
        (300, RiskLevel.HIGH),
    ],
)
def test_credit_risk_bands(credit_score, expected) -> None:
    assert RiskAssessor.credit_risk(credit_score) == expected


@pytest.mark.parametrize(
    ("loan_to_value", "expected"),
    [
        (0.0, RiskLevel.LOW),
        (0.70, RiskLevel.LOW),
        (0.71, RiskLevel.MEDIUM),
        (0.85, RiskLevel.MEDIUM),
        (0.86, RiskLevel.HIGH),
        (1.8, RiskLevel.HIGH),
    ],
)
def test_collateral_risk_bands(loan_to_value, expected) -> None:
    assert RiskAssessor.collateral_risk(loan_to_value) == expected


def test_low_low_is_low_overall(make_application) -> None:
    application = make_application(credit_score=800, collateral_value=2_000_000)
    risk = assess_risk(application, derive_ratios(application))

    assert risk.credit_risk == RiskLevel.LOW
    assert risk.collateral_risk == RiskLevel.LOW
    assert risk.overall_risk == RiskLevel.LOW
    assert risk.risk_score == Decimal("100")


def test_medium_high_is_high_overall(make_application) -> None:
    application = make_application(credit_score=680, collateral_value=1_000_000)
    risk = assess_risk(application, derive_ratios(application))

    assert risk.credit_risk == RiskLevel.MEDIUM
    assert risk.collateral_risk == RiskLevel.HIGH
    assert risk.risk_score == Decimal("47.5")
    assert risk.overall_risk == RiskLevel.HIGH


def test_low_high_is_medium_overall(make_application) -> None:
    application = make_application(credit_score=800, collateral_value=1_000_000)
    risk = assess_risk(application, derive_ratios(application))

    assert risk.risk_score == Decimal("65")
    assert risk.overall_risk == RiskLevel.MEDIUM


def test_low_medium_is_low_overall(make_application) -> None:
    application = make_application(credit_score=800, collateral_value=1_250_000)
    risk = assess_risk(application, derive_ratios(application))

    assert risk.collateral_risk == RiskLevel.MEDIUM
    assert risk.risk_score == Decimal("82.5")
    assert risk.overall_risk == RiskLevel.LOW


def test_risk_score_is_always_a_mean_of_two_band_weights(make_application) -> None:
    allowed = {Decimal(v) for v in ("30", "47.5", "65", "82.5", "100")}
    credit_scores = (300, 649, 650, 700, 749, 750, 900)
    collateral_values = (0, 1_000_000, 1_200_000, 1_400_000, 5_000_000)

    for credit_score, collateral_value in itertools.product(
        credit_scores, collateral_values
    ):
        application = make_application(
            credit_score=credit_score, collateral_value=collateral_value
        )
        risk = assess_risk(application, derive_ratios(application))
        assert risk.risk_score in allowed


def test_credit_risk_never_worsens_as_credit_score_rises() -> None:
    bands = [RISK_ORDER[RiskAssessor.credit_risk(score)] for score in range(300, 901)]

    assert bands == sorted(bands, reverse=True)


def test_collateral_risk_never_improves_as_ltv_rises() -> None:
    ltvs = [step / 100 for step in range(0, 201)]
    bands = [RISK_ORDER[RiskAssessor.collateral_risk(ltv)] for ltv in ltvs]

    assert bands == sorted(bands)


def test_risk_ignores_compliance_inputs(make_application) -> None:
    strong = make_application(employment_years=10, existing_loans=0)
    weak = make_application(employment_years=0, existing_loans=900_000)

    assert assess_risk(strong, derive_ratios(strong)) == assess_risk(
        weak, derive_ratios(weak)
    )
