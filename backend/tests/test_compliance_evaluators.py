import pytest

from appraisal.core.enums import CheckStatus, LoanPurpose
from appraisal.services.rule_engine.base import EvaluationContext, Thresholds
from appraisal.services.rule_engine.evaluators import (
    PolicyEvaluator,
    RegulatoryEvaluator,
)
from appraisal.services.rule_engine.ratios import derive_ratios


def _context(application) -> EvaluationContext:
    return EvaluationContext(application=application, ratios=derive_ratios(application))


def _regulatory(application) -> dict:
    checks = RegulatoryEvaluator().evaluate(_context(application))
    return {check.parameter: check for check in checks}


def _policy(application) -> dict:
    checks = PolicyEvaluator().evaluate(_context(application))
    return {check.parameter: check for check in checks}


def test_regulatory_checks_are_reported_in_order(make_application) -> None:
    checks = RegulatoryEvaluator().evaluate(_context(make_application()))

    assert [check.parameter for check in checks] == [
        "LTV Ratio",
        "Credit Information Report",
        "KYC Compliance",
        "Priority Sector Classification",
    ]


def test_policy_checks_are_reported_in_order(make_application) -> None:
    checks = PolicyEvaluator().evaluate(_context(make_application()))

    assert [check.parameter for check in checks] == [
        "Debt-to-Income",
        "Employment Stability",
        "Loan-to-Income",
        "Collateral Coverage",
    ]


@pytest.mark.parametrize(
    ("collateral_value", "expected"),
    [
        (1_250_000, CheckStatus.PASS),  # LTV 0.80
        (1_111_112, CheckStatus.WARNING),  # LTV just under 0.90
        (1_000_000, CheckStatus.FAIL),  # LTV 1.00
    ],
)
def test_ltv_ratio(make_application, collateral_value, expected) -> None:
    check = _regulatory(make_application(collateral_value=collateral_value))["LTV Ratio"]

    assert check.status == expected


def test_ltv_boundaries_are_inclusive(make_application) -> None:
    at_pass = make_application(loan_amount=800_000, collateral_value=1_000_000)
    at_warn = make_application(loan_amount=900_000, collateral_value=1_000_000)

    assert _regulatory(at_pass)["LTV Ratio"].status == CheckStatus.PASS
    assert _regulatory(at_warn)["LTV Ratio"].status == CheckStatus.WARNING


def test_ltv_details_show_percentage(make_application) -> None:
    check = _regulatory(
        make_application(loan_amount=800_000, collateral_value=1_000_000)
    )["LTV Ratio"]

    assert check.details.startswith("LTV: 80.00%.")
    assert "RBI" in check.details


def test_ltv_passes_without_collateral(make_application) -> None:
    check = _regulatory(make_application(collateral_value=0))["LTV Ratio"]

    assert check.status == CheckStatus.PASS
    assert "0.00%" in check.details


@pytest.mark.parametrize(
    ("credit_score", "expected"),
    [
        (900, CheckStatus.PASS),
        (700, CheckStatus.PASS),
        (699, CheckStatus.WARNING),
        (650, CheckStatus.WARNING),
        (649, CheckStatus.FAIL),
        (0, CheckStatus.FAIL),
    ],
)
def test_credit_information_report(make_application, credit_score, expected) -> None:
    check = _regulatory(make_application(credit_score=credit_score))[
        "Credit Information Report"
    ]

    assert check.status == expected
    assert f"Credit Score: {credit_score}." in check.details


def test_kyc_always_passes(make_application) -> None:
    check = _regulatory(make_application(credit_score=300, annual_income=0))[
        "KYC Compliance"
    ]

    assert check.status == CheckStatus.PASS


@pytest.mark.parametrize(
    ("purpose", "expected"),
    [
        (LoanPurpose.AGRICULTURE, CheckStatus.PASS),
        (LoanPurpose.MSME, CheckStatus.PASS),
        (LoanPurpose.EDUCATION, CheckStatus.PASS),
        (LoanPurpose.HOME, CheckStatus.WARNING),
        (LoanPurpose.PERSONAL, CheckStatus.WARNING),
        (LoanPurpose.BUSINESS, CheckStatus.WARNING),
        (LoanPurpose.VEHICLE, CheckStatus.WARNING),
    ],
)
def test_priority_sector_classification(make_application, purpose, expected) -> None:
    check = _regulatory(make_application(loan_purpose=purpose))[
        "Priority Sector Classification"
    ]

    assert check.status == expected


@pytest.mark.parametrize(
    ("debt_to_income", "expected"),
    [
        (0.0, CheckStatus.PASS),
        (40.0, CheckStatus.PASS),
        (40.01, CheckStatus.WARNING),
        (50.0, CheckStatus.WARNING),
        (50.01, CheckStatus.FAIL),
    ],
)
def test_debt_to_income(make_application, debt_to_income, expected) -> None:
    check = _policy(make_application(debt_to_income=debt_to_income))["Debt-to-Income"]

    assert check.status == expected
    assert f"DTI: {debt_to_income:.2f}%." in check.details


@pytest.mark.parametrize(
    ("years", "expected"),
    [
        (10, CheckStatus.PASS),
        (2, CheckStatus.PASS),
        (1.5, CheckStatus.WARNING),
        (1, CheckStatus.WARNING),
        (0.5, CheckStatus.FAIL),
        (0, CheckStatus.FAIL),
    ],
)
def test_employment_stability(make_application, years, expected) -> None:
    check = _policy(make_application(employment_years=years))["Employment Stability"]

    assert check.status == expected
    assert f"Employment: {years:.2f} years." in check.details


@pytest.mark.parametrize(
    ("loan_amount", "expected"),
    [
        (5_000_000, CheckStatus.PASS),
        (6_000_000, CheckStatus.WARNING),
        (7_000_000, CheckStatus.WARNING),
        (7_100_000, CheckStatus.FAIL),
    ],
)
def test_loan_to_income(make_application, loan_amount, expected) -> None:
    check = _policy(
        make_application(loan_amount=loan_amount, collateral_value=loan_amount * 2)
    )["Loan-to-Income"]

    assert check.status == expected


def test_loan_to_income_details(make_application) -> None:
    check = _policy(make_application(loan_amount=2_500_000, collateral_value=5_000_000))[
        "Loan-to-Income"
    ]

    assert check.details.startswith("Loan-to-Income: 2.50x.")


@pytest.mark.parametrize(
    ("collateral_value", "expected"),
    [
        (600_000, CheckStatus.PASS),
        (550_000, CheckStatus.WARNING),
        (500_000, CheckStatus.WARNING),
        (499_999, CheckStatus.FAIL),
        (0, CheckStatus.FAIL),
    ],
)
def test_collateral_coverage(make_application, collateral_value, expected) -> None:
    check = _policy(
        make_application(loan_amount=500_000, collateral_value=collateral_value)
    )["Collateral Coverage"]

    assert check.status == expected


def test_collateral_coverage_details(make_application) -> None:
    check = _policy(make_application(loan_amount=500_000, collateral_value=600_000))[
        "Collateral Coverage"
    ]

    assert check.details.startswith("Collateral coverage: 120.00%.")


def test_zero_income_fails_income_ratios(make_application) -> None:
    checks = _policy(make_application(annual_income=0, existing_loans=0))

    assert checks["Debt-to-Income"].status == CheckStatus.FAIL
    assert checks["Loan-to-Income"].status == CheckStatus.FAIL


def test_thresholds_classify_both_directions() -> None:
    upper = Thresholds(pass_at=10, warn_at=20)
    lower = Thresholds(pass_at=20, warn_at=10, higher_is_better=True)

    assert [upper.classify(v) for v in (10, 15, 21)] == [
        CheckStatus.PASS,
        CheckStatus.WARNING,
        CheckStatus.FAIL,
    ]
    assert [lower.classify(v) for v in (20, 15, 9)] == [
        CheckStatus.PASS,
        CheckStatus.WARNING,
        CheckStatus.FAIL,
    ]
    assert upper.classify(float("nan")) == CheckStatus.FAIL
