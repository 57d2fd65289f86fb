"""Appraisal endpoints for evaluating loan applications."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from appraisal.deps import get_appraisal_service
from appraisal.models.schemas.application import LoanApplicationCreate
from appraisal.models.schemas.appraisal import (
    AppraisalResultResponse,
    BatchAppraisalRequest,
    BatchAppraisalResponse,
    RuleDescriptionResponse,
)
from appraisal.services.appraisal_service import AppraisalService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/evaluate",
    response_model=AppraisalResultResponse,
    summary="Appraise a loan application",
    description="Run regulatory and bank policy checks, risk assessment and decision for one application",
)
async def evaluate_application(
    application_data: LoanApplicationCreate,
    service: Annotated[AppraisalService, Depends(get_appraisal_service)],
) -> AppraisalResultResponse:
    """
    Appraise a loan application.

    The response contains:
    - Regulatory compliance checks (LTV, credit report, KYC, priority sector)
    - Bank policy checks (DTI, employment, loan-to-income, collateral)
    - Credit, collateral and overall risk bands with the risk score
    - Eligibility score, decision, reasons and recommendations
    """
    try:
        result = service.appraise(application_data)
        return AppraisalResultResponse.model_validate(result)

    except ValueError as e:
        logger.error(f"Validation error appraising application: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error appraising application: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to appraise application",
        )


@router.post(
    "/evaluate/batch",
    response_model=BatchAppraisalResponse,
    summary="Appraise several loan applications",
    description="Appraise each application independently and return results in request order",
)
async def evaluate_batch(
    request: BatchAppraisalRequest,
    service: Annotated[AppraisalService, Depends(get_appraisal_service)],
) -> BatchAppraisalResponse:
    """Appraise a batch of loan applications."""
    try:
        results = service.appraise_batch(request.applications)
        return BatchAppraisalResponse(
            results=[AppraisalResultResponse.model_validate(r) for r in results],
            total=len(results),
        )

    except ValueError as e:
        logger.error(f"Validation error appraising batch: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error appraising batch: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to appraise batch",
        )


@router.get(
    "/rules",
    response_model=list[RuleDescriptionResponse],
    summary="List compliance rules",
    description="List every regulatory and bank policy rule with its guideline, in evaluation order",
)
async def list_rules(
    service: Annotated[AppraisalService, Depends(get_appraisal_service)],
) -> list[RuleDescriptionResponse]:
    """List the compliance rule catalogue."""
    return [
        RuleDescriptionResponse.model_validate(rule) for rule in service.list_rules()
    ]
