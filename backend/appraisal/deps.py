"""Dependency injection for FastAPI endpoints."""

from appraisal.services.appraisal_service import AppraisalService

_appraisal_service = AppraisalService()


def get_appraisal_service() -> AppraisalService:
    """
    Get the appraisal service dependency.

    The service and its engine are stateless, so one instance is shared by
    all requests.
    """
    return _appraisal_service
