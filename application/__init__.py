"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the cross-validation workflows and their reporting.
"""

from application.crossvalidation import k_fold, leave_one_out, leave_p_out, run_cross_validation
from application.evaluation import log_evaluation_summary
from application.serialize import save_result_artifacts
from application.validation import validate_split

__all__ = [
    # Main workflows
    "leave_one_out",
    "leave_p_out",
    "k_fold",
    "run_cross_validation",
    # Single split
    "validate_split",
    # Reporting
    "log_evaluation_summary",
    "save_result_artifacts",
]
