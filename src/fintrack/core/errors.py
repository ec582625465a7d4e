"""Error codes and user-friendly messages.

This module defines the error catalog for the ledger API.
Each error has:
- error_code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    # Validation
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request data failed validation",
        "user_message": "Invalid input data",
        "suggestion": "Please check your input and try again.",
        "retry_allowed": True,
    },
    "VAL_002": {
        "code": "VAL_002",
        "message": "Account balances cannot be edited directly",
        "user_message": "Account balances change only through transactions.",
        "suggestion": "Record a transaction to adjust the balance instead.",
        "retry_allowed": False,
    },
    "VAL_003": {
        "code": "VAL_003",
        "message": "Required field missing",
        "user_message": "Some required information is missing.",
        "suggestion": "Fill in every required field and try again.",
        "retry_allowed": True,
    },
    # Not found (absent or owned by a different user)
    "NF_001": {
        "code": "NF_001",
        "message": "Account not found",
        "user_message": "We couldn't find this account.",
        "suggestion": "Please check the account and try again.",
        "retry_allowed": False,
    },
    "NF_002": {
        "code": "NF_002",
        "message": "Transaction not found",
        "user_message": "We couldn't find this transaction.",
        "suggestion": "Please refresh and try again.",
        "retry_allowed": False,
    },
    "NF_003": {
        "code": "NF_003",
        "message": "Category not found",
        "user_message": "That category doesn't exist.",
        "suggestion": "Please choose one of your categories or a default one.",
        "retry_allowed": False,
    },
    "NF_004": {
        "code": "NF_004",
        "message": "Budget not found",
        "user_message": "We couldn't find this budget.",
        "suggestion": "Please refresh and try again.",
        "retry_allowed": False,
    },
    "NF_005": {
        "code": "NF_005",
        "message": "Bill not found",
        "user_message": "We couldn't find this bill.",
        "suggestion": "Please refresh and try again.",
        "retry_allowed": False,
    },
    "NF_006": {
        "code": "NF_006",
        "message": "Notification not found",
        "user_message": "We couldn't find this notification.",
        "suggestion": "Please refresh and try again.",
        "retry_allowed": False,
    },
    "NF_007": {
        "code": "NF_007",
        "message": "User not found",
        "user_message": "We couldn't find your profile.",
        "suggestion": "Please log in again.",
        "retry_allowed": False,
    },
    # Conflicts
    "CONFLICT_001": {
        "code": "CONFLICT_001",
        "message": "Email already registered",
        "user_message": "An account with this email already exists.",
        "suggestion": "Log in instead, or use a different email address.",
        "retry_allowed": False,
    },
    "CONFLICT_002": {
        "code": "CONFLICT_002",
        "message": "Resource already exists",
        "user_message": "This record already exists.",
        "suggestion": "Please check if the record was already created.",
        "retry_allowed": False,
    },
    # Authentication
    "AUTH_001": {
        "code": "AUTH_001",
        "message": "Invalid credentials",
        "user_message": "Incorrect email or password.",
        "suggestion": "Check your email and password and try again.",
        "retry_allowed": True,
    },
    "AUTH_002": {
        "code": "AUTH_002",
        "message": "Invalid or expired token",
        "user_message": "Your session has expired.",
        "suggestion": "Please log in again.",
        "retry_allowed": False,
    },
    "AUTH_003": {
        "code": "AUTH_003",
        "message": "User account is deactivated",
        "user_message": "This account has been deactivated.",
        "suggestion": "Contact support to reactivate your account.",
        "retry_allowed": False,
    },
    # Storage
    "DB_001": {
        "code": "DB_001",
        "message": "Database operation failed",
        "user_message": "A database error occurred.",
        "suggestion": "Refresh to check whether the change was saved before trying again.",
        "retry_allowed": False,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "An unexpected error occurred.",
        "suggestion": "Please try again later or contact support.",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details (a generic entry for unknown codes)
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str) -> str:
    """Get user-friendly message for an error code."""
    return get_error(error_code)["user_message"]


def is_retryable(error_code: str) -> bool:
    """Check if an error is retryable."""
    return get_error(error_code)["retry_allowed"]
