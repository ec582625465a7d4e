"""API version 1 routes."""

from fastapi import APIRouter

from fintrack.api.v1 import (
    accounts,
    auth,
    bills,
    budgets,
    categories,
    health,
    keyword_rules,
    notifications,
    transactions,
    user_settings,
    users,
)

router = APIRouter(prefix="/api/v1")

# Include routers
router.include_router(health.router)
router.include_router(auth.router)
router.include_router(users.router)
router.include_router(accounts.router)
router.include_router(transactions.router)
router.include_router(categories.router)
router.include_router(keyword_rules.router)
router.include_router(budgets.router)
router.include_router(bills.router)
router.include_router(notifications.router)
router.include_router(user_settings.router)
