"""Database models."""
from fintrack.models.base import Base
from fintrack.models.user import User
from fintrack.models.account import Account
from fintrack.models.category import Category
from fintrack.models.transaction import Transaction
from fintrack.models.keyword_rule import KeywordRule
from fintrack.models.budget import Budget
from fintrack.models.bill import Bill
from fintrack.models.notification import Notification
from fintrack.models.user_settings import UserSettings

__all__ = [
    "Base",
    "User",
    "Account",
    "Category",
    "Transaction",
    "KeywordRule",
    "Budget",
    "Bill",
    "Notification",
    "UserSettings",
]
