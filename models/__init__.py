# models/__init__.py
from .base import Base
from .admin import Admin
from .property import Property
from .unit import Unit
from .resident import Resident
from .contract import Contract
from .rent import Rent
from .expense_category import ExpenseCategory
from .expense import Expense
from .monthly_expense_summary import MonthlyExpenseSummary
from .expense_allocation import ExpenseAllocation
from .index_value import IndexValue
from .personal_transaction import PersonalTransaction

__all__ = [
     "Base",
     "Admin",
     "Property",
     "Unit",
     "Resident",
     "Contract",
     "Rent",
     "ExpenseCategory",
     "Expense",
     "MonthlyExpenseSummary",
     "ExpenseAllocation",
     "IndexValue",
     "PersonalTransaction",
]
