# schemas/__init__.py
from .common import Money, Pagination, MessageResponse
from .admin import AdminCreate, AdminResponse
from .property import PropertyCreate, PropertyUpdate, PropertyResponse, PropertyListResponse
from .unit import UnitCreate, UnitUpdate, UnitResponse, UnitListResponse
from .resident import ResidentCreate, ResidentUpdate, ResidentResponse, ResidentListResponse
from .contract import (
     ContractCreate,
     ContractUpdate,
     ContractResponse,
     ContractListResponse,
     RentResponse,
     RentListResponse,
)
from .expense import (
     ExpenseCreate,
     ExpenseUpdate,
     ExpenseResponse,
     ExpenseListResponse,
     MonthlyExpenseSummaryResponse,
     MonthlyExpenseSummaryListResponse,
     PeriodRequest,
)
from .expense_category import (
     ExpenseCategoryCreate,
     ExpenseCategoryUpdate,
     ExpenseCategoryResponse,
     ExpenseCategoryListResponse,
)
from .index_value import IndexValueCreate, IndexValueUpdate, IndexValueResponse, IndexValueListResponse
from .liquidacion import (
     LiquidacionRow,
     LiquidacionListResponse,
     AllocationCalculationResponse,
     AllocationDeleteResponse,
     SendReceiptsResponse,
)
from .personal_transaction import (
     PersonalTransactionCreate,
     PersonalTransactionUpdate,
     PersonalTransactionResponse,
     PersonalTransactionListResponse,
)

__all__ = [
     "Money",
     "Pagination",
     "MessageResponse",
     "AdminCreate",
     "AdminResponse",
     "PropertyCreate",
     "PropertyUpdate",
     "PropertyResponse",
     "PropertyListResponse",
     "UnitCreate",
     "UnitUpdate",
     "UnitResponse",
     "UnitListResponse",
     "ResidentCreate",
     "ResidentUpdate",
     "ResidentResponse",
     "ResidentListResponse",
     "ContractCreate",
     "ContractUpdate",
     "ContractResponse",
     "ContractListResponse",
     "RentResponse",
     "RentListResponse",
     "ExpenseCreate",
     "ExpenseUpdate",
     "ExpenseResponse",
     "ExpenseListResponse",
     "MonthlyExpenseSummaryResponse",
     "MonthlyExpenseSummaryListResponse",
     "PeriodRequest",
     "ExpenseCategoryCreate",
     "ExpenseCategoryUpdate",
     "ExpenseCategoryResponse",
     "ExpenseCategoryListResponse",
     "IndexValueCreate",
     "IndexValueUpdate",
     "IndexValueResponse",
     "IndexValueListResponse",
     "LiquidacionRow",
     "LiquidacionListResponse",
     "AllocationCalculationResponse",
     "AllocationDeleteResponse",
     "SendReceiptsResponse",
     "PersonalTransactionCreate",
     "PersonalTransactionUpdate",
     "PersonalTransactionResponse",
     "PersonalTransactionListResponse",
]
