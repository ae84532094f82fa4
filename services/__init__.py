# services/__init__.py
from .exceptions import ServiceError, NotFoundError, ConflictError
from .summary_service import (
     get_or_create_summary,
     recompute_summary,
     link_expense,
     sync_expense,
     remove_expense,
     rebuild_summary,
)
from .allocation_service import compute_allocations, calculate_allocations, delete_allocations
from .rent_service import build_rent_schedule, recalculate_contract_rents, list_contract_rents
from .liquidacion_service import build_liquidaciones
from .receipt_service import send_receipts

__all__ = [
     "ServiceError",
     "NotFoundError",
     "ConflictError",
     "get_or_create_summary",
     "recompute_summary",
     "link_expense",
     "sync_expense",
     "remove_expense",
     "rebuild_summary",
     "compute_allocations",
     "calculate_allocations",
     "delete_allocations",
     "build_rent_schedule",
     "recalculate_contract_rents",
     "list_contract_rents",
     "build_liquidaciones",
     "send_receipts",
]
