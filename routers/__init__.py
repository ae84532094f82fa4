# routers/__init__.py
from .admins import router as admins_router
from .properties import router as properties_router
from .units import router as units_router, property_units_router
from .residents import router as residents_router
from .contracts import router as contracts_router, rents_router
from .expenses import router as expenses_router, summaries_router
from .expense_categories import router as expense_categories_router
from .index_values import icl_router, ipc_router
from .liquidaciones import router as liquidaciones_router
from .personal_transactions import router as personal_transactions_router
from .health import router as health_router

ALL_ROUTERS = [
     health_router,
     admins_router,
     property_units_router,
     properties_router,
     units_router,
     residents_router,
     contracts_router,
     rents_router,
     expenses_router,
     summaries_router,
     expense_categories_router,
     icl_router,
     ipc_router,
     liquidaciones_router,
     personal_transactions_router,
]

__all__ = ["ALL_ROUTERS"]
