"""
Rule modules and their registry.

ALL_MODULES is the dispatch order of the compute pipeline and therefore the
order of the trace array. It is fixed here and cannot be changed through
configuration; configuration only switches modules on and off.
"""

from typing import Tuple

from .base import MODULE_DISABLED_REASON, ChipModule, ModuleResult
from .budget import BudgetModule
from .cart import CartModule
from .facet import FacetModule
from .order import OrderModule
from .policy import PolicyModule
from .sort import SortModule

ALL_MODULES: Tuple[ChipModule, ...] = (
    BudgetModule(),
    FacetModule(),
    SortModule(),
    OrderModule(),
    CartModule(),
    PolicyModule(),
)

__all__ = [
    "ALL_MODULES",
    "MODULE_DISABLED_REASON",
    "ChipModule",
    "ModuleResult",
    "BudgetModule",
    "FacetModule",
    "SortModule",
    "OrderModule",
    "CartModule",
    "PolicyModule",
]
