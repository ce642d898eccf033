from fastapi import APIRouter

from .accounts import account_router
from .bnpl import bnpl_router
from .dashboard import dashboard_router
from .debts import debt_router
from .expenses import expense_router
from .ibadah import ibadah_router
from .ious import iou_router

router = APIRouter()

router.include_router(dashboard_router, tags=["Dashboard"])
router.include_router(bnpl_router, tags=["BNPL"])
router.include_router(debt_router, tags=["Debts"])
router.include_router(iou_router, tags=["IOUs"])
router.include_router(ibadah_router, tags=["Ibadah"])
router.include_router(expense_router, tags=["Expenses"])
router.include_router(account_router, tags=["Accounts"])
