from kidpoints.router.api.auth import router as auth_router
from kidpoints.router.api.children import router as children_router
from kidpoints.router.api.activities import router as activities_router
from kidpoints.router.api.rules import router as rules_router
from kidpoints.router.api.rewards import router as rewards_router
from kidpoints.router.api.redemption_requests import router as redemption_router
from kidpoints.router.api.badges import router as badges_router
from kidpoints.router.api.reports import router as reports_router
__all__ = [
    "auth_router",
    "children_router",
    "activities_router",
    "rules_router",
    "rewards_router",
    "redemption_router",
    "badges_router",
    "reports_router",
]
