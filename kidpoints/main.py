from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from kidpoints.model import users, activities, rules, rewards, redemption_requests, badges, child_badges
from kidpoints.router import (
    auth_router,
    children_router,
    activities_router,
    rules_router,
    rewards_router,
    redemption_router,
    badges_router,
    reports_router,
)
from kidpoints.config import settings


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.API_VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.FRONTEND_URL,
        "http://localhost:3000",  # For local development
        "http://localhost:5173",  # For Vite development
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router, prefix="/api", tags=["Authentication"])
app.include_router(children_router, prefix="/api", tags=["Children"])
app.include_router(activities_router, prefix="/api", tags=["Activities"])
app.include_router(rules_router, prefix="/api", tags=["Rules"])
app.include_router(rewards_router, prefix="/api", tags=["Rewards"])
app.include_router(redemption_router, prefix="/api", tags=["Redemption Requests"])
app.include_router(badges_router, prefix="/api", tags=["Badges"])
app.include_router(reports_router, prefix="/api", tags=["Reports"])

#####################
### Root Endpoint ###
#####################
@app.get("/")
def read_root():
    return {"Project": settings.PROJECT_NAME, "Environment": settings.ENV, "Version": settings.API_VERSION}
