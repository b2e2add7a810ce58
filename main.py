import logging

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from core.config_loader import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

import models_bootstrap
from user.router import user_router
from cleaner.router import cleaner_router
from availability.router import availability_router
from workschedule.router import workschedule_router
from dateoverride.router import dateoverride_router
from assignment.router import assignment_router
from schedulegrid.router import schedulegrid_router

openapi_tags = [
    {
        "name": "Schedule Grid",
        "description": "Week calendars with resolved availability and conflict flags",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]

app = FastAPI(title="Cleaning schedule service", openapi_tags=openapi_tags)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(user_router, prefix="/api")
app.include_router(cleaner_router, prefix="/api")
app.include_router(availability_router, prefix="/api")
app.include_router(dateoverride_router, prefix="/api")
app.include_router(workschedule_router, prefix="/api")
app.include_router(assignment_router, prefix="/api")
app.include_router(schedulegrid_router, prefix="/api")


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
