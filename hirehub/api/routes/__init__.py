"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from hirehub.api.routes.user_routes import router as user_router
from hirehub.api.routes.employer_routes import router as employer_router
from hirehub.api.routes.job_seeker_routes import router as job_seeker_router
from hirehub.api.routes.job_routes import router as job_router
from hirehub.api.routes.application_routes import router as application_router
from hirehub.api.routes.resume_routes import router as resume_router
from hirehub.api.routes.notification_routes import router as notification_router
from hirehub.api.routes.admin_routes import router as admin_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(user_router)
api_router.include_router(employer_router)
api_router.include_router(job_seeker_router)
api_router.include_router(job_router)
api_router.include_router(application_router)
api_router.include_router(resume_router)
api_router.include_router(notification_router)
api_router.include_router(admin_router)
