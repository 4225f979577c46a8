from fastapi import APIRouter

from fasttruck.api.applications_routes import router as applications_router
from fasttruck.api.jobs_routes import router as jobs_router
from fasttruck.api.pincode_routes import router as pincode_router
from fasttruck.api.preferences_routes import router as preferences_router

router = APIRouter()

router.include_router(jobs_router, tags=["Jobs"])
router.include_router(applications_router, tags=["Applications"])
router.include_router(pincode_router, tags=["Pincode"])
router.include_router(preferences_router, tags=["Preferences"])
