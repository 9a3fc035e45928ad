from fastapi import APIRouter

from app.api import api_admin, api_auth, api_drug, api_healthcheck, api_procedure

router = APIRouter()

router.include_router(api_healthcheck.router, tags=["health-check"], prefix="/health")
router.include_router(api_auth.router, tags=["authentication"], prefix="/auth")
router.include_router(api_drug.router, tags=["drug"], prefix="/drugs")
router.include_router(api_procedure.router, tags=["procedure"], prefix="/procedures")
router.include_router(api_admin.router, tags=["admin"], prefix="/admin")
