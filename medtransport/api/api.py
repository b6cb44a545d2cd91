from fastapi import APIRouter
from medtransport.api.v1 import auth, me, branches, hospitals, patients, shifts, dashboard

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(me.router, prefix="/me", tags=["me"])
api_router.include_router(branches.router, prefix="/branches", tags=["branches"])
api_router.include_router(patients.router, prefix="/branches", tags=["patients"])
api_router.include_router(shifts.router, prefix="/branches", tags=["shifts"])
api_router.include_router(hospitals.router, prefix="/hospitals", tags=["hospitals"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
