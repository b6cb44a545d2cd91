from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medtransport.core.config import settings
from medtransport.middleware.log_middleware import LogMiddleware
from medtransport.api.api import api_router

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(LogMiddleware)

@app.get("/")
async def root():
    return {"message": "Welcome to MedTransport Dispatch API"}

app.include_router(api_router, prefix=settings.API_V1_STR)
