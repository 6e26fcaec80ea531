"""
LoadCalc FastAPI application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loadcalc.api.router import router
from loadcalc.config import DEV_ORIGINS

app = FastAPI(
    title="LoadCalc API",
    description="Electrical load, wiring and protection sizing for building circuits",
    version="0.1.0",
)

# The calculation form is served separately and calls the API cross-origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=DEV_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
async def health_check():
    """Liveness check used by the frontend before submitting a project."""
    return {"status": "ok", "service": "loadcalc"}
