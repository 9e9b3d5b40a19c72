"""FastAPI application setup for Walkcast."""

from fastapi import FastAPI

from .api import router as api_router

app = FastAPI(title="Walkcast")

# API routes
app.include_router(api_router, prefix="/v1")
