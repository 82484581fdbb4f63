from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.routers import logs, pods
from podlogs.config import settings
from podlogs.logging_config import setup_logging

setup_logging(settings.log_level)

app = FastAPI(
    title="Pod Logs Backend API",
    version="1.0.0",
    description="Paginated Kubernetes container logs",
)

# CORS (for Gradio UI and other tools)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # tighten later for prod
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", tags=["Status"])
def root():
    """Simple health endpoint."""
    return {"status": "Pod Logs Backend Running"}


# Attach routers under /api/*
app.include_router(logs.router, prefix="/api")
app.include_router(pods.router, prefix="/api")
