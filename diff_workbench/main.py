"""
Diff Workbench Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from diff_workbench.routers import config, diff
from diff_workbench.services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Diff Workbench Backend...")
    config_manager = ConfigManager.get_instance()
    max_cells = config_manager.get_config().get("diff", {}).get("maxAlignmentCells")
    print(f"[Backend] ConfigManager initialized (maxAlignmentCells={max_cells})")

    yield
    print("[Backend] Shutting down Diff Workbench Backend...")


app = FastAPI(
    title="Diff Workbench Backend",
    description="Line-level diff engine for the code-generation workbench",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the browser workbench
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "diff-workbench-backend"}


def run():
    """Run the backend with the configured host and port"""
    import uvicorn

    server = ConfigManager.get_instance().get_config().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))


if __name__ == "__main__":
    run()
