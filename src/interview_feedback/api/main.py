# FastAPI Application
"""
Main FastAPI application for the Interview Feedback API.
"""

import logging
import sys
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from interview_feedback import __version__
from interview_feedback.models import HealthResponse
from interview_feedback.api.routes import router
from interview_feedback.config import LOGGING_CONFIG

# Configure logging
logging.basicConfig(
    level=LOGGING_CONFIG["log_level"],
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="Interview Feedback API",
    description="""
    Feedback and interview lookups for the mock interview app.

    ## Endpoints

    1. **POST /api/v1/feedback** - Generate and store AI feedback for a transcript
    2. **GET /api/v1/interviews/{id}** - Get one interview
    3. **GET /api/v1/interviews/{id}/feedback?userId=** - Get a user's feedback for an interview
    4. **GET /api/v1/interviews/latest?userId=&limit=** - Finalized interviews from other users
    5. **GET /api/v1/users/{userId}/interviews** - A user's own interviews
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(router)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health check",
    description="Check if the API is running and healthy."
)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(),
    )


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.exception(f"Unhandled error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "InternalServerError",
            "detail": "An unexpected error occurred. Please try again later."
        }
    )


# ============================================================================
# Entry point for running directly
# ============================================================================

def run_server(host: str = "0.0.0.0", port: int = 8000, reload: bool = False):
    """Run the FastAPI server."""
    import uvicorn
    uvicorn.run(
        "interview_feedback.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )

