"""
GymAI Microservice - Main Entry Point

Workout programming, nutrition targets and AI-assisted plan adaptation.
"""
import os
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from gymai.core.config import settings
from gymai.core.logger import logger
from gymai.core.limiter import limiter
from gymai.routes import adaptation, nutrition, units, workout


SERVICE_NAME = "gymai-microservice"
VERSION = "1.0.0"

# Deterministic features work without AI; only warn when it is unconfigured
try:
    settings.validate()
    logger.info("Configuration validated successfully")
except ValueError as e:
    logger.warning(f"AI features disabled: {e}")


# Create FastAPI app
app = FastAPI(
    title="GymAI Microservice",
    description="Workout programming, nutrition targets and AI workout adaptation",
    version=VERSION
)

# Attach rate limiter and its error handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


app.include_router(workout.router, tags=["Workout"])
app.include_router(adaptation.router, tags=["Adaptation"])
app.include_router(nutrition.router, tags=["Nutrition"])
app.include_router(units.router, tags=["Units"])


@app.get("/")
@limiter.limit("60/minute")
def root(request: Request):
    """Health check endpoint."""
    return {"message": "GymAI Microservice running"}


@app.get("/health")
def health():
    """
    Detailed health status.
    Returns 'degraded' if required environment variables are missing.
    """
    required_vars = ["OPENAI_API_KEY", "INTERNAL_API_SECRET"]
    missing = [v for v in required_vars if not os.environ.get(v)]

    if missing:
        return JSONResponse(
            status_code=200,
            content={
                "status": "degraded",
                "service": SERVICE_NAME,
                "version": VERSION,
                "missing_config": missing,
                "message": f"Missing required environment variables: {', '.join(missing)}"
            }
        )

    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": VERSION
    }


# Run with uvicorn when executed directly
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "gymai.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False  # Never use reload=True in production (disables multi-threading)
    )
