"""
Internal API authentication dependency.

The workout, nutrition and AI routes are only called by the GymAI app
backend, server to server. Each request carries the shared secret:

    X-Internal-Secret: <INTERNAL_API_SECRET>

The secret is read once at import. While it is unset every protected route
answers 503; a missing or different header gets 403. / and /health stay open
for the platform health checks.

Generate a secret with: python -c "import secrets; print(secrets.token_hex(32))"
"""
import os
import secrets
from fastapi import Header, HTTPException
from typing import Annotated


SECRET = os.getenv("INTERNAL_API_SECRET", "")


def verify_internal_secret(x_internal_secret: Annotated[str, Header()] = "") -> None:
    """FastAPI dependency that validates the shared internal secret header."""
    if not SECRET:
        # Block everything until the secret is configured
        raise HTTPException(
            status_code=503,
            detail="Service not configured (INTERNAL_API_SECRET not set)"
        )
    if not secrets.compare_digest(x_internal_secret, SECRET):
        raise HTTPException(
            status_code=403,
            detail="Forbidden: invalid or missing internal secret"
        )
