"""
Rate limiter configuration.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from gymai.core.config import settings

# Rate limiter keyed on client IP; limits are set per endpoint
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
