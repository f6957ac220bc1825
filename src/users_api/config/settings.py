"""
Configuration settings for the User resource server
"""

import os
import logging

# Environment configuration
ENV = os.getenv("ENV", "PROD")
HOST = os.getenv("HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise ValueError(f"LOG_LEVEL environment variable must be a logging level name, got {os.getenv('LOG_LEVEL')!r}")

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

try:
    PORT = int(os.getenv("PORT", 8080))
except ValueError:
    raise ValueError(f"PORT environment variable must be an integer, got {os.getenv('PORT')!r}")

# CORS settings (applied to every response)
CORS_ALLOW_ORIGIN = os.getenv("CORS_ALLOW_ORIGIN", "*")
CORS_ALLOW_METHODS = os.getenv("CORS_ALLOW_METHODS", "GET, POST, PUT, DELETE, OPTIONS")
CORS_ALLOW_HEADERS = os.getenv("CORS_ALLOW_HEADERS", "Content-Type, Authorization")

logger.info(f"Environment: {ENV}")
