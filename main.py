"""
Entry point for the User Resource Server
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Import the FastAPI application
from users_api.app import app
from users_api.config.settings import HOST, PORT, LOG_LEVEL

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting User Resource Server on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
