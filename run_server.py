import uvicorn

from walkcast.config import settings
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="server")


if __name__ == "__main__":
    setup_logging(level=settings.log_level, job_name="walkcast")
    logger.info("Starting Walkcast API on port %s", settings.port)

    uvicorn.run(
        "walkcast.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=False,
    )
