"""
Clubhouse server entry point
"""
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from loguru import logger

from clubhouse.config import get_settings


def configure_logging(level: str, log_dir: str) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level
    )
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    logger.add(
        f"{log_dir}/clubhouse_{{time:YYYY-MM-DD}}.log",
        rotation="1 day",
        retention="30 days",
        level="DEBUG"
    )


def main():
    # .env into os.environ before settings are read
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)
    logger.info(f"Starting {settings.APP_NAME} on {settings.HOST}:{settings.PORT}")
    uvicorn.run("clubhouse.server:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
