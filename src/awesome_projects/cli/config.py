import logging

from dotenv import load_dotenv

from awesome_projects.shared.config import Settings

load_dotenv()


def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
