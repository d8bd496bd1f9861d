"""
Settings for the static asset server, read from the environment and .env.
"""

import os
from pydantic import BaseModel
from dotenv import load_dotenv


PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_PUBLIC_DIR = os.path.join(PACKAGE_DIR, 'public')


class Settings(BaseModel):
    host: str = '0.0.0.0'
    port: int = 3001
    public_dir: str = DEFAULT_PUBLIC_DIR
    log_level: str = 'INFO'


def load_settings() -> Settings:
    """
    Reads server settings from the environment (.env is loaded first).
    """

    load_dotenv()

    return Settings(
        host=os.getenv('STATIC_HOST', '0.0.0.0'),
        port=int(os.getenv('STATIC_PORT', '3001')),
        public_dir=os.path.abspath(os.getenv('PUBLIC_DIR', DEFAULT_PUBLIC_DIR)),
        log_level=os.getenv('LOG_LEVEL', 'INFO'),
    )
