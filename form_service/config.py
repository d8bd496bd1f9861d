"""
Settings for the form service, read from the environment and .env.
"""

import os
from typing import List
from pydantic import BaseModel, Field
from dotenv import load_dotenv


PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
TEMPLATES_DIR = os.path.join(PACKAGE_DIR, 'templates')
STATIC_DIR = os.path.join(PACKAGE_DIR, 'static')

DEFAULT_DATA_FILE = os.path.join('data', 'submissions.json')


class Settings(BaseModel):
    host: str = '0.0.0.0'
    port: int = 3000
    data_file: str = DEFAULT_DATA_FILE
    cors_origins: List[str] = Field(default=['*'])
    log_level: str = 'INFO'


def load_settings() -> Settings:
    """
    Reads service settings from the environment.
    A .env file in the working directory is loaded first, if present.
    """

    load_dotenv()

    origins = os.getenv('CORS_ORIGINS', '*')

    return Settings(
        host=os.getenv('FORM_HOST', '0.0.0.0'),
        port=int(os.getenv('FORM_PORT', '3000')),
        data_file=os.getenv('DATA_FILE', DEFAULT_DATA_FILE),
        cors_origins=[o.strip() for o in origins.split(',') if o.strip()],
        log_level=os.getenv('LOG_LEVEL', 'INFO'),
    )
