"""
Jinja2 templates for the form pages and their custom filters.
"""

from datetime import datetime
from fastapi.templating import Jinja2Templates

from form_service.config import TEMPLATES_DIR


def format_date(value) -> str:
    """
    Renders an ISO-8601 timestamp as "YYYY-MM-DD HH:MM:SS".
    Unparsable values are returned unchanged.
    """

    try:
        moment = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return value

    return moment.strftime('%Y-%m-%d %H:%M:%S')


def create_templates() -> Jinja2Templates:
    """
    Templates from the package directory with format_date registered.
    """

    templates = Jinja2Templates(directory=TEMPLATES_DIR)
    templates.env.filters['format_date'] = format_date
    return templates
