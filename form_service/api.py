"""
Form Persistence Service.

Renders the registration form, accepts submissions into a flat-file store
and exposes them as an HTML list and as raw JSON.
"""

import logging
import uvicorn
from contextlib import asynccontextmanager
from typing import Optional
from urllib.parse import urlencode
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from form_service.config import STATIC_DIR, Settings, load_settings
from form_service.schemas import SubmissionForm, new_submission
from form_service.storage import JsonFileStore, StorageReadError, SubmissionStore
from form_service.templating import create_templates


logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = 'Name and email are required'
GENERIC_ERROR_MESSAGE = 'An error occurred. Please try again.'

templates = create_templates()


def configure_logging(level: str = 'INFO') -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )


def form_redirect(message: str) -> RedirectResponse:
    """
    Redirect back to the form with a notice in the query string.
    """

    return RedirectResponse('/?' + urlencode({'message': message}), status_code=302)


async def read_submission_form(request: Request) -> SubmissionForm:
    """
    Parses the POST body, either JSON or form-encoded.
    """

    content_type = request.headers.get('content-type', '')
    if content_type.startswith('application/json'):
        data = await request.json()
    else:
        data = await request.form()

    return SubmissionForm.model_validate(dict(data))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Service lifecycle: announces startup and shutdown.
    """

    print("Starting form service...")
    logger.info("Submissions are stored in %r", app.state.store)

    yield

    print("Stopping form service...")


def create_app(store: Optional[SubmissionStore] = None,
               settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title='Form Persistence Service', lifespan=lifespan)
    app.state.store = store if store is not None else JsonFileStore(settings.data_file)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.mount('/static', StaticFiles(directory=STATIC_DIR), name='static')

    @app.get('/', response_class=HTMLResponse)
    async def render_form(request: Request, message: Optional[str] = None):
        """
        Registration form. An optional message is shown above it.
        """

        return templates.TemplateResponse(request, 'form.html', {
            'title': 'User Registration Form',
            'message': message,
        })

    @app.post('/submit')
    async def submit(request: Request):
        """
        Accepts a submission and redirects to the listing.

        Missing name or email sends the user back to the form;
        storage failures are logged inside the store and do not
        change the redirect.
        """

        try:
            form = await read_submission_form(request)
            if form.missing_required():
                return form_redirect(REQUIRED_FIELDS_MESSAGE)
            record = new_submission(form)
        except (ValueError, TypeError) as e:
            logger.error("Error processing form: %s", e)
            return form_redirect(GENERIC_ERROR_MESSAGE)

        stored = await run_in_threadpool(request.app.state.store.append_one, record)
        logger.info("Stored submission %s", stored.id)

        return RedirectResponse('/display', status_code=302)

    @app.get('/display', response_class=HTMLResponse)
    def display(request: Request):
        """
        Submissions, most recent first.
        A storage read failure renders an empty list with an error notice.
        """

        error = None
        try:
            submissions = request.app.state.store.load_all()
        except StorageReadError as e:
            logger.error("Error displaying data: %s", e)
            submissions = []
            error = 'Error loading data'

        return templates.TemplateResponse(request, 'display.html', {
            'title': 'Submitted Data',
            'submissions': list(reversed(submissions)),
            'error': error,
        })

    @app.get('/api/data')
    def api_data(request: Request):
        """
        The stored collection as-is, in insertion order.
        """

        try:
            submissions = request.app.state.store.load_all()
        except StorageReadError as e:
            logger.error("Error fetching data: %s", e)
            return JSONResponse({'error': 'Error fetching data'}, status_code=500)

        return JSONResponse(submissions)

    @app.get('/health')
    async def health_check(request: Request):
        """
        Liveness probe.
        """

        return {
            'status': 'active',
            'store': type(request.app.state.store).__name__,
        }

    return app


def main() -> None:
    """
    Runs the service with uvicorn, building the app through create_app.
    """

    settings = load_settings()
    configure_logging(settings.log_level)

    print(f"Server running at http://localhost:{settings.port}/")
    print(f"View submissions at http://localhost:{settings.port}/display")
    uvicorn.run("form_service.api:create_app", factory=True,
                host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
