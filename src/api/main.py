"""
FastAPI backend: REST API for the contacts directory.
Run with uvicorn: uvicorn api.main:app --reload  (or python -m api)
"""

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.exceptions import RequestValidationError  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from pydantic import BaseModel  # noqa: E402
from starlette.exceptions import HTTPException as StarletteHTTPException  # noqa: E402

from api.settings import load_settings  # noqa: E402
from contactbook.application import (  # noqa: E402
    ContactService,
    Invalid,
    NotFound,
    ReadFailed,
    WriteFailed,
)
from contactbook.domain import Contact  # noqa: E402
from contactbook.infrastructure import JsonFileContactRepository  # noqa: E402

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def get_service(app: FastAPI) -> ContactService:
    """Return the app's ContactService, building it from settings on first use."""
    if getattr(app.state, "service", None) is None:
        settings = load_settings()
        repo = JsonFileContactRepository(
            settings.contacts_file, strict_reads=settings.strict_reads
        )
        app.state.service = ContactService(repo)
        logger.info("Data file: %s", repo.path)
    return app.state.service


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)
    get_service(app)
    logger.info(
        "Contacts API: http://localhost:%s/api/contacts", settings.port
    )
    yield


app = FastAPI(title="Contactbook API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Envelope ---


class Envelope(BaseModel):
    success: bool
    message: str
    data: dict | None = None


def _respond(
    status_code: int, message: str, data: dict | None = None, *, success: bool = True
) -> JSONResponse:
    body = Envelope(success=success, message=message, data=data)
    return JSONResponse(
        content=body.model_dump(exclude_none=True), status_code=status_code
    )


def _fail(status_code: int, message: str) -> JSONResponse:
    return _respond(status_code, message, success=False)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _fail(exc.status_code, message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return _fail(400, "Invalid request body")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _fail(500, "Internal server error")


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class ContactBody(BaseModel):
    name: str | None = None
    phone: str | None = None


def _contact_item(contact: Contact) -> dict:
    return contact.to_dict()


@app.get("/api/contacts")
def list_contacts(request: Request):
    result = get_service(request.app).list_contacts()
    if isinstance(result, ReadFailed):
        return _fail(500, "Failed to read contacts")
    return _respond(
        200,
        "Contacts retrieved",
        {"contacts": [_contact_item(c) for c in result]},
    )


@app.get("/api/contacts/{contact_id}")
def get_contact(contact_id: str, request: Request):
    result = get_service(request.app).get_contact(contact_id)
    if isinstance(result, NotFound):
        return _fail(404, "Contact not found")
    if isinstance(result, ReadFailed):
        return _fail(500, "Failed to read contacts")
    return _respond(200, "Contact retrieved", {"contact": _contact_item(result)})


@app.post("/api/contacts")
def create_contact(body: ContactBody, request: Request):
    result = get_service(request.app).add_contact(body.name, body.phone)
    if isinstance(result, Invalid):
        return _fail(400, "Name and phone are required")
    if isinstance(result, ReadFailed):
        return _fail(500, "Failed to read contacts")
    if isinstance(result, WriteFailed):
        return _fail(500, "Failed to save contact")
    return _respond(201, "Contact created", {"contact": _contact_item(result)})


@app.put("/api/contacts/{contact_id}")
def update_contact(contact_id: str, body: ContactBody, request: Request):
    result = get_service(request.app).update_contact(contact_id, body.name, body.phone)
    if isinstance(result, Invalid):
        return _fail(400, "Id, name and phone are required")
    if isinstance(result, NotFound):
        return _fail(404, "Contact not found")
    if isinstance(result, ReadFailed):
        return _fail(500, "Failed to read contacts")
    if isinstance(result, WriteFailed):
        return _fail(500, "Failed to save contact")
    return _respond(200, "Contact updated", {"contact": _contact_item(result)})


@app.delete("/api/contacts/{contact_id}")
def delete_contact(contact_id: str, request: Request):
    result = get_service(request.app).delete_contact(contact_id)
    if isinstance(result, Invalid):
        return _fail(400, "Id is required")
    if isinstance(result, NotFound):
        return _fail(404, "Contact not found")
    if isinstance(result, ReadFailed):
        return _fail(500, "Failed to read contacts")
    if isinstance(result, WriteFailed):
        return _fail(500, "Failed to delete contact")
    return _respond(200, "Contact deleted")
