from contextlib import asynccontextmanager
import logging
from typing import AsyncIterator, Callable

from fastapi import Depends, FastAPI, HTTPException
from pydantic import ValidationError as PydanticValidationError

from .client import HospitalAdminClient
from .config import settings
from .logging_setup import configure_logging
from .page import HospitalManagementPage
from .schemas import ContactAdd, CountryCodeUpdate, DraftUpdate
from .session import Session, session_from_authorization
from .storage import all_tokens, drop_page, get_page

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    yield
    for token in await all_tokens():
        page = await drop_page(token)
        if page is not None:
            await page.client.aclose()


app = FastAPI(title="Hospital Admin Console", version="1.0", lifespan=lifespan)


def get_client_factory() -> Callable[[Session], HospitalAdminClient]:
    return HospitalAdminClient


async def current_page(
    session: Session = Depends(session_from_authorization),
    make_client: Callable[[Session], HospitalAdminClient] = Depends(get_client_factory),
) -> AsyncIterator[HospitalManagementPage]:
    page = await get_page(session.token, lambda: HospitalManagementPage(make_client(session)))
    try:
        yield page
    finally:
        # token refused upstream: the session is not kept
        if page.rejected and await drop_page(session.token) is page:
            logger.info("Dropping console session rejected by upstream")
            await page.client.aclose()


def ensure_accepted(page: HospitalManagementPage):
    if page.rejected:
        raise HTTPException(401, "Session token rejected by the hospital API")


@app.get("/")
def root():
    return {"message": "Hospital admin console running"}


# ---------------------------------------------------------
# HOSPITAL LIST
# ---------------------------------------------------------

@app.get("/console")
async def console(page: HospitalManagementPage = Depends(current_page)):
    await page.mount()
    ensure_accepted(page)
    return page.view()


@app.post("/console/refresh")
async def refresh(page: HospitalManagementPage = Depends(current_page)):
    await page.fetch_hospitals()
    ensure_accepted(page)
    return page.view()


@app.get("/console/notifications")
async def notifications(page: HospitalManagementPage = Depends(current_page)):
    return {"notifications": page.drain_notifications()}


@app.delete("/console")
async def end_session(session: Session = Depends(session_from_authorization)):
    page = await drop_page(session.token)
    if page is None:
        raise HTTPException(404, "No console session")
    await page.client.aclose()
    return {"ended": True}


# ---------------------------------------------------------
# CREATION DIALOG — DRAFT STATE
# ---------------------------------------------------------

@app.post("/console/dialog/open")
async def open_dialog(page: HospitalManagementPage = Depends(current_page)):
    page.open_dialog()
    return page.view()


@app.post("/console/dialog/cancel")
async def cancel_dialog(page: HospitalManagementPage = Depends(current_page)):
    page.cancel()
    return page.view()


@app.patch("/console/draft")
async def update_draft(body: DraftUpdate, page: HospitalManagementPage = Depends(current_page)):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    hospital_type = changes.get("hospital_type")
    if hospital_type is not None and hospital_type not in settings.HOSPITAL_TYPES:
        raise HTTPException(422, f"Unknown hospital type: {hospital_type}")
    try:
        page.form.update(**changes)
    except PydanticValidationError as e:
        raise HTTPException(422, str(e))
    return page.view()


@app.put("/console/country-code")
async def select_country_code(body: CountryCodeUpdate, page: HospitalManagementPage = Depends(current_page)):
    if body.country_code not in settings.COUNTRY_CODES:
        raise HTTPException(422, f"Unsupported country code: {body.country_code}")
    page.form.country_code = body.country_code
    return page.view()


@app.post("/console/contacts")
async def add_contact(body: ContactAdd, page: HospitalManagementPage = Depends(current_page)):
    page.form.contact_input = body.number
    page.form.add_contact()
    return page.view()


@app.delete("/console/contacts")
async def remove_contact(value: str, page: HospitalManagementPage = Depends(current_page)):
    page.form.remove_contact(value)
    return page.view()


# ---------------------------------------------------------
# CREATE SUBMISSION
# ---------------------------------------------------------

@app.post("/console/submit")
async def submit(page: HospitalManagementPage = Depends(current_page)):
    created = await page.submit()
    ensure_accepted(page)
    return {"created": created, "view": page.view()}
