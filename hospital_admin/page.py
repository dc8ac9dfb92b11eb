import enum
import logging
from typing import List, Optional

from .config import settings
from .errors import RequestError, ValidationError
from .forms import HospitalForm
from .schemas import HospitalCard, HospitalRecord, Notification, PageView

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No hospital accounts created yet."
AUTH_REJECTED = (401, 403)


class PagePhase(str, enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class HospitalManagementPage:
    """
    State of the "Hospital Management" admin page for one session.

    Holds the fetched hospital list, the creation dialog and its draft, and
    the notifications raised for the admin. `client` is anything exposing
    `list_hospitals()` and `create_hospital(payload)` coroutines, normally a
    HospitalAdminClient.
    """

    def __init__(self, client):
        self.client = client
        self.hospitals: List[HospitalRecord] = []
        self.loading = False
        self.mounted = False
        # set once the upstream refuses the session token
        self.rejected = False
        self.phase = PagePhase.IDLE
        self.dialog_open = False
        self.form = HospitalForm()
        self.notifications: List[Notification] = []

    # ---------------------------------------------------------
    # LIST
    # ---------------------------------------------------------

    async def mount(self):
        """First load of the page; later renders reuse the fetched list."""
        if self.mounted:
            return
        self.mounted = True
        await self.fetch_hospitals()

    async def fetch_hospitals(self) -> bool:
        self.loading = True
        try:
            self.hospitals = await self.client.list_hospitals()
            return True
        except RequestError as e:
            logger.warning("Failed to fetch hospitals: %s", e.message)
            self.rejected = e.status_code in AUTH_REJECTED
            self.notify("Error", "Failed to load hospitals", variant="destructive")
            return False
        finally:
            self.loading = False

    def cards(self) -> List[HospitalCard]:
        return [HospitalCard.from_record(h) for h in self.hospitals]

    # ---------------------------------------------------------
    # CREATION DIALOG
    # ---------------------------------------------------------

    def open_dialog(self):
        self.dialog_open = True

    def cancel(self):
        self.dialog_open = False
        self.form.reset()

    async def submit(self) -> bool:
        """Validate the draft and create the hospital. Returns True on success."""
        if self.phase is PagePhase.SUBMITTING:
            return False

        self.phase = PagePhase.SUBMITTING
        try:
            try:
                self.form.validate()
            except ValidationError as e:
                self.notify(e.message, variant="destructive")
                return False

            payload = self.form.payload()
            self.loading = True
            try:
                await self.client.create_hospital(payload)
            except RequestError as e:
                logger.error("Failed to create hospital %r: %s", payload.hospital_name, e.message)
                self.rejected = e.status_code in AUTH_REJECTED
                self.notify("Error", e.message, variant="destructive")
                return False

            logger.info("Created hospital %r for %s", payload.hospital_name, payload.email)
            self.notify("Hospital created", f'"{payload.hospital_name}" created successfully!')
            self.form.reset()
            self.dialog_open = False
            await self.fetch_hospitals()
            return True
        finally:
            self.loading = False
            self.phase = PagePhase.IDLE

    # ---------------------------------------------------------
    # NOTIFICATIONS / VIEW
    # ---------------------------------------------------------

    def notify(self, title: str, description: Optional[str] = None, variant: str = "default"):
        self.notifications.append(Notification(title=title, description=description, variant=variant))

    def drain_notifications(self) -> List[Notification]:
        pending, self.notifications = self.notifications, []
        return pending

    @property
    def submit_label(self) -> str:
        return "Creating..." if self.phase is PagePhase.SUBMITTING else "Create Hospital"

    @property
    def submit_disabled(self) -> bool:
        return self.loading

    def view(self) -> PageView:
        if self.loading and not self.hospitals:
            state = "loading"
        elif not self.hospitals:
            state = "empty"
        else:
            state = "list"

        return PageView(
            title=f"Hospital Accounts ({len(self.hospitals)})",
            state=state,
            empty_message=EMPTY_MESSAGE,
            hospitals=self.cards(),
            dialog_open=self.dialog_open,
            draft=self.form.draft.model_dump(exclude={"password", "confirm_password"}),
            contacts=list(self.form.contacts),
            country_code=self.form.country_code,
            country_codes=list(settings.COUNTRY_CODES),
            hospital_types=list(settings.HOSPITAL_TYPES),
            submit_label=self.submit_label,
            submit_disabled=self.submit_disabled,
        )
