import re
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .config import settings
from .contacts import ContactNumberSet
from .errors import ValidationError
from .schemas import HospitalCreate

REQUIRED_FIELDS: Tuple[str, ...] = ("full_name", "email", "password", "hospital_name", "address")

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")
_ANY_DIGIT = re.compile(r"[0-9]")


class HospitalDraft(BaseModel):
    """Raw values of the "Add New Hospital" dialog, exactly as typed."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    full_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    hospital_name: str = ""
    address: str = ""
    hospital_type: str = Field(default_factory=lambda: settings.DEFAULT_HOSPITAL_TYPE)
    license_number: str = ""
    number_of_ambulances: str = "0"
    number_of_beds: str = "0"
    departments: str = ""
    location_enabled: bool = False
    location_link: str = ""


def parse_count(text: str) -> int:
    """Leading integer of `text`, or 0 when there is none."""
    match = _LEADING_INT.match(text or "")
    return int(match.group(1)) if match else 0


def validate_draft(draft: HospitalDraft):
    if draft.password != draft.confirm_password:
        raise ValidationError("Passwords do not match")

    if any(not getattr(draft, name) for name in REQUIRED_FIELDS):
        raise ValidationError("Please fill all required fields")


def build_payload(draft: HospitalDraft, contacts: ContactNumberSet) -> HospitalCreate:
    return HospitalCreate(
        email=draft.email,
        password=draft.password,
        full_name=draft.full_name,
        hospital_name=draft.hospital_name,
        address=draft.address,
        phone_number=contacts.joined(),
        hospital_type=draft.hospital_type,
        license_number=draft.license_number or None,
        number_of_ambulances=parse_count(draft.number_of_ambulances),
        number_of_beds=parse_count(draft.number_of_beds),
        departments=draft.departments or None,
        google_map_enabled=draft.location_enabled,
        google_map_link=draft.location_link if draft.location_enabled else None,
    )


class HospitalForm:
    """All draft state owned by the creation dialog."""

    def __init__(self):
        self.draft = HospitalDraft()
        self.contacts = ContactNumberSet()
        self.country_code = settings.DEFAULT_COUNTRY_CODE
        self.contact_input = ""

    def update(self, **fields):
        for name, value in fields.items():
            setattr(self.draft, name, value)

    def add_contact(self) -> bool:
        # input with no digits is left in place
        if not _ANY_DIGIT.search(self.contact_input):
            return False
        added = self.contacts.add(self.contact_input, self.country_code)
        self.contact_input = ""
        return added

    def remove_contact(self, value: str) -> bool:
        return self.contacts.remove(value)

    def validate(self):
        validate_draft(self.draft)

    def payload(self) -> HospitalCreate:
        return build_payload(self.draft, self.contacts)

    def reset(self):
        self.draft = HospitalDraft()
        self.contacts.clear()
        self.country_code = settings.DEFAULT_COUNTRY_CODE
        self.contact_input = ""

    def is_pristine(self) -> bool:
        return (
            self.draft == HospitalDraft()
            and not self.contacts
            and self.country_code == settings.DEFAULT_COUNTRY_CODE
            and self.contact_input == ""
        )
