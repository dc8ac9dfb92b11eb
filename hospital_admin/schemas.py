from pydantic import BaseModel, ConfigDict
from typing import Optional, List, Any, Dict, Union

from .contacts import parse_phone_list


class HospitalRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    user_id: Optional[int] = None
    hospital_name: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    hospital_type: Optional[str] = None
    license_number: Optional[str] = None
    number_of_ambulances: Optional[int] = None
    number_of_beds: Optional[int] = None
    departments: Optional[str] = None
    # the API sends either 0/1 or a real boolean
    google_map_enabled: Optional[Union[bool, int]] = None
    google_map_link: Optional[str] = None
    status: Optional[str] = None
    email: Optional[str] = None


class HospitalCreate(BaseModel):
    email: str
    password: str
    full_name: str
    hospital_name: str
    address: str
    phone_number: str = ""
    hospital_type: str
    license_number: Optional[str] = None
    number_of_ambulances: int = 0
    number_of_beds: int = 0
    departments: Optional[str] = None
    google_map_enabled: bool = False
    google_map_link: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class HospitalCard(BaseModel):
    id: int
    hospital_name: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    phone_list: List[str]
    phone_display: List[str]
    is_active: bool
    status_label: str
    type_label: str
    ambulances: int
    beds: int
    show_location: bool
    location_link: Optional[str] = None

    @classmethod
    def from_record(cls, record: HospitalRecord) -> "HospitalCard":
        phones = parse_phone_list(record.phone_number)
        is_active = record.status == "active"
        show_location = bool(record.google_map_enabled) and bool(record.google_map_link)
        return cls(
            id=record.id,
            hospital_name=record.hospital_name,
            address=record.address,
            email=record.email,
            phone_list=phones,
            phone_display=phones or ["N/A"],
            is_active=is_active,
            status_label="Active" if is_active else "Inactive",
            type_label=record.hospital_type or "N/A",
            ambulances=record.number_of_ambulances or 0,
            beds=record.number_of_beds or 0,
            show_location=show_location,
            location_link=record.google_map_link if show_location else None,
        )


class Notification(BaseModel):
    title: str
    description: Optional[str] = None
    variant: str = "default"  # or "destructive"


# ---------------------------------------------------------
# CONSOLE REQUEST / RESPONSE BODIES
# ---------------------------------------------------------

class DraftUpdate(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None
    hospital_name: Optional[str] = None
    address: Optional[str] = None
    hospital_type: Optional[str] = None
    license_number: Optional[str] = None
    number_of_ambulances: Optional[str] = None
    number_of_beds: Optional[str] = None
    departments: Optional[str] = None
    location_enabled: Optional[bool] = None
    location_link: Optional[str] = None


class ContactAdd(BaseModel):
    number: str


class CountryCodeUpdate(BaseModel):
    country_code: str


class PageView(BaseModel):
    title: str
    state: str  # "loading", "empty" or "list"
    empty_message: str
    hospitals: List[HospitalCard]
    dialog_open: bool
    draft: Dict[str, Any]
    contacts: List[str]
    country_code: str
    country_codes: List[str]
    hospital_types: List[str]
    submit_label: str
    submit_disabled: bool
