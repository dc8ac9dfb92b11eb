import json

import httpx
import pytest

from hospital_admin import storage
from hospital_admin.client import HospitalAdminClient
from hospital_admin.session import Session

UPSTREAM = "http://upstream.test"


class UpstreamStub:
    """In-process stand-in for the admin hospitals API."""

    def __init__(self):
        self.hospitals = []
        self.list_status = 200
        self.list_body = None
        self.create_status = 201
        self.create_error = None
        self.create_text = None
        self.create_raises = False
        self.requests = []
        self._next_id = 1

    def add_hospital(self, **fields):
        record = {
            "id": self._next_id,
            "user_id": 100 + self._next_id,
            "hospital_name": "City General",
            "address": "1 Main St",
            "email": "admin@city.test",
            "status": "active",
        }
        record.update(fields)
        self._next_id += 1
        self.hospitals.append(record)
        return record

    def posts(self):
        return [r for r in self.requests if r.method == "POST"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.method == "GET" and request.url.path == "/api/admin/hospitals":
            if self.list_status != 200:
                return httpx.Response(self.list_status, json={"error": "nope"})
            if self.list_body is not None:
                return httpx.Response(200, json=self.list_body)
            return httpx.Response(200, json={"hospitals": list(self.hospitals)})

        if request.method == "POST" and request.url.path == "/api/admin/hospitals/create":
            if self.create_raises:
                raise httpx.ConnectError("connection refused", request=request)
            if self.create_status >= 400:
                if self.create_text is not None:
                    return httpx.Response(self.create_status, text=self.create_text)
                body = {"error": self.create_error} if self.create_error else {}
                return httpx.Response(self.create_status, json=body)
            body = json.loads(request.content)
            self.add_hospital(
                hospital_name=body["hospital_name"],
                address=body["address"],
                email=body["email"],
                phone_number=body.get("phone_number"),
                status="pending",
            )
            return httpx.Response(self.create_status, json={"message": "created"})

        return httpx.Response(404)

    def client(self, session: Session) -> HospitalAdminClient:
        return HospitalAdminClient(session, base_url=UPSTREAM, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture(autouse=True)
def clear_sessions():
    storage._pages.clear()
    yield
    storage._pages.clear()
