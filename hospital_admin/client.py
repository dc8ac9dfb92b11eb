import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from .config import settings
from .errors import RequestError
from .schemas import HospitalCreate, HospitalRecord
from .session import Session

logger = logging.getLogger(__name__)

LIST_PATH = "/api/admin/hospitals"
CREATE_PATH = "/api/admin/hospitals/create"


class HospitalAdminClient:
    """
    Thin wrapper over the upstream admin API.
    Every request carries the session's bearer token. Nothing is retried.
    """

    def __init__(
        self,
        session: Session,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.HOSPITAL_API_BASE,
            timeout=timeout if timeout is not None else settings.HTTP_TIMEOUT,
            headers=session.auth_headers(),
            transport=transport,
        )

    async def __aenter__(self) -> "HospitalAdminClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def list_hospitals(self) -> List[HospitalRecord]:
        try:
            res = await self._client.get(LIST_PATH)
        except httpx.HTTPError as e:
            logger.warning("Hospital list request failed: %s", e)
            raise RequestError("Failed to load hospitals") from e

        if not res.is_success:
            logger.warning("Hospital list returned HTTP %s", res.status_code)
            raise RequestError("Failed to load hospitals", status_code=res.status_code)

        try:
            raw = res.json().get("hospitals") or []
        except (ValueError, AttributeError) as e:
            logger.warning("Hospital list body could not be parsed: %s", e)
            raise RequestError("Failed to load hospitals", status_code=res.status_code) from e

        hospitals = []
        for item in raw:
            try:
                hospitals.append(HospitalRecord.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping unreadable hospital record: %s", e)
        return hospitals

    async def create_hospital(self, payload: HospitalCreate) -> Dict[str, Any]:
        try:
            res = await self._client.post(CREATE_PATH, json=payload.to_json())
        except httpx.HTTPError as e:
            logger.error("Create hospital request failed: %s", e)
            raise RequestError("An unexpected error occurred") from e

        data = _json_or_none(res)

        if not res.is_success:
            if data is None:
                # error page instead of a JSON body
                logger.warning("Create hospital returned HTTP %s with a non-JSON body", res.status_code)
                raise RequestError("An unexpected error occurred", status_code=res.status_code)
            message = data.get("error") if isinstance(data.get("error"), str) else None
            logger.warning("Create hospital returned HTTP %s: %s", res.status_code, message)
            raise RequestError(message or "Failed to create hospital", status_code=res.status_code)

        return data or {}


def _json_or_none(res: httpx.Response) -> Optional[Dict[str, Any]]:
    try:
        data = res.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else {}
