import asyncio
import logging
from collections import OrderedDict
from typing import Callable, List

from .config import settings
from .page import HospitalManagementPage

logger = logging.getLogger(__name__)

# least recently used first
_pages: "OrderedDict[str, HospitalManagementPage]" = OrderedDict()
_lock = asyncio.Lock()

async def get_page(token: str, factory: Callable[[], HospitalManagementPage]) -> HospitalManagementPage:
    async with _lock:
        page = _pages.get(token)
        if page is not None:
            _pages.move_to_end(token)
            return page

        page = factory()
        _pages[token] = page
        while len(_pages) > settings.MAX_SESSIONS:
            _, evicted = _pages.popitem(last=False)
            logger.info("Evicting idle console session (%d open)", len(_pages))
            await evicted.client.aclose()
        return page

async def all_tokens() -> List[str]:
    async with _lock:
        return list(_pages)

async def drop_page(token: str):
    async with _lock:
        return _pages.pop(token, None)
