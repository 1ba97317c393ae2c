from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from tests.helpers.graph import RecordingGraph
from whatsapp_business.adapters.whatsapp.http_client import WhatsAppHttpClient


@pytest.fixture()
def graph() -> RecordingGraph:
    return RecordingGraph()


@pytest_asyncio.fixture()
async def http(graph: RecordingGraph):
    client = WhatsAppHttpClient("test-access-token", transport=httpx.MockTransport(graph.handler))
    yield client
    await client.close()
