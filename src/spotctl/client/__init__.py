"""Client entrypoints."""

from spotctl.client.async_client import AsyncSpotClient, connect
from spotctl.client.sync_client import SpotClient

__all__ = [
    "AsyncSpotClient",
    "SpotClient",
    "connect",
]
