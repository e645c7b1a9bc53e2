"""Blocking facade over :class:`AsyncSpotClient`.

Each service is exposed twice: ``client.cloudspaces`` blocks, while
``client.acloudspaces`` is the native async service of the wrapped client.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

from spotctl.client.async_client import AsyncSpotClient
from spotctl.config import ClientConfig

T = TypeVar("T")

SERVICE_NAMES = (
    "organizations",
    "regions",
    "server_classes",
    "cloudspaces",
    "spot_nodepools",
    "ondemand_nodepools",
)


class _LoopRunner:
    """Owns the private event loop every blocking call runs on."""

    def __init__(self) -> None:
        self._runner = asyncio.Runner()
        self.closed = False

    def __call__(self, coro: Coroutine[Any, Any, T]) -> T:
        if self.closed:
            coro.close()
            raise RuntimeError("sync client is closed")
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return self._runner.run(coro)
        coro.close()
        raise RuntimeError("sync client methods cannot run inside an active event loop; use the a-prefixed services")

    def close(self) -> None:
        if not self.closed:
            self._runner.close()
            self.closed = True


class _BlockingService:
    """Runs every coroutine method of an async service to completion."""

    def __init__(self, service: Any, run: _LoopRunner) -> None:
        self._service = service
        self._run = run

    def __getattr__(self, item: str) -> Any:
        attr = getattr(self._service, item)
        if not callable(attr):
            return attr

        def call(*args: Any, **kwargs: Any) -> Any:
            return self._run(attr(*args, **kwargs))

        return call

    def __repr__(self) -> str:
        return f"<blocking {type(self._service).__name__}>"


class SpotClient:
    """Sync Spot client; accepts the same arguments as :class:`AsyncSpotClient`."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._run = _LoopRunner()
        self.async_client = AsyncSpotClient(*args, **kwargs)
        for name in SERVICE_NAMES:
            service = getattr(self.async_client, name)
            setattr(self, name, _BlockingService(service, self._run))
            setattr(self, f"a{name}", service)

    @property
    def config(self) -> ClientConfig:
        return self.async_client.config

    @property
    def namespace(self) -> str | None:
        return self.async_client.namespace

    def authenticate(self) -> str:
        return self._run(self.async_client.authenticate())

    def close(self) -> None:
        if self._run.closed:
            return
        try:
            self._run(self.async_client.aclose())
        finally:
            self._run.close()

    def __enter__(self) -> SpotClient:
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()
