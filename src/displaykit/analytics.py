# topmark:header:start
#
#   project      : DisplayKit
#   file         : analytics.py
#   file_relpath : src/displaykit/analytics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Usage analytics sent to a PostHog capture endpoint.

An [`AnalyticsManager`][displaykit.analytics.AnalyticsManager] posts events to
``{api_host}/capture/``. Once started it reports ``app_started`` and then, every
``interval_hours``, an ``app_still_running`` event carrying the recording health
reported by the local API (``GET /health``) and an ``enabled_pipes_hourly`` event
listing the enabled pipes (``GET /pipes/list``).

In development mode (``debug=True`` or ``DISPLAYKIT_ENV_DEBUG=true``) nothing is
sent and no background task is started.
"""

from __future__ import annotations

import asyncio
import os
import platform
from typing import TYPE_CHECKING, Any, Final

import httpx

from displaykit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)

POSTHOG_API_HOST: Final[str] = "https://eu.i.posthog.com"
ANALYTICS_DEBUG_ENV_VAR: Final[str] = "DISPLAYKIT_ENV_DEBUG"
REQUEST_TIMEOUT_SEC: Final[float] = 10.0

EVENT_APP_STARTED: Final[str] = "app_started"
EVENT_APP_STILL_RUNNING: Final[str] = "app_still_running"
EVENT_ENABLED_PIPES: Final[str] = "enabled_pipes_hourly"

# Subsystem states that count as healthy.
_HEALTHY_STATES: Final[frozenset[str]] = frozenset({"ok", "disabled"})
_STATUS_KEYS: Final[tuple[str, ...]] = ("frame_status", "audio_status", "ui_status")


class AnalyticsError(Exception):
    """Raised when the capture endpoint answers with a non-success status."""


def system_properties() -> dict[str, Any]:
    """Describe the host the way every captured event does."""
    total_memory: int = 0
    try:
        total_memory = os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES")
    except (AttributeError, ValueError, OSError):
        # Not available on Windows.
        pass
    return {
        "os_name": platform.system(),
        "os_version": platform.version(),
        "kernel_version": platform.release(),
        "host_name": platform.node(),
        "cpu_count": os.cpu_count() or 0,
        "total_memory": total_memory,
    }


def health_error_payload(error: str) -> dict[str, Any]:
    """Build the health payload reported when the health check itself failed."""
    payload: dict[str, Any] = {"is_healthy": False}
    payload.update({key: "error" for key in _STATUS_KEYS})
    payload["error"] = error
    return payload


def health_payload(health: Mapping[str, Any]) -> dict[str, Any]:
    """Summarize a ``/health`` response.

    Missing or non-string statuses read as ``"unknown"``. The recording is
    healthy when every subsystem is either ``"ok"`` or ``"disabled"``.

    Args:
        health: Decoded JSON body of the health endpoint.

    Returns:
        ``is_healthy`` plus the three subsystem statuses.
    """
    statuses: dict[str, str] = {}
    for key in _STATUS_KEYS:
        value: Any = health.get(key)
        statuses[key] = value if isinstance(value, str) else "unknown"
    is_healthy: bool = all(v in _HEALTHY_STATES for v in statuses.values())
    return {"is_healthy": is_healthy, **statuses}


def enabled_pipe_ids(pipe_list: Mapping[str, Any]) -> list[str]:
    """Return the ids of enabled pipes from a ``/pipes/list`` response.

    Raises:
        ValueError: If the response has no ``data`` list or a pipe entry lacks
            a string ``id`` or a boolean ``enabled``.
    """
    data: Any = pipe_list.get("data")
    if not isinstance(data, list):
        raise ValueError("pipe list response has no 'data' array")
    ids: list[str] = []
    for pipe in data:
        if (
            not isinstance(pipe, dict)
            or not isinstance(pipe.get("id"), str)
            or not isinstance(pipe.get("enabled"), bool)
        ):
            raise ValueError(f"invalid pipe entry: {pipe!r}")
        if pipe["enabled"]:
            ids.append(pipe["id"])
    return ids


def is_debug_environment() -> bool:
    """Return True when ``DISPLAYKIT_ENV_DEBUG`` is exactly ``"true"``."""
    return os.environ.get(ANALYTICS_DEBUG_ENV_VAR, "false") == "true"


class AnalyticsManager:
    """Send analytics events and run the periodic health report.

    Args:
        posthog_api_key: Project API key sent with every event.
        distinct_id: Identifier of this installation.
        interval_hours: Period of the health and pipe reports.
        local_api_base_url: Base URL of the local API (``/health``, ``/pipes/list``).
        api_host: PostHog host.
        enabled: Initial enabled state; a disabled manager sends nothing.
        client: HTTP client to use; one is created (and owned) when omitted.
    """

    def __init__(
        self,
        posthog_api_key: str,
        distinct_id: str,
        interval_hours: float,
        local_api_base_url: str,
        *,
        api_host: str = POSTHOG_API_HOST,
        enabled: bool = True,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if interval_hours <= 0:
            raise ValueError(f"interval_hours must be positive: {interval_hours}")
        self.posthog_api_key: str = posthog_api_key
        self.distinct_id: str = distinct_id
        self.interval_sec: float = interval_hours * 3600
        self.api_host: str = api_host.rstrip("/")
        self.local_api_base_url: str = local_api_base_url.rstrip("/")
        self.enabled: bool = enabled
        self._owns_client: bool = client is None
        if client is None:
            client = httpx.AsyncClient(timeout=httpx.Timeout(REQUEST_TIMEOUT_SEC))
        self._client: httpx.AsyncClient = client
        self._stop_event = asyncio.Event()
        self._tasks: list[asyncio.Task[None]] = []

    def build_payload(
        self, event: str, properties: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Build the capture body; ``properties`` override the host properties."""
        props: dict[str, Any] = {
            "distinct_id": self.distinct_id,
            "$lib": "python-httpx",
            **system_properties(),
        }
        if properties:
            props.update(properties)
        return {"api_key": self.posthog_api_key, "event": event, "properties": props}

    async def send_event(self, event: str, properties: Mapping[str, Any] | None = None) -> None:
        """Post ``event`` to the capture endpoint (no-op when disabled).

        Raises:
            AnalyticsError: If the endpoint answers with a non-2xx status.
            httpx.HTTPError: On transport failures.
        """
        if not self.enabled:
            logger.trace("analytics disabled; dropping event %s", event)
            return
        resp: httpx.Response = await self._client.post(
            f"{self.api_host}/capture/", json=self.build_payload(event, properties)
        )
        if not resp.is_success:
            raise AnalyticsError(f"PostHog API error: {resp.status_code}")
        logger.debug("sent analytics event %s", event)

    async def check_recording_health(self) -> dict[str, Any]:
        """Query ``/health`` and summarize the answer with `health_payload`.

        A non-2xx answer yields an error payload. Transport and decoding errors
        propagate.
        """
        resp: httpx.Response = await self._client.get(f"{self.local_api_base_url}/health")
        if not resp.is_success:
            return health_error_payload(f"Health check failed with status: {resp.status_code}")
        body: Any = resp.json()
        if not isinstance(body, dict):
            raise ValueError("health response is not a JSON object")
        return health_payload(body)

    async def track_enabled_pipes(self) -> None:
        """Report the enabled pipes listed by ``/pipes/list``."""
        resp: httpx.Response = await self._client.get(f"{self.local_api_base_url}/pipes/list")
        resp.raise_for_status()
        body: Any = resp.json()
        if not isinstance(body, dict):
            raise ValueError("pipe list response is not a JSON object")
        ids: list[str] = enabled_pipe_ids(body)
        await self.send_event(
            EVENT_ENABLED_PIPES, {"enabled_pipes": ids, "enabled_pipe_count": len(ids)}
        )

    async def report_once(self) -> None:
        """Run one periodic cycle: health event, then enabled pipes.

        Failures are logged and never raised, so the periodic loop keeps running.
        """
        if not self.enabled:
            return
        try:
            health: dict[str, Any] = await self.check_recording_health()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("failed to check recording health: %s", exc)
            health = health_error_payload(str(exc))

        try:
            await self.send_event(EVENT_APP_STILL_RUNNING, health)
        except (httpx.HTTPError, AnalyticsError) as exc:
            logger.error("failed to send periodic analytics event: %s", exc)

        try:
            await self.track_enabled_pipes()
        except (httpx.HTTPError, AnalyticsError, ValueError) as exc:
            logger.warning("failed to track enabled pipes: %s, is the local API up?", exc)

    async def start_periodic_event(self) -> None:
        """Run `report_once` now and then once per interval until stopped."""
        while not self._stop_event.is_set():
            await self.report_once()
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self.interval_sec)
            except asyncio.TimeoutError:
                pass

    async def _send_startup_event(self) -> None:
        try:
            await self.send_event(EVENT_APP_STARTED)
        except (httpx.HTTPError, AnalyticsError) as exc:
            logger.error("failed to send initial analytics event: %s", exc)

    def start(self) -> None:
        """Schedule the startup event and the periodic loop on the running event loop."""
        self._tasks.append(asyncio.create_task(self._send_startup_event()))
        self._tasks.append(asyncio.create_task(self.start_periodic_event()))

    async def stop(self) -> None:
        """Stop background tasks and close the client if this manager created it."""
        self._stop_event.set()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
            self._tasks.clear()
        if self._owns_client:
            await self._client.aclose()


def start_analytics(
    unique_id: str,
    posthog_api_key: str,
    interval_hours: float,
    local_api_base_url: str,
    *,
    debug: bool | None = None,
    api_host: str = POSTHOG_API_HOST,
    client: httpx.AsyncClient | None = None,
) -> AnalyticsManager:
    """Create an analytics manager and start it on the running event loop.

    Args:
        unique_id: Installation identifier (PostHog ``distinct_id``).
        posthog_api_key: PostHog project API key.
        interval_hours: Period of the health and pipe reports.
        local_api_base_url: Base URL of the local API.
        debug: Development mode; defaults to
            [`is_debug_environment`][displaykit.analytics.is_debug_environment].
        api_host: PostHog host.
        client: Optional HTTP client.

    Returns:
        The manager. In development mode it is disabled and not started.
    """
    if debug is None:
        debug = is_debug_environment()
    if debug:
        logger.info("skipping analytics in development mode")
        return AnalyticsManager(
            posthog_api_key,
            unique_id,
            interval_hours,
            local_api_base_url,
            api_host=api_host,
            enabled=False,
            client=client,
        )

    manager = AnalyticsManager(
        posthog_api_key,
        unique_id,
        interval_hours,
        local_api_base_url,
        api_host=api_host,
        client=client,
    )
    manager.start()
    return manager
