"""HTTP client for the administrative backend."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal

import aiohttp
from pydantic import SecretStr

from .errors import BackendError, TransportError, normalize_error_message

logger = logging.getLogger(__name__)

Method = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
ALLOWED_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

DEFAULT_BLACKLIST_REASON = "No reason provided"


@dataclass(frozen=True, slots=True)
class RequestSpec:
    """One outbound request, built per call and consumed immediately."""

    endpoint: str
    method: Method
    body: Any = None
    verbatim: bool = False

    def __post_init__(self) -> None:
        if self.method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")

    @property
    def payload(self) -> Any:
        if self.body is None:
            return None
        if self.verbatim:
            return self.body
        return {**self.body}


@dataclass(frozen=True, slots=True)
class TotalStats:
    total_users: int
    total_files: int
    total_bans: int
    premium: int
    storage_used: int
    count: int

    def as_dict(self) -> dict[str, int]:
        return {
            "totalUsers": self.total_users,
            "totalFiles": self.total_files,
            "totalBans": self.total_bans,
            "premium": self.premium,
            "storageUsed": self.storage_used,
            "count": self.count,
        }


class AdminAPI:
    """Authenticated gateway to the backend.

    Every call either returns the decoded JSON payload or raises
    :class:`~adminbot.api.errors.BackendError` /
    :class:`~adminbot.api.errors.TransportError`.
    """

    def __init__(
        self,
        base_url: str,
        api_key: SecretStr | str,
        *,
        timeout: float = 15.0,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key if isinstance(api_key, SecretStr) else SecretStr(api_key)
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    def __repr__(self) -> str:
        return f"AdminAPI(base_url={self.base_url!r})"

    async def __aenter__(self) -> AdminAPI:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    def _url(self, endpoint: str) -> str:
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self.base_url}{endpoint}"

    async def request(
        self, endpoint: str, method: Method, body: Mapping[str, Any] | None = None
    ) -> Any:
        """Send ``body`` shallow-merged into a fresh JSON object."""
        return await self.send(RequestSpec(endpoint, method, body))

    async def request_raw(self, endpoint: str, method: Method, body: Any = None) -> Any:
        """Send ``body`` exactly as given; used by endpoints that expect a JSON list."""
        return await self.send(RequestSpec(endpoint, method, body, verbatim=True))

    async def send(self, spec: RequestSpec) -> Any:
        url = self._url(spec.endpoint)
        kwargs: dict[str, Any] = {"headers": {"Authorization": self._api_key.get_secret_value()}}
        payload = spec.payload
        if payload is not None:
            kwargs["json"] = payload

        logger.debug(f"{spec.method} {spec.endpoint}")

        try:
            async with self._get_session().request(spec.method, url, timeout=self._timeout, **kwargs) as response:
                if 200 <= response.status < 300:
                    try:
                        return await response.json(content_type=None)
                    except ValueError as e:
                        raise TransportError(
                            "The backend returned an unreadable response.", status=response.status
                        ) from e

                raise await self._error_from_response(spec, response)
        except aiohttp.ClientError as e:
            logger.warning(f"Transport failure for {spec.method} {spec.endpoint}: {e!r}")
            raise TransportError("Could not reach the backend.") from e
        except asyncio.TimeoutError as e:
            logger.warning(f"Timed out on {spec.method} {spec.endpoint}")
            raise TransportError("The backend took too long to respond.") from e

    async def _error_from_response(
        self, spec: RequestSpec, response: aiohttp.ClientResponse
    ) -> BackendError | TransportError:
        try:
            envelope = await response.json(content_type=None)
        except ValueError:
            envelope = None

        error = envelope.get("error") if isinstance(envelope, dict) else None
        if isinstance(error, str) and error:
            return BackendError(normalize_error_message(error), status=response.status)

        logger.warning(
            f"Backend returned status {response.status} for {spec.method} {spec.endpoint} "
            f"without an error envelope"
        )
        return TransportError(f"The backend returned status {response.status}.", status=response.status)

    # Domains

    async def delete_domain(self, name: str) -> Any:
        return await self.request(f"/domains/{name}", "DELETE")

    async def add_domain(
        self,
        name: str,
        wildcard: bool = False,
        donated: bool = False,
        donated_by: str | None = None,
        user_only: bool = False,
    ) -> Any:
        return await self.request_raw(
            "/domains/",
            "POST",
            [
                {
                    "name": name,
                    "wildcard": wildcard or False,
                    "donated": donated or False,
                    "donatedBy": donated_by or "null",
                    "userOnly": user_only or False,
                }
            ],
        )

    async def add_domains(self, domains: Sequence[Mapping[str, Any]]) -> Any:
        return await self.request_raw("/domains/", "POST", list(domains))

    async def get_domains(self) -> Any:
        return await self.request("/domains", "GET")

    # Files

    async def delete_image(self, filename: str) -> Any:
        return await self.request(f"/admin/files/{filename}", "DELETE")

    async def get_file_stats(self) -> Any:
        return await self.request("/files", "GET")

    # Statistics

    async def get_user_stats(self) -> Any:
        return await self.request("/users", "GET")

    async def get_total_stats(self) -> TotalStats:
        """Fetch user, file and domain statistics and merge them.

        Either all three calls succeed or the whole aggregate fails.
        """
        users, files, domains = await asyncio.gather(
            self.get_user_stats(),
            self.get_file_stats(),
            self.get_domains(),
        )
        try:
            return TotalStats(
                total_users=users["total"],
                total_files=files["total"],
                total_bans=users["blacklisted"],
                premium=users["premium"],
                storage_used=files["storageUsed"],
                count=domains["count"],
            )
        except (KeyError, TypeError) as e:
            raise TransportError("The backend returned incomplete statistics.") from e

    # Invites

    async def delete_invite(self, invite: str) -> Any:
        return await self.request(f"/invites/{invite}", "DELETE")

    async def generate_invite(self, executor_id: str) -> Any:
        return await self.request("/admin/invites", "POST", {"executerId": executor_id})

    async def generate_bulk_invites(self, executor_id: str, count: int) -> Any:
        return await self.request(
            "/admin/bulkinvites", "POST", {"executerId": executor_id, "count": count}
        )

    async def add_invites(self, user_id: str, amount: int) -> Any:
        return await self.request("/admin/inviteadd", "POST", {"id": user_id, "amount": amount})

    async def invite_wave(self, amount: int) -> Any:
        return await self.request("/admin/invitewave", "POST", {"amount": amount})

    # Users

    async def get_user(self, user_id: str) -> Any:
        return await self.request(f"/admin/users/{user_id}", "GET")

    async def blacklist(self, user_id: str, reason: str | None, executor_id: str) -> Any:
        return await self.request(
            "/admin/blacklist",
            "POST",
            {"id": user_id, "reason": reason or DEFAULT_BLACKLIST_REASON, "executerId": executor_id},
        )

    async def unblacklist(self, user_id: str, reason: str | None, executor_id: str) -> Any:
        return await self.request(
            "/admin/unblacklist",
            "POST",
            {"id": user_id, "reason": reason or DEFAULT_BLACKLIST_REASON, "executerId": executor_id},
        )

    async def grant_premium(self, user_id: str) -> Any:
        return await self.request("/admin/premium", "POST", {"id": user_id})

    async def verify_email(self, user_id: str) -> Any:
        return await self.request("/admin/verifyemail", "POST", {"id": user_id})

    async def wipe_user(self, user_id: str) -> Any:
        return await self.request("/admin/wipe", "POST", {"id": user_id})

    async def set_uid(self, user_id: str, new_uid: int) -> Any:
        return await self.request("/admin/setuid", "POST", {"id": user_id, "newuid": new_uid})
