"""Breached passwords lookup.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, ClassVar

import backoff
import httpx
from loguru import logger

from .exceptions import BreachLookupUnavailableError

log_breach = logger.bind(name="breach")

log_breach.add(
    "logs/breach_{time:DD-MM-YYYY}.log",
    filter=lambda rec: rec["extra"].get("name") == "breach",
    rotation="500 MB",
    colorize=False,
    backtrace=False,
    diagnose=False,
)


class AbstractBreachClient(ABC):
    """Breach corpus lookup."""

    @abstractmethod
    async def is_breached(self, password: str) -> bool:
        """Check if password is present in a breach corpus.

        :param str password: raw password
        :raises BreachLookupUnavailableError: lookup failed, result unknown
        :return bool: True if breached, False if definitely not found
        """


class StubBreachClient(AbstractBreachClient):
    """Placeholder for disabled lookup, never finds anything.

    Evaluator does not call it, the breach status stays ``not_checked``.
    """

    async def is_breached(self, password: str) -> bool:  # noqa: ARG002
        log_breach.debug("Breach lookup is disabled, stub used")
        return False


class PwnedPasswordsClient(AbstractBreachClient):
    """Pwned Passwords range API client.

    Only first five characters of the password SHA-1 leave the process,
    the rest of the hash is searched in the returned range locally.

    Methods:
    - `__init__(client, max_tries)`: bind HTTP client with configured
      base url and timeouts from di.
    - `is_breached(password)`: look the password up.
    """

    RANGE_URL: ClassVar[str] = "/range/{prefix}"
    PREFIX_SIZE: ClassVar[int] = 5

    client: httpx.AsyncClient

    def __init__(self, client: httpx.AsyncClient, max_tries: int = 3) -> None:
        """Set web client.

        :param httpx.AsyncClient client: client for making queries
        :param int max_tries: attempts for transient network errors
        """
        self.client = client
        self._get_range: Callable[[str], Awaitable[httpx.Response]] = (
            backoff.on_exception(
                backoff.expo,
                (
                    httpx.ConnectError,
                    httpx.ConnectTimeout,
                    httpx.RemoteProtocolError,
                ),
                max_tries=max_tries,
                logger=None,
            )(self._request_range)
        )

    async def _request_range(self, prefix: str) -> httpx.Response:
        return await self.client.get(
            self.RANGE_URL.format(prefix=prefix),
            headers={"Add-Padding": "true"},
        )

    @staticmethod
    def _get_count(body: str, suffix: str) -> int:
        for line in body.splitlines():
            if not line.strip():
                continue
            try:
                line_suffix, count = line.strip().split(":", 1)
                if line_suffix.upper() == suffix:
                    return int(count)
            except ValueError as err:
                raise BreachLookupUnavailableError(
                    "Breach API returned malformed range",
                ) from err
        return 0

    async def is_breached(self, password: str) -> bool:
        """Check password against range API.

        :param str password: raw password
        :raises BreachLookupUnavailableError: on timeout, transport error,
            bad status or malformed body
        :return bool: status
        """
        # lone surrogates are valid str but not valid UTF-8
        raw = password.encode("utf-8", errors="surrogatepass")
        digest = hashlib.sha1(raw).hexdigest().upper()  # noqa: S324
        prefix, suffix = digest[: self.PREFIX_SIZE], digest[self.PREFIX_SIZE :]

        try:
            response = await self._get_range(prefix)
        except httpx.TimeoutException as err:
            log_breach.warning(f"Breach API timeout for range {prefix}")
            raise BreachLookupUnavailableError("Breach API Timeout") from err
        except httpx.HTTPError as err:
            log_breach.warning(f"Breach API error for range {prefix}: {err}")
            raise BreachLookupUnavailableError(
                f"Breach API error: {err}",
            ) from err

        if response.status_code != 200:
            log_breach.warning(
                f"Breach API status {response.status_code} "
                f"for range {prefix}",
            )
            raise BreachLookupUnavailableError(
                f"Breach API status error: {response.status_code}",
            )

        count = self._get_count(response.text, suffix)
        log_breach.debug(f"Range {prefix} lookup done, count {count}")
        return count > 0
