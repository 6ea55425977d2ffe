"""Test main config.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import asyncio
from typing import AsyncIterator, Iterable

import httpx
import pytest
import pytest_asyncio
from dishka import (
    AsyncContainer,
    Provider,
    Scope,
    make_async_container,
    provide,
)
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI

from config import Settings
from ioc import MainProvider, PasswordPolicyProvider
from passpolicy import _create_basic_app
from password_policy import (
    AbstractBreachClient,
    EvaluatorSettings,
    PasswordDictionary,
    PasswordPolicyEvaluator,
    PasswordPolicyValidator,
)

CLEAN_PASSWORD = "Tr0ub4dor&3x"
BREACHED_PASSWORD = "correct-h0rse-battery"


class FakeBreachClient(AbstractBreachClient):
    """In-process breach corpus."""

    def __init__(
        self,
        breached: Iterable[str] = (),
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        """Set corpus and failure mode."""
        self.breached = frozenset(breached)
        self.error = error
        self.delay = delay
        self.calls: list[str] = []

    async def is_breached(self, password: str) -> bool:
        self.calls.append(password)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return password in self.breached


class TestProvider(Provider):
    """Provider replacing breach API with fake."""

    def __init__(self, breach_client: AbstractBreachClient) -> None:
        """Set fake client."""
        super().__init__()
        self._breach_client = breach_client

    @provide(scope=Scope.APP)
    def get_breach_client(self) -> AbstractBreachClient:
        """Get fake breach client."""
        return self._breach_client


@pytest.fixture
def settings() -> Settings:
    """Get settings."""
    return Settings(
        BREACH_TIMEOUT_SECONDS=0.5,
        BREACH_MAX_TRIES=1,
    )


@pytest.fixture
def evaluator_settings() -> EvaluatorSettings:
    """Get default rule configuration."""
    return EvaluatorSettings()


@pytest.fixture
def dictionary() -> PasswordDictionary:
    """Get small common passwords dictionary."""
    return PasswordDictionary.from_words(["password", "qwerty"])


@pytest.fixture
def breach_client() -> FakeBreachClient:
    """Get fake breach client knowing one breached password."""
    return FakeBreachClient(breached=[BREACHED_PASSWORD])


@pytest.fixture
def evaluator(
    evaluator_settings: EvaluatorSettings,
    breach_client: FakeBreachClient,
    dictionary: PasswordDictionary,
) -> PasswordPolicyEvaluator:
    """Get evaluator with fake breach client."""
    return PasswordPolicyEvaluator(
        evaluator_settings,
        breach_client,
        dictionary,
    )


@pytest.fixture
def password_policy_validator(
    evaluator_settings: EvaluatorSettings,
) -> PasswordPolicyValidator:
    """Get empty validator."""
    return PasswordPolicyValidator(evaluator_settings)


@pytest_asyncio.fixture
async def container(
    settings: Settings,
    breach_client: FakeBreachClient,
) -> AsyncIterator[AsyncContainer]:
    """Create test container."""
    ctnr = make_async_container(
        MainProvider(),
        PasswordPolicyProvider(),
        TestProvider(breach_client),
        context={Settings: settings},
    )
    yield ctnr
    await ctnr.close()


@pytest.fixture
def app(settings: Settings, container: AsyncContainer) -> FastAPI:
    """Get app with test container."""
    app = _create_basic_app(settings)
    setup_dishka(container, app)
    return app


@pytest_asyncio.fixture
async def http_client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Get async client for fastapi tests.

    :param FastAPI app: asgi app
    :yield Iterator[AsyncIterator[httpx.AsyncClient]]: yield client
    """
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app, root_path="/api"),
        timeout=3,
        base_url="http://test",
    ) as client:
        yield client
