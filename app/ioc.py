"""DI Provider PassPolicy module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import AsyncIterator, NewType

import httpx
from dishka import Provider, Scope, from_context, provide

from api.password_policy.adapter import PasswordPolicyFastAPIAdapter
from config import Settings
from password_policy import (
    AbstractBreachClient,
    EvaluationOptions,
    EvaluatorSettings,
    PasswordDictionary,
    PasswordPolicyEvaluator,
    PwnedPasswordsClient,
    StubBreachClient,
)

BreachHTTPClient = NewType("BreachHTTPClient", httpx.AsyncClient)


class MainProvider(Provider):
    """Provider for password policy rules."""

    scope = Scope.APP
    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_evaluator_settings(self, settings: Settings) -> EvaluatorSettings:
        """Get immutable rule configuration."""
        return settings.evaluator_settings

    @provide(scope=Scope.APP)
    def get_default_options(self, settings: Settings) -> EvaluationOptions:
        """Get options applied when caller passes none."""
        return settings.default_options

    @provide(scope=Scope.APP)
    def get_dictionary(self, settings: Settings) -> PasswordDictionary:
        """Load common passwords once per process."""
        if settings.DICTIONARY_PATH:
            return PasswordDictionary.from_file(settings.DICTIONARY_PATH)
        return PasswordDictionary.default()


class HTTPProvider(Provider):
    """HTTP clients provider."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_breach_http_client(
        self,
        settings: Settings,
    ) -> AsyncIterator[BreachHTTPClient]:
        """Get async client for breach API.

        :param Settings settings: app settings
        :yield Iterator[AsyncIterator[BreachHTTPClient]]: client
        """
        async with httpx.AsyncClient(
            base_url=str(settings.BREACH_API_URI),
            timeout=httpx.Timeout(
                settings.BREACH_READ_TIMEOUT_SECONDS,
                connect=settings.BREACH_CONNECT_TIMEOUT_SECONDS,
            ),
            limits=httpx.Limits(
                max_connections=settings.BREACH_MAX_CONN,
                max_keepalive_connections=settings.BREACH_MAX_KEEPALIVE,
            ),
            headers={
                "User-Agent": (
                    f"{settings.SERVICE_NAME}/{settings.VENDOR_VERSION}"
                ),
            },
        ) as client:
            yield BreachHTTPClient(client)

    @provide(scope=Scope.APP)
    def get_breach_client(
        self,
        settings: Settings,
        client: BreachHTTPClient,
    ) -> AbstractBreachClient:
        """Get breach client, stub if lookup is disabled by config."""
        if not settings.BREACH_CHECK_ENABLED:
            return StubBreachClient()
        return PwnedPasswordsClient(
            client,
            max_tries=settings.BREACH_MAX_TRIES,
        )


class PasswordPolicyProvider(Provider):
    """Evaluator and adapters provider."""

    @provide(scope=Scope.REQUEST)
    def get_evaluator(
        self,
        settings: EvaluatorSettings,
        breach_client: AbstractBreachClient,
        dictionary: PasswordDictionary,
        default_options: EvaluationOptions,
    ) -> PasswordPolicyEvaluator:
        """Get evaluator."""
        return PasswordPolicyEvaluator(
            settings,
            breach_client,
            dictionary,
            default_options,
        )

    password_policy_adapter = provide(
        PasswordPolicyFastAPIAdapter,
        scope=Scope.REQUEST,
    )
