"""Main PassPolicy module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import argparse
import getpass
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

import uvicorn
import uvloop
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request, Response
from loguru import logger

from api import password_policy_router
from config import Settings
from ioc import HTTPProvider, MainProvider, PasswordPolicyProvider
from password_policy import (
    BreachStatus,
    PasswordContext,
    PasswordPolicyEvaluator,
)
from password_policy.exceptions import PasswordPolicyError


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    await app.state.dishka_container.close()


async def proc_time_header_middleware(
    request: Request,
    call_next: Callable,
) -> Response:
    """Set X-Process-Time header.

    :param Request request: incoming request
    :param Callable call_next: next handler
    :return Response: response with header
    """
    start_time = time.perf_counter()
    response = await call_next(request)
    process_time = time.perf_counter() - start_time
    response.headers["X-Process-Time"] = "{:.4f}".format(process_time)
    return response


def _setup_logging(settings: Settings) -> None:
    """Replace default stderr sink with one of configured level."""
    logger.remove(0)
    logger.add(
        sys.stderr,
        level="DEBUG" if settings.DEBUG else "INFO",
        diagnose=False,
    )


def _create_basic_app(settings: Settings) -> FastAPI:
    """Create basic FastAPI app with routers."""
    app = FastAPI(
        name="PassPolicy",
        title="PassPolicy",
        debug=settings.DEBUG,
        root_path="/api",
        version=settings.VENDOR_VERSION,
        lifespan=_lifespan,
    )
    app.include_router(password_policy_router)

    if settings.DEBUG:
        app.middleware("http")(proc_time_header_middleware)

    return app


def _create_container(settings: Settings) -> AsyncContainer:
    return make_async_container(
        MainProvider(),
        HTTPProvider(),
        PasswordPolicyProvider(),
        context={Settings: settings},
    )


def create_prod_app(
    factory: Callable[[Settings], FastAPI] = _create_basic_app,
    settings: Settings | None = None,
) -> FastAPI:
    """Create production app with container."""
    settings = settings or Settings.from_os()
    app = factory(settings)
    setup_dishka(_create_container(settings), app)
    return app


def _read_password() -> str:
    if sys.stdin.isatty():
        return getpass.getpass("Password: ")
    return sys.stdin.readline().rstrip("\r\n")


async def check_password(
    settings: Settings,
    password: str,
    context: PasswordContext,
) -> int:
    """Evaluate one password and print violations.

    :return int: exit code, 1 if password is rejected
    """
    container = _create_container(settings)
    try:
        async with container() as request_container:
            evaluator = await request_container.get(PasswordPolicyEvaluator)
            result = await evaluator.evaluate(password, context)
    finally:
        await container.close()

    for violation in result.violations:
        print(f"{violation.reason}: {violation.message}")  # noqa: T201

    if result.breach_status == BreachStatus.INCONCLUSIVE:
        print(  # noqa: T201
            "warning: breach status is unknown, lookup failed",
            file=sys.stderr,
        )

    return 0 if result.is_valid else 1


if __name__ == "__main__":
    settings = Settings.from_os()
    _setup_logging(settings)

    parser = argparse.ArgumentParser(description="Run http or check password")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--http", action="store_true", help="Run http")
    group.add_argument(
        "--check",
        action="store_true",
        help="Check password read from stdin",
    )
    parser.add_argument(
        "--context",
        action="append",
        default=[],
        help="Term the password must not resemble, repeatable",
    )
    parser.add_argument("--username", default=None)
    parser.add_argument("--email", default=None)

    args = parser.parse_args()

    if args.http:
        uvicorn.run(
            "__main__:create_prod_app",
            host=str(settings.HOST),
            port=settings.HTTP_PORT,
            reload=settings.AUTO_RELOAD,
            loop="uvloop",
            factory=True,
        )

    elif args.check:
        context = PasswordContext(
            service_name=settings.SERVICE_NAME,
            username=args.username,
            email=args.email,
            extra=tuple(args.context),
        )
        try:
            code = uvloop.run(
                check_password(settings, _read_password(), context),
                debug=settings.DEBUG,
            )
        except PasswordPolicyError as err:
            logger.error(f"{type(err).__name__}: {err.detail}")
            code = 2
        sys.exit(code)
