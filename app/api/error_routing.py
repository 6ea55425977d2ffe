"""Error routing.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from enum import IntEnum

from dishka.integrations.fastapi import DishkaRoute
from fastapi_error_map.routing import ErrorAwareRoute
from fastapi_error_map.rules import Rule
from fastapi_error_map.translators import ErrorTranslator
from loguru import logger

from enums import DomainCodes
from errors import BaseDomainException

ERROR_MAP_TYPE = dict[type[Exception], int | Rule] | None


@dataclass
class ErrorResponse:
    """Body returned for a rejected request, never for policy violations."""

    type: str
    detail: str
    domain_code: DomainCodes
    error_code: IntEnum


class DishkaErrorAwareRoute(ErrorAwareRoute, DishkaRoute):
    """Route with error maps and dishka injection."""


class DomainErrorTranslator(ErrorTranslator[ErrorResponse]):
    """Domain exception to error response translator.

    Only exceptions of ``BaseDomainException`` are expected here, anything
    else reaching an error map is a routing bug.
    """

    domain_code: DomainCodes

    def __init__(
        self,
        domain_code: DomainCodes = DomainCodes.PASSWORD_POLICY,
    ) -> None:
        """Set domain code of the translated errors."""
        self.domain_code = domain_code

    @property
    def error_response_model_cls(self) -> type[ErrorResponse]:
        return ErrorResponse

    def from_error(self, err: Exception) -> ErrorResponse:
        """Translate domain exception to error response.

        :param Exception err: exception raised by a handler
        :raises TypeError: err is not a domain exception
        :return ErrorResponse: body with domain and error codes
        """
        if not isinstance(err, BaseDomainException):
            raise TypeError(f"Expected BaseDomainException, got {type(err)}")

        logger.info(
            f"Request rejected, {self.domain_code.name}: "
            f"{type(err).__name__} ({err.code.value})",
        )
        return ErrorResponse(
            type=type(err).__name__,
            detail=err.detail,
            domain_code=self.domain_code,
            error_code=err.code,
        )
