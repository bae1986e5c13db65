"""Uniform response envelope returned by every client helper."""

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, List, Mapping, Optional, TypeVar

from .errors import MonacoError, as_client_error

T = TypeVar("T")


@dataclass(frozen=True)
class ClientResponse(Generic[T]):
    """Result of a client call.

    ``success`` is False exactly when ``errors`` is non-empty. ``data`` holds
    whatever was gathered before a failure, so it may be partial.
    """

    success: bool
    errors: List[MonacoError] = field(default_factory=list)
    data: T = None  # type: ignore[assignment]


class ResponseFactory:
    """Builds a ``ClientResponse`` step by step.

    Example:
        response = ResponseFactory()
        try:
            pda, _ = Pubkey.find_program_address(seeds, program_id)
            response.add_response_data({"pda": pda})
        except Exception as e:
            response.add_error(e)
        return response.body
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        """Create a factory.

        Args:
            data: Initial response data, usually empty
        """
        self._success = True
        self._errors: List[MonacoError] = []
        self._data: dict = dict(data or {})

    @property
    def success(self) -> bool:
        return self._success

    @property
    def errors(self) -> List[MonacoError]:
        return list(self._errors)

    @property
    def data(self) -> dict:
        return dict(self._data)

    def add_response_data(self, data: Mapping[str, Any]) -> None:
        """Shallow-merge ``data`` into the response; later keys win."""
        self._data = {**self._data, **data}

    def add_error(self, error: BaseException) -> None:
        """Record an error and mark the response as failed.

        Exceptions that are not ``MonacoError`` are classified first.
        """
        self._errors.append(as_client_error(error))
        self._success = False

    def add_errors(self, errors: Iterable[BaseException]) -> None:
        """Record errors from a previous response and mark this one as failed.

        An empty iterable leaves the response untouched, so ``success`` stays
        in step with ``errors``.
        """
        collected = [as_client_error(e) for e in errors]
        if not collected:
            return
        self._errors.extend(collected)
        self._success = False

    @property
    def body(self) -> ClientResponse:
        """Snapshot of the response; later changes to the factory do not affect it."""
        return ClientResponse(
            success=self._success,
            errors=list(self._errors),
            data=dict(self._data),
        )
