"""Contract between the endpoint accessors and the request façade."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from espn_api.core.domain.api_domain import Domain

QueryValue = str | int | float | bool | None


@runtime_checkable
class Requester(Protocol):
    """Minimal contract for the component performing outbound HTTP.

    Design rules:
    - `request` is asynchronous because it does network I/O.
    - One call, one GET. Errors are raised as `espn_api.core.errors` types.
    """

    async def request(
        self,
        domain: Domain | str,
        path: str,
        params: Mapping[str, QueryValue] | None = None,
    ) -> Any:
        """Issue a GET against `domain` + `path` and return the decoded JSON body."""

        ...
