"""Pass-through proxy for the student-records endpoint.

One GET to a fixed upstream URL. Whatever JSON comes back is relayed
verbatim with status 200; any transport or decode failure becomes a
fixed error body with status 500. No parameters, caching or retries.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from shophub.domain.exceptions import UpstreamError
from shophub.domain.model.student import StudentRecord
from shophub.domain.repository.student_directory import StudentDirectory
from shophub.infrastructure.logging import get_logger

logger = get_logger(__name__)

ERROR_BODY = {"message": "Error fetching data"}


@dataclass(frozen=True)
class ProxyResponse:
    status_code: int
    body: Any
    headers: dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )

    @property
    def text(self) -> str:
        return json.dumps(self.body)


def fetch_student_records(
    url: str,
    *,
    timeout: float = 10.0,
    client: httpx.Client | None = None,
) -> ProxyResponse:
    try:
        if client is not None:
            upstream = client.get(url, timeout=timeout, headers={"Cache-Control": "no-store"})
        else:
            with httpx.Client(timeout=timeout) as own_client:
                upstream = own_client.get(url, headers={"Cache-Control": "no-store"})
        data = upstream.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("Student records proxy failed for %s: %s", url, exc)
        return ProxyResponse(status_code=500, body=dict(ERROR_BODY))
    return ProxyResponse(status_code=200, body=data)


class ProxyStudentDirectory(StudentDirectory):
    """Reads student records through the proxy, like the dashboard does."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._client = client

    def list_all(self) -> list[StudentRecord]:
        response = fetch_student_records(self._url, timeout=self._timeout, client=self._client)
        if response.status_code != 200:
            raise UpstreamError(response.body.get("message", "Error fetching data"))

        body = response.body
        records = body.get("data") if isinstance(body, dict) else None
        if not isinstance(records, list):
            raise UpstreamError("Student feed has no 'data' list")

        try:
            return [
                StudentRecord(
                    id=str(raw["id"]),
                    nim=str(raw["nim"]),
                    name=str(raw["nama"]),
                    class_name=str(raw["kelas"]),
                    points=StudentRecord.parse_points(raw.get("points", "")),
                )
                for raw in records
            ]
        except (KeyError, TypeError, AttributeError) as exc:
            raise UpstreamError(f"Malformed student record: {exc}") from exc
