"""Abstract source of student records for the dashboard."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shophub.domain.model.student import StudentRecord


class StudentDirectory(ABC):

    @abstractmethod
    def list_all(self) -> list[StudentRecord]:
        """Return every student record. Raises UpstreamError on failure."""
