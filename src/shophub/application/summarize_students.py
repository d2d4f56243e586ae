"""Application service: Summarize Students use case (query)."""

from __future__ import annotations

import math

from shophub.application.dto import StudentSummaryDTO
from shophub.domain.model.student import StudentTab
from shophub.domain.repository.student_directory import StudentDirectory


class SummarizeStudentsHandler:

    def __init__(self, directory: StudentDirectory) -> None:
        self._directory = directory

    def handle(self) -> StudentSummaryDTO:
        """Count students and average their points.

        Always covers the whole feed, ignoring any search or tab. Records
        without numeric points are left out of the average; the average
        rounds half up.
        """
        records = self._directory.list_all()
        points = [r.points for r in records if r.points is not None]
        average = math.floor(sum(points) / len(points) + 0.5) if points else None
        return StudentSummaryDTO(
            total=len(records),
            high_performers=sum(1 for r in records if r.in_tab(StudentTab.HIGH)),
            average_points=average,
        )
