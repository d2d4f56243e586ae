"""Application service: List Students use case (query)."""

from __future__ import annotations

from shophub.application.dto import StudentDTO
from shophub.domain.model.student import StudentRecord, StudentTab
from shophub.domain.repository.student_directory import StudentDirectory


class ListStudentsHandler:

    def __init__(self, directory: StudentDirectory) -> None:
        self._directory = directory

    def handle(self, search: str = "", tab: StudentTab = StudentTab.ALL) -> list[StudentDTO]:
        """Filter by search term first, then by points tab."""
        records = self._directory.list_all()
        if search:
            records = [r for r in records if r.matches(search)]
        return [self._to_dto(r) for r in records if r.in_tab(tab)]

    @staticmethod
    def _to_dto(record: StudentRecord) -> StudentDTO:
        return StudentDTO(
            id=record.id,
            nim=record.nim,
            name=record.name,
            class_name=record.class_name,
            points=record.points,
            tier=record.tier.value,
        )
