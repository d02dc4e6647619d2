"""Courses made of modules, with completion tracking and certificates."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto


class ModuleStatus(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    COMPLETED = auto()


@dataclass
class Module:
    id: int
    name: str
    status: ModuleStatus = ModuleStatus.NOT_STARTED


@dataclass
class Course:
    id: int
    name: str
    modules: list[Module] = field(default_factory=list)
    completed: bool = False
    notices: list[str] = field(default_factory=list, repr=False)

    def _announce(self, text: str) -> str:
        self.notices.append(text)
        print(text)
        return text

    def calculate_progress(self) -> float:
        """Percentage of completed modules; NaN for a course without modules."""
        if not self.modules:
            return math.nan
        done = sum(m.status is ModuleStatus.COMPLETED for m in self.modules)
        return done / len(self.modules) * 100.0

    def mark_course_completed(self) -> bool:
        """Mark the course completed if every module is; return whether it was."""
        if all(m.status is ModuleStatus.COMPLETED for m in self.modules):
            self.completed = True
            self._announce(f"Course '{self.name}' is marked as completed.")
            self.issue_certificate()
            self.emit_course_completion_event()
            return True
        self._announce(
            f"Cannot mark '{self.name}' as completed. "
            "Some modules are still incomplete."
        )
        return False

    def issue_certificate(self) -> str:
        """Announce and record the certificate for this course."""
        return self._announce(
            f"Certificate issued for course '{self.name}'. Congratulations!"
        )

    def emit_course_completion_event(self) -> str:
        """Announce and record the course completion event."""
        return self._announce(
            f"Event: Course '{self.name}' completed successfully. "
            "Emitting course completion event."
        )


@dataclass
class CourseRegistry:
    courses: dict[int, Course] = field(default_factory=dict)

    def create_course(self, course: Course) -> None:
        self.courses[course.id] = course

    def mark_course_completed_by_id(self, course_id: int) -> bool:
        course = self.courses.get(course_id)
        if course is None:
            print(f"Course with ID {course_id} not found.")
            return False
        return course.mark_course_completed()


def main(argv: list[str] | None = None) -> int:
    registry = CourseRegistry()
    course = Course(
        id=101,
        name="Rust Programming Basics",
        modules=[
            Module(1, "Module 1", ModuleStatus.COMPLETED),
            Module(2, "Module 2", ModuleStatus.COMPLETED),
            Module(3, "Module 3", ModuleStatus.NOT_STARTED),
        ],
    )
    registry.create_course(course)
    registry.mark_course_completed_by_id(101)
    registry.courses[101].modules[2].status = ModuleStatus.COMPLETED
    registry.mark_course_completed_by_id(101)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())