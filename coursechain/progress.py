"""Contract tracking per-user module completion for courses."""

from __future__ import annotations

from enum import IntEnum

from coursechain.ledger import Address, ContractError, Ledger


class ProgressErrorCode(IntEnum):
    ALREADY_INITIALIZED = 1
    NOT_INITIALIZED = 2
    UNAUTHORIZED = 3
    COURSE_NOT_FOUND = 4
    INVALID_PROGRESS = 5
    MODULE_ALREADY_COMPLETED = 6
    NON_INCREASING_PROGRESS = 7
    INVALID_PROGRESS_RANGE = 8


class ProgressError(ContractError):
    """A progress contract failure identified by its error code."""

    code: ProgressErrorCode

    def __init__(self, code: ProgressErrorCode | int) -> None:
        super().__init__(ProgressErrorCode(code))


class ProgressContract:
    """Courses with a number of modules, and which modules each user completed.

    Modules are numbered from 1. A user's progress for a course is a list of
    ``total_modules + 1`` flags whose first entry is unused.
    """

    def __init__(self, ledger: Ledger) -> None:
        self.ledger = ledger
        self._admin: Address | None = None
        self._courses: dict[str, int] = {}
        self._progress: dict[Address, dict[str, list[bool]]] = {}

    def _get_admin(self) -> Address:
        if self._admin is None:
            raise ProgressError(ProgressErrorCode.NOT_INITIALIZED)
        return self._admin

    def _log(self, level: str, kind: str, *fields: object) -> None:
        text = ",".join(
            str(f).lower() if isinstance(f, bool) else str(f) for f in fields
        )
        self.ledger.publish((level, kind), text)

    def initialize(self, admin: Address) -> None:
        """Set the admin; raises ALREADY_INITIALIZED on a second call."""
        if self._admin is not None:
            raise ProgressError(ProgressErrorCode.ALREADY_INITIALIZED)
        self.ledger.require_auth(admin)
        self._admin = admin

    def add_course(self, course_id: str, total_modules: int) -> None:
        """Register a course (or replace its module count); admin only."""
        admin = self._get_admin()
        self.ledger.require_auth(admin)
        self._courses[course_id] = total_modules

    def get_course_modules(self, course_id: str) -> int:
        try:
            return self._courses[course_id]
        except KeyError:
            raise ProgressError(ProgressErrorCode.COURSE_NOT_FOUND) from None

    def update_progress(
        self, user: Address, course_id: str, module: int, completed: bool
    ) -> None:
        """Record the status of one module; completed modules cannot change."""
        self.ledger.require_auth(user)
        total_modules = self.get_course_modules(course_id)

        user_progress = dict(self._progress.get(user, {}))
        course_progress = list(
            user_progress.get(course_id, [False] * (total_modules + 1))
        )

        if module == 0 or module > total_modules:
            self._log("error", "invalid_module", user, course_id, module, completed)
            raise ProgressError(ProgressErrorCode.INVALID_PROGRESS)

        current = course_progress[module] if module < len(course_progress) else False
        if current and completed:
            self._log("error", "already_completed", user, course_id, module)
            raise ProgressError(ProgressErrorCode.MODULE_ALREADY_COMPLETED)
        if current and not completed:
            transition = f"{str(current).lower()}->{str(completed).lower()}"
            self._log("error", "non_increasing", user, course_id, module, transition)
            raise ProgressError(ProgressErrorCode.NON_INCREASING_PROGRESS)

        if module >= len(course_progress):
            raise ProgressError(ProgressErrorCode.INVALID_PROGRESS)
        course_progress[module] = completed
        user_progress[course_id] = course_progress
        self._progress[user] = user_progress

        self._log("info", "progress_update", user, course_id, module, completed)

    def get_progress(self, user: Address, course_id: str) -> list[bool]:
        """Return the user's module flags for a course (index 0 unused)."""
        self.get_course_modules(course_id)
        course_progress = self._progress.get(user, {}).get(course_id)
        if course_progress is None:
            raise ProgressError(ProgressErrorCode.NOT_INITIALIZED)
        return list(course_progress)

    def get_completion_percentage(self, user: Address, course_id: str) -> int:
        """Whole-number percentage of the course's modules the user completed."""
        progress = self.get_progress(user, course_id)
        completed = sum(progress[1:])
        total = len(progress) - 1
        if total == 0:
            return 0
        return completed * 100 // total