"""Role-based assignee selection for synthesized tasks."""

from __future__ import annotations

from collections.abc import Sequence

from sprint_orchestrator.planning.models import AssignmentMode, MemberRole, TaskKind, TeamMember

ROLE_ELIGIBILITY: dict[TaskKind, frozenset[str]] = {
    TaskKind.design: frozenset({MemberRole.designer.value, MemberRole.lead.value}),
    TaskKind.implement: frozenset({MemberRole.developer.value, MemberRole.lead.value}),
    TaskKind.test: frozenset({MemberRole.tester.value, MemberRole.developer.value}),
}


def eligible_members(roster: Sequence[TeamMember], kind: TaskKind) -> list[TeamMember]:
    """Return roster members allowed to take a task kind, in roster order."""
    allowed = ROLE_ELIGIBILITY[kind]
    return [member for member in roster if member.role in allowed]


class AssignmentBalancer:
    """Picks task owners for one generation run.

    In ``balanced`` mode assignment counts accumulate across every task of the
    run and the least-loaded eligible member wins, ties going to roster order.
    In ``first_eligible`` mode counts never accumulate, so the first eligible
    member in roster order is always chosen.
    """

    def __init__(
        self,
        roster: Sequence[TeamMember],
        mode: AssignmentMode = AssignmentMode.balanced,
    ) -> None:
        self._roster = tuple(roster)
        self._mode = mode
        self._counts: dict[str, int] = {member.user_email: 0 for member in self._roster}

    @property
    def mode(self) -> AssignmentMode:
        """Return the active selection mode."""
        return self._mode

    def load(self) -> dict[str, int]:
        """Return a copy of assignment counts keyed by email, in roster order."""
        return dict(self._counts)

    def assign(self, kind: TaskKind) -> str | None:
        """Return the email of the member who should own a task of this kind."""
        pool = eligible_members(self._roster, kind)
        if not pool:
            if not self._roster:
                return None
            selected = self._roster[0]
        elif self._mode is AssignmentMode.first_eligible:
            selected = pool[0]
        else:
            # min() returns the first minimum, preserving roster order on ties.
            selected = min(pool, key=lambda member: self._counts[member.user_email])
        if self._mode is AssignmentMode.balanced:
            self._counts[selected.user_email] += 1
        return selected.user_email
