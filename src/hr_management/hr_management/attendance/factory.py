from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus, SignInState
from .strategies.base import AttendanceStrategy
from .strategies.mark_status_strategy import MarkStatusStrategy
from .strategies.sign_in_strategy import SignInStrategy
from .strategies.sign_out_strategy import SignOutStrategy


@dataclass
class AttendanceMutationFactory:
    """Factory Pattern: choose the strategy for an attendance action.

    Toggle transitions:
        NO_RECORD  -> sign in (create)
        SIGNED_IN  -> sign out (update the same record)
        SIGNED_OUT -> sign in (create a new cycle)
    """

    def for_toggle(self, state: SignInState) -> AttendanceStrategy:
        if state == SignInState.SIGNED_IN:
            return SignOutStrategy()
        return SignInStrategy()

    def for_mark(self, status: AttendanceStatus) -> AttendanceStrategy:
        return MarkStatusStrategy(status)
