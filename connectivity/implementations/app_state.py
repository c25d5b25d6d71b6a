"""
App State Implementations

MockAppState lets tests flip between foreground and background.
StaticAppState reports a fixed status; headless services have no
background mode, so they use it with the default "active".
"""

from typing import Union

from connectivity.constants import AppStatus
from connectivity.interfaces.app_state_interface import AppStateInterface


class StaticAppState(AppStateInterface):
    """Always reports the same status."""

    def __init__(self, status: Union[AppStatus, str] = AppStatus.ACTIVE):
        self._status = status

    def current_status(self) -> Union[AppStatus, str]:
        return self._status


class MockAppState(StaticAppState):
    """
    Mock app state for testing.

    Usage:
        app_state = MockAppState()
        app_state.set_status(AppStatus.BACKGROUND)
    """

    def __init__(self, status: Union[AppStatus, str] = AppStatus.ACTIVE):
        super().__init__(status)
        self.query_count = 0

    def current_status(self) -> Union[AppStatus, str]:
        self.query_count += 1
        return self._status

    def set_status(self, status: Union[AppStatus, str]) -> None:
        """Change the reported status"""
        self._status = status
