"""
App State Interface

Contract for the foreground/background status provider.
"""

from abc import ABC, abstractmethod
from typing import Union

from connectivity.constants import AppStatus


class AppStateInterface(ABC):
    """Reports whether the host application is currently in the foreground."""

    @abstractmethod
    def current_status(self) -> Union[AppStatus, str]:
        """
        Get the current application status.

        Returns:
            AppStatus member or its string value ("active", "background", ...)
        """


def is_foreground(status: Union[AppStatus, str]) -> bool:
    """True only for the "active" status; anything else counts as not visible"""
    if isinstance(status, AppStatus):
        return status == AppStatus.ACTIVE
    return status == AppStatus.ACTIVE.value
