"""Opening the pull request compare page.

`prepare_pr --web` hands the compare URL to a BrowserLauncher so tests can
record the URL instead of opening a window.
"""

from abc import ABC, abstractmethod


class BrowserLauncher(ABC):
    """Opens a GitHub page for the developer."""

    @abstractmethod
    def launch(self, url: str) -> None:
        """Open url, typically the compare page for the pushed branch."""
        ...
