"""Opens the compare page with the system's URL handler."""

import logging

import click

from devscripts.gateway.browser.abc import BrowserLauncher

logger = logging.getLogger(__name__)


class RealBrowserLauncher(BrowserLauncher):
    def launch(self, url: str) -> None:
        logger.debug("Opening %s", url)
        click.launch(url)
