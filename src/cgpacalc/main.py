import logging

import flet as ft

from cgpacalc.config.logging_config import setup_logging
from cgpacalc.config.settings import settings
from cgpacalc.state.app_state import AppState
from cgpacalc.ui.views.calculator_view import build_calculator_view


logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    page.title = settings.title
    page.scroll = ft.ScrollMode.AUTO
    # One ledger per page session.
    app_state = AppState()
    page.add(build_calculator_view(page, app_state))
    logger.info("Opened calculator session")


def run() -> None:
    setup_logging(settings.log_level)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
