import logging
from typing import List

import flet as ft

from cgpacalc.core.errors import LedgerError
from cgpacalc.core.grades import CREDIT_WEIGHTS, GRADE_POINTS
from cgpacalc.state.app_state import AppState


logger = logging.getLogger(__name__)


def _credit_options() -> List[ft.dropdown.Option]:
    options = [ft.dropdown.Option("", "Select Credit")]
    options.extend(ft.dropdown.Option(str(weight), f"{weight}-Credit") for weight in CREDIT_WEIGHTS)
    return options


def _grade_options() -> List[ft.dropdown.Option]:
    options = [ft.dropdown.Option("", "Select Grade")]
    options.extend(ft.dropdown.Option(letter) for letter in GRADE_POINTS)
    return options


def build_calculator_view(page: ft.Page, app_state: AppState) -> ft.Control:
    session = app_state.session

    credit = ft.Dropdown(width=200, label="Select Credit Type", value="", options=_credit_options())
    status = ft.Text(color=ft.Colors.RED_400)
    editor = ft.Column(spacing=10)
    prompt = ft.Column(horizontal_alignment=ft.CrossAxisAlignment.CENTER)
    cgpa_text = ft.Text(size=22, weight=ft.FontWeight.BOLD)

    def set_status(message: str, is_error: bool = True) -> None:
        status.value = message
        status.color = ft.Colors.RED_400 if is_error else ft.Colors.GREEN_400

    def run_action(action) -> None:
        try:
            action()
            set_status("")
        except LedgerError as exc:
            set_status(str(exc))
        except Exception as exc:
            logger.exception("Calculator action failed")
            set_status(f"Something went wrong: {exc}")
        render()

    def make_grade_handler(index: int):
        def handler(e: ft.ControlEvent) -> None:
            run_action(lambda: session.set_grade(index, e.control.value))

        return handler

    def make_delete_handler(index: int):
        def handler(_):
            run_action(lambda: session.delete_subject(index))

        return handler

    def render_editor() -> None:
        editor.controls.clear()
        weight = session.selected_credit
        if weight is None or session.is_submitted:
            return

        editor.controls.append(ft.Text(f"{weight}-Credit Subjects", size=20, weight=ft.FontWeight.BOLD))
        for index, subject in enumerate(session.subjects()):
            editor.controls.append(
                ft.Row(
                    controls=[
                        ft.Text("Grade:", width=60),
                        ft.Dropdown(
                            width=220,
                            value=subject.grade or "",
                            options=_grade_options(),
                            on_change=make_grade_handler(index),
                        ),
                        ft.ElevatedButton(
                            "Delete",
                            bgcolor=ft.Colors.RED_400,
                            color=ft.Colors.WHITE,
                            on_click=make_delete_handler(index),
                        ),
                    ]
                )
            )

        editor.controls.append(
            ft.Row(
                controls=[
                    ft.ElevatedButton(
                        f"Add {weight}-Credit Subject",
                        on_click=lambda _: run_action(session.add_subject),
                    ),
                    ft.ElevatedButton(
                        f"Submit {weight}-Credit Subjects",
                        bgcolor=ft.Colors.GREEN_400,
                        color=ft.Colors.WHITE,
                        on_click=lambda _: run_action(session.submit),
                    ),
                ]
            )
        )

    def on_add_more(_):
        credit.value = ""
        run_action(session.add_more_subjects)

    def render_prompt() -> None:
        prompt.controls.clear()
        if not session.is_submitted:
            return
        prompt.controls.extend(
            [
                ft.Text("Choose the credit option to add more subjects!", size=18, weight=ft.FontWeight.BOLD),
                ft.Row(
                    alignment=ft.MainAxisAlignment.CENTER,
                    controls=[
                        ft.ElevatedButton("Add More Subjects", on_click=on_add_more),
                        ft.ElevatedButton(
                            "Calculate CGPA",
                            bgcolor=ft.Colors.GREEN_400,
                            color=ft.Colors.WHITE,
                            on_click=lambda _: run_action(session.calculate_cgpa),
                        ),
                    ],
                ),
            ]
        )

    def render() -> None:
        render_editor()
        render_prompt()
        cgpa = session.displayed_cgpa
        cgpa_text.value = f"Your CGPA is: {cgpa:.2f}" if cgpa is not None else ""
        page.update()

    def on_credit_change(e: ft.ControlEvent) -> None:
        run_action(lambda: session.select_credit_weight(e.control.value))

    credit.on_change = on_credit_change

    render_editor()
    render_prompt()

    return ft.Container(
        padding=20,
        content=ft.Column(
            scroll=ft.ScrollMode.AUTO,
            controls=[
                ft.Text(page.title or "CGPA Calculator", size=28, weight=ft.FontWeight.BOLD),
                credit,
                editor,
                status,
                prompt,
                cgpa_text,
            ],
        ),
    )
