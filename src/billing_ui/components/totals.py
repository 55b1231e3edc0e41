"""Totals rows shared by the form and the preview."""

import reflex as rx


def totals_row(label: str, value, emphasize: bool = False) -> rx.Component:
    """Build a label/amount row within a totals block."""
    class_name = "totals-row emphasize" if emphasize else "totals-row"
    return rx.box(rx.text(label), rx.text(value), class_name=class_name)
