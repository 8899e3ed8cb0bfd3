from enum import Enum


class View(str, Enum):
    FORM = "form"
    HISTORY = "history"


class ViewRouter:
    def __init__(self, view: View = View.FORM):
        self.current = view

    def show(self, view: View) -> None:
        self.current = View(view)

    def show_form(self) -> None:
        self.current = View.FORM

    def show_history(self) -> None:
        self.current = View.HISTORY

    @property
    def is_history(self) -> bool:
        return self.current is View.HISTORY
