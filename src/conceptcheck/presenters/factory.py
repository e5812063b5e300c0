from __future__ import annotations

from .annotate import AnnotatePresenter
from .base import Presenter
from .json_out import JsonPresenter
from .listing import ListPresenter


def build_presenter(name: str, show_empty: bool = False) -> Presenter:
    typ = str(name or "list").lower()

    if typ in ("list", "messages"):
        return ListPresenter(show_empty=show_empty)

    if typ in ("annotate", "gutter"):
        return AnnotatePresenter(show_empty=show_empty)

    if typ == "json":
        return JsonPresenter()

    raise ValueError(f"Unknown presenter: {name}")
