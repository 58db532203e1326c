"""
Presenter registry: maps presentation names to presenter classes.
"""

from .alert import AlertPresenter
from .modal import ModalPresenter
from .base import Presenter

PRESENTER_REGISTRY: dict[str, type] = {
    "alert": AlertPresenter,
    "modal": ModalPresenter,
}


def get_presenter(name: str) -> Presenter:
    """Returns an instance of the presenter for a name, or raises ValueError."""
    if name not in PRESENTER_REGISTRY:
        raise ValueError(
            f"No presenter registered for: {name}. "
            f"Available: {list(PRESENTER_REGISTRY.keys())}"
        )
    return PRESENTER_REGISTRY[name]()


def has_presenter(name: str) -> bool:
    return name in PRESENTER_REGISTRY


def list_presenters() -> list[str]:
    """List all registered presentation names."""
    return list(PRESENTER_REGISTRY.keys())
