"""Open/close bookkeeping for views."""

from __future__ import annotations

from typing import Any, Dict, List

from ..core.logging import get_logger
from .base import BaseView
from .registry import ViewRegistry

logger = get_logger("views.manager")


class ViewManager:
    """
    Host side of the view lifecycle.

    Tracks open views by type. Activating a type closes whatever views of
    that type are open before opening a fresh one, so at most one clock runs
    per activation.
    """

    def __init__(self, **view_kwargs: Any) -> None:
        self._view_kwargs = view_kwargs
        self._views: Dict[str, List[BaseView]] = {}

    def configure(self, **view_kwargs: Any) -> None:
        """Replace constructor arguments for views opened from now on."""
        self._view_kwargs = view_kwargs

    def activate_view(self, view_type: str) -> BaseView:
        """
        Open a fresh view of view_type, replacing any open ones.

        The new view is attached before the old ones close, so a failing
        attach leaves the previous views running.

        Raises:
            ValueError: If the view type is unknown
        """
        view = ViewRegistry.create_view(view_type, **self._view_kwargs)
        view.open()
        self.detach_views_of_type(view_type)
        self._views[view_type] = [view]
        return view

    def get_views_of_type(self, view_type: str) -> List[BaseView]:
        return list(self._views.get(view_type, []))

    def detach_views_of_type(self, view_type: str) -> int:
        """
        Close every open view of view_type.

        Returns:
            Number of views closed
        """
        views = self._views.pop(view_type, [])
        for view in views:
            view.close()
        if views:
            logger.info(f"Detached {len(views)} view(s) of type {view_type}")
        return len(views)

    def detach_all(self) -> None:
        for view_type in list(self._views):
            self.detach_views_of_type(view_type)
