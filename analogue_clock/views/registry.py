"""View registration and discovery."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Type

from ..core.logging import get_logger
from .base import BaseView

logger = get_logger("views.registry")


class ViewRegistry:
    """
    Registry of view types.
    Uses decorator pattern for registration.
    """

    _views: Dict[str, Type[BaseView]] = {}

    @classmethod
    def register(cls, view_type: str) -> Callable[[Type[BaseView]], Type[BaseView]]:
        """
        Decorator to register a view class.

        Usage:
            @ViewRegistry.register("analogue-clock")
            class AnalogueClockView(BaseView):
                ...
        """

        def decorator(view_class: Type[BaseView]) -> Type[BaseView]:
            cls._views[view_type] = view_class
            view_class.view_type = view_type
            logger.debug(f"Registered view: {view_type}")
            return view_class

        return decorator

    @classmethod
    def get_view_class(cls, view_type: str) -> Optional[Type[BaseView]]:
        """Get a view class by type."""
        return cls._views.get(view_type)

    @classmethod
    def create_view(cls, view_type: str, **kwargs: Any) -> BaseView:
        """
        Create an unattached view instance.

        Args:
            view_type: Registered view type
            **kwargs: Passed to the view constructor

        Raises:
            ValueError: If the view type is unknown
        """
        view_class = cls._views.get(view_type)
        if not view_class:
            raise ValueError(f"Unknown view type: {view_type}")
        return view_class(**kwargs)

    @classmethod
    def list_registered(cls) -> List[str]:
        """List all registered view types."""
        return list(cls._views.keys())
