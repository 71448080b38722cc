"""Abstract base class for host-managed views."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from ..core.logging import get_logger

logger = get_logger("views.base")


class BaseView(ABC):
    """
    A view the host can open and close.

    A view:
    - Has a type identifier and a human-readable title
    - Builds its display surface in on_attach()
    - Releases every scheduled resource in on_detach()
    """

    view_type: str  # set by ViewRegistry.register
    display_text: str = ""

    def __init__(self) -> None:
        self.view_id = uuid.uuid4().hex[:8]
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    @abstractmethod
    def on_attach(self) -> None:
        """Build the surface and start any periodic work."""
        pass

    @abstractmethod
    def on_detach(self) -> None:
        """Stop periodic work and drop the surface."""
        pass

    def open(self) -> None:
        """Attach the view once; repeated calls are ignored."""
        if self._attached:
            return
        self.on_attach()
        self._attached = True
        logger.info(f"Opened view: {self.view_type} ({self.view_id})")

    def close(self) -> None:
        """Detach the view once; repeated calls are ignored."""
        if not self._attached:
            return
        self._attached = False
        self.on_detach()
        logger.info(f"Closed view: {self.view_type} ({self.view_id})")
