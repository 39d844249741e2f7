"""Session-wide record of whether PokeAPI is worth calling."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

AvailabilityObserver = Callable[[BaseException], None]


class AvailabilityState:
    """Starts online and switches to offline at most once per session."""

    def __init__(self) -> None:
        self._online = True
        self._reason: Optional[BaseException] = None
        self._observers: List[AvailabilityObserver] = []

    @property
    def online(self) -> bool:
        return self._online

    @property
    def reason(self) -> Optional[BaseException]:
        return self._reason

    def subscribe(self, observer: AvailabilityObserver) -> None:
        self._observers.append(observer)

    def mark_unavailable(self, reason: BaseException) -> bool:
        """Switch to offline mode. Returns False when already offline."""
        if not self._online:
            return False
        self._online = False
        self._reason = reason
        logger.info("PokeAPI marked unavailable for this session: %s", reason)
        for observer in self._observers:
            observer(reason)
        return True
