"""Cache local de la liste des propriétés"""
from typing import Callable, List, Optional
import logging

from proptrack.models import PropertyAggregate

logger = logging.getLogger(__name__)


class PropertyListCache:
    """
    Garde la dernière liste récupérée.
    Invalidé explicitement après chaque écriture confirmée.
    """

    def __init__(self):
        self._items: Optional[List[PropertyAggregate]] = None

    @property
    def is_stale(self) -> bool:
        return self._items is None

    def get(self, fetch: Callable[[], List[PropertyAggregate]]) -> List[PropertyAggregate]:
        if self._items is None:
            self._items = fetch()
        return self._items

    def invalidate(self) -> None:
        logger.debug("Cache des propriétés invalidé")
        self._items = None
