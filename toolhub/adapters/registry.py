"""
Tool Registry
"""

import threading

from toolhub.core.descriptor import ToolDescriptor
from toolhub.infra.logging import get_logger

logger = get_logger(__name__)


class ToolRegistry:
    """
    Central repository for tool descriptors.

    Holds at most one enabled descriptor per name and keeps a category
    index in step with the name map. Every operation runs under one lock,
    so readers never see the two structures disagree.
    """

    def __init__(self):
        self._tools: dict[str, ToolDescriptor] = {}
        self._by_category: dict[str, list[ToolDescriptor]] = {}
        self._lock = threading.RLock()

    def register(self, descriptor: ToolDescriptor) -> bool:
        """
        Register a descriptor.
        On a name conflict the higher priority wins; ties keep the incumbent.
        Returns True if the descriptor is now registered.
        """
        if not descriptor.enabled:
            logger.debug("tool_skipped_disabled", tool=descriptor.name)
            return False

        with self._lock:
            existing = self._tools.get(descriptor.name)
            if existing is not None:
                logger.warning(
                    "tool_name_conflict",
                    tool=descriptor.name,
                    existing=existing.target.method_name,
                    existing_priority=existing.priority,
                    new=descriptor.target.method_name,
                    new_priority=descriptor.priority,
                )
                if descriptor.priority > existing.priority:
                    logger.info("tool_replaced", tool=descriptor.name)
                    self._remove(descriptor.name)
                else:
                    logger.info("tool_kept", tool=descriptor.name)
                    return False

            self._tools[descriptor.name] = descriptor
            self._by_category.setdefault(descriptor.category, []).append(descriptor)

        logger.info(
            "tool_registered",
            tool=descriptor.name,
            category=descriptor.category,
            description=descriptor.description,
        )
        return True

    def unregister(self, name: str) -> ToolDescriptor | None:
        with self._lock:
            removed = self._remove(name)
        if removed is not None:
            logger.info("tool_unregistered", tool=name)
        return removed

    def _remove(self, name: str) -> ToolDescriptor | None:
        removed = self._tools.pop(name, None)
        if removed is None:
            return None

        category_tools = self._by_category.get(removed.category)
        if category_tools is not None:
            category_tools[:] = [d for d in category_tools if d is not removed]
            if not category_tools:
                del self._by_category[removed.category]
        return removed

    def get(self, name: str) -> ToolDescriptor | None:
        with self._lock:
            return self._tools.get(name)

    def get_all(self) -> list[ToolDescriptor]:
        with self._lock:
            return list(self._tools.values())

    def get_by_category(self, category: str) -> list[ToolDescriptor]:
        with self._lock:
            return list(self._by_category.get(category, ()))

    def get_by_tag(self, tag: str) -> list[ToolDescriptor]:
        with self._lock:
            return [d for d in self._tools.values() if tag in d.tags]

    def search(self, pattern: str) -> list[ToolDescriptor]:
        """Case-insensitive substring match on name or description."""
        needle = pattern.lower()
        with self._lock:
            return [
                d for d in self._tools.values()
                if needle in d.name.lower() or needle in d.description.lower()
            ]

    def categories(self) -> set[str]:
        with self._lock:
            return set(self._by_category)

    def count(self) -> int:
        with self._lock:
            return len(self._tools)

    def has(self, name: str) -> bool:
        with self._lock:
            return name in self._tools

    def clear(self) -> None:
        with self._lock:
            self._tools.clear()
            self._by_category.clear()
        logger.info("registry_cleared")

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, name: str) -> bool:
        return self.has(name)
