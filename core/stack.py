"""core/stack.py - 有界LIFO栈，操作符栈和操作数栈共用"""
import logging

from config.config import STACK_CONFIG
from core.errors import StackOverflow, StackUnderflow, EmptyAccess

logger = logging.getLogger(__name__)


class BoundedStack:
    """固定容量的后进先出栈"""

    def __init__(self, capacity=None, name="stack"):
        if capacity is None:
            capacity = STACK_CONFIG["capacity"]
        if capacity <= 0:
            raise ValueError(f"Stack capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.name = name
        self._items = []

    def push(self, value):
        if len(self._items) >= self.capacity:
            logger.debug(f"{self.name}: push of {value!r} rejected, capacity {self.capacity} reached")
            raise StackOverflow()
        self._items.append(value)

    def pop(self):
        if not self._items:
            raise StackUnderflow()
        return self._items.pop()

    def peek(self):
        if not self._items:
            raise EmptyAccess()
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def is_full(self):
        return len(self._items) >= self.capacity

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __repr__(self):
        return f"BoundedStack(name={self.name!r}, size={len(self._items)}, capacity={self.capacity})"
