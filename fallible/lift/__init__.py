"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from fallible import lift as L   # Recommended (balance)
    from fallible import lift as _   # Minimal
    from fallible import lift        # Explicit

Architecture:
- L.up.*    - подъем значений в Result
- L.down.*  - опускание Result в значение (unwrap protocol)
- L.call()  - вызов функций с лифтингом

Examples:
    from fallible import lift as L

    # Подъем значений
    user = L.up.pure(User(id=42))
    missing = L.up.fail(NotFoundError("file.txt"))
    maybe = L.up.optional(users.get(42), error=lambda: NotFound(42))

    # Вызов функций
    port = L.call(int, "8080")

    # Опускание
    value, err = L.down.unwrap(port)
    value = L.down.unsafe(port)

    # Декораторы
    @L.lifted
    def parse(raw: str) -> Config: ...
"""

from __future__ import annotations

# Import namespaces
from . import down as down_ns
from . import up as up_ns

# From up namespace - подъем значений
from .up import catching, fail, from_kungfu, optional, pure

# From call namespace - вызов функций
from .call import call, lifted

# From down namespace - опускание
from .down import ErrorSlot, or_else, to_kungfu, unsafe, unwrap, unwrap_into

# Namespace aliases для явного использования
up = up_ns
down = down_ns

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "optional",
    "catching",
    "from_kungfu",
    # Call
    "call",
    "lifted",
    # Down
    "ErrorSlot",
    "unwrap",
    "unwrap_into",
    "or_else",
    "unsafe",
    "to_kungfu",
)
