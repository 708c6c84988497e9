"""Events — синхронный publish/subscribe примитив."""

from .observable import Handler, Observable

__all__ = [
    "Handler",
    "Observable",
]
