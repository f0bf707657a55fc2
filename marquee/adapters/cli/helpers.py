"""
Utilitaires partages pour les commandes CLI de Marquee.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console

from marquee.container import Container

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(table)
    """
    loguru_logger.disable("marquee")
    try:
        yield
    finally:
        loguru_logger.enable("marquee")


def with_container():
    """
    Decorateur qui injecte un container initialise en premier argument.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator
