import argparse
import functools
from typing import Any, Protocol

from chaincodec.core.facade import Transform


class CommandHandler(Protocol):
    def __call__(
        self,
        transform: Transform,
        namespace: argparse.Namespace,
    ) -> Any:
        ...


class CommandDispatcher:
    def __init__(self) -> None:
        self._commands: dict[tuple[str, ...], CommandHandler] = {}

    def dispatch(
        self,
        *arguments: str,
        transform: Transform,
        namespace: argparse.Namespace
    ) -> Any:
        command = self._commands.get(arguments)
        if command is None:
            raise RuntimeError(f"Unknown '{' '.join(arguments)}' Command")
        return command(transform, namespace)

    def command(self, *arguments: str):
        def decorator(func: CommandHandler):
            if arguments in self._commands:
                raise RuntimeError(f"Command already registered for '{' '.join(arguments)}'")

            @functools.wraps(func)
            def wrapper(
                transform: Transform,
                namespace: argparse.Namespace,
            ) -> Any:
                return func(transform, namespace)

            self._commands[arguments] = wrapper

            return wrapper

        return decorator
