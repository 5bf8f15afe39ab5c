import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, BinaryIO, Callable, TextIO

from codecctl.core.dispatcher import CommandDispatcher
from codecctl.core.ports.render import Renderer
from chaincodec.core.facade import Transform
from chaincodec.core.ports.serializer import Serializer


class CodecCmd:
    """
    Command line front-end for inspecting ledger payloads.

    Commands are registered on the dispatcher by decorated functions;
    this class only parses arguments, routes them and prints results.
    Binary results are written untouched, anything else goes through the
    renderer selected with --format, built over the serializer of the
    active configuration.
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        renderers: dict[str, Callable[[Serializer], Renderer]],
        stdin: BinaryIO | None = None,
        stdout: TextIO | None = None,
        stdout_bytes: BinaryIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._renderers = renderers
        self._stdin = stdin or sys.stdin.buffer
        self._stdout = stdout or sys.stdout
        self._stdout_bytes = stdout_bytes or sys.stdout.buffer
        self._stderr = stderr or sys.stderr
        self._argparser = self._argparse(list(renderers))

    def command(self, *arguments: str):
        return self._dispatcher.command(*arguments)

    def parse_args(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        namespace = self._argparser.parse_args(argv)
        namespace.stdin = self._stdin
        return namespace

    def handle(
        self,
        namespace: argparse.Namespace,
        transform: Transform,
        serializer: Serializer,
    ) -> int:
        arguments = [namespace.command]
        if namespace.command == "config":
            arguments.append(namespace.config_cmd)

        try:
            result = self._dispatcher.dispatch(
                *arguments,
                transform=transform,
                namespace=namespace
            )
            self._write(result, namespace, serializer)
        except Exception as ex:
            print(f"error: {ex}", file=self._stderr)
            return 1

        return 0

    def _write(
        self,
        result: Any,
        namespace: argparse.Namespace,
        serializer: Serializer,
    ) -> None:
        if isinstance(result, bytes):
            output = getattr(namespace, "output", None)
            if output:
                Path(output).write_bytes(result)
            else:
                self._stdout_bytes.write(result)
                self._stdout_bytes.flush()
            return

        renderer = self._renderers[namespace.format](serializer)
        print(renderer.render(result), file=self._stdout)

    @staticmethod
    def _argparse(formats: list[str]) -> argparse.ArgumentParser:
        global_opts = argparse.ArgumentParser(
            prog="codecctl",
            description="Encode and decode chaincode world state payloads."
        )
        global_opts.add_argument("-c", "--config", help="Path to a chaincodec configuration file")
        global_opts.add_argument(
            "-l", "--log-level",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Overrides the configured logging level"
        )
        global_opts.add_argument("-f", "--format", choices=formats, default=formats[0])

        sub = global_opts.add_subparsers(dest="command", required=True)

        encode = sub.add_parser("encode", help="Serialize a value into ledger bytes")
        encode.add_argument("value")
        encode.add_argument("--as", dest="kind", choices=["json", "string", "date"], default="json")
        encode.add_argument("-o", "--output", help="Write the bytes to a file instead of stdout")

        decode = sub.add_parser("decode", help="Deserialize ledger bytes")
        decode.add_argument("--file", help="Read the payload from a file instead of stdin")
        decode.add_argument("--container", choices=["buffer", "array"], default="buffer")

        date = sub.add_parser("date", help="Read ledger bytes as an epoch-millisecond date")
        date.add_argument("--file", help="Read the payload from a file instead of stdin")

        string = sub.add_parser("string", help="Read ledger bytes as plain text")
        string.add_argument("--file", help="Read the payload from a file instead of stdin")

        cfg = sub.add_parser("config", help="Inspect the effective configuration")
        cfg_sub = cfg.add_subparsers(dest="config_cmd", required=True)
        cfg_sub.add_parser("show")

        return global_opts
