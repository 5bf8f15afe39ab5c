from functools import lru_cache

from codecctl.core.cmd import CodecCmd
from codecctl.core.dispatcher import CommandDispatcher
from codecctl.infra.format_renderer import JsonRenderer, YamlRenderer


@lru_cache
def get_dispatcher() -> CommandDispatcher:
    return CommandDispatcher()


@lru_cache
def get_cli() -> CodecCmd:
    renderers = {
        "json": JsonRenderer,
        "yaml": YamlRenderer,
    }
    return CodecCmd(get_dispatcher(), renderers)
