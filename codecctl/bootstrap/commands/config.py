import argparse
from typing import Any

from codecctl.bootstrap.deps import get_dispatcher
from chaincodec.bootstrap.deps import get_config
from chaincodec.core.facade import Transform

dispatcher = get_dispatcher()


@dispatcher.command("config", "show")
def cmd_show(transform: Transform, namespace: argparse.Namespace) -> dict[str, Any]:
    _ = transform
    conf = get_config(namespace.config)
    return conf.model_dump(mode="json")
