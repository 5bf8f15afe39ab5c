from collections.abc import Sequence

from codecctl.bootstrap.deps import get_cli
from chaincodec.bootstrap.deps import get_config, get_serializer, get_transform
from chaincodec.core.helpers.utils import setup_logging, scan


@scan("codecctl.bootstrap.commands")
def main(argv: Sequence[str] | None = None) -> int:
    cli = get_cli()
    namespace = cli.parse_args(argv)

    config = get_config(namespace.config)
    setup_logging(namespace.log_level or config.logging.level, config.logging.format)

    return cli.handle(
        namespace,
        get_transform(namespace.config),
        get_serializer(namespace.config),
    )


if __name__ == "__main__":
    raise SystemExit(main())
