import json
import logging
from functools import lru_cache

import yaml
from pydantic import ValidationError

from chaincodec.bootstrap.config.loader import get_configfile
from chaincodec.bootstrap.config.settings import ChaincodecConfig
from chaincodec.core.facade import Transform
from chaincodec.infra.ledger_serializer import LedgerSerializer


@lru_cache
def get_config(cli_path: str | None = None) -> ChaincodecConfig:
    try:
        if cli_path is not None:
            return ChaincodecConfig.from_file(get_configfile(cli_path))
        return ChaincodecConfig()
    except yaml.YAMLError as ex:
        raise SystemExit(f"Configuration file is not valid YAML: {ex}")
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(p) for p in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


@lru_cache
def get_transform(cli_path: str | None = None) -> Transform:
    config = get_config(cli_path)
    return Transform(
        config=config.get_codec_config(),
        logger=logging.getLogger("chaincodec.transform"),
    )


@lru_cache
def get_serializer(cli_path: str | None = None) -> LedgerSerializer:
    return LedgerSerializer(get_transform(cli_path))
