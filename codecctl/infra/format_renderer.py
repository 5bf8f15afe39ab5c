import json
from datetime import date
from typing import Any

import yaml

from codecctl.core.ports.render import Renderer
from chaincodec.core.ports.serializer import Serializer


class _Normalizer:
    def __init__(self, serializer: Serializer) -> None:
        self._serializer = serializer

    def _normalize(self, obj: Any) -> Any:
        if isinstance(obj, (bytes, bytearray)):
            return self._serializer.deserialize(bytes(obj))

        if isinstance(obj, date):
            return obj.isoformat()

        if hasattr(obj, "to_dict"):
            return self._normalize(obj.to_dict())

        if isinstance(obj, dict):
            return {self._normalize(k): self._normalize(v) for k, v in obj.items()}

        if isinstance(obj, (list, tuple)):
            return [self._normalize(x) for x in obj]

        return obj


class JsonRenderer(_Normalizer, Renderer):
    def render(self, data: Any) -> str:
        return json.dumps(self._normalize(data), indent=2, sort_keys=False, ensure_ascii=False)


class YamlRenderer(_Normalizer, Renderer):
    def render(self, data: Any) -> str:
        normalized = self._normalize(data)
        return yaml.safe_dump(normalized, sort_keys=False, allow_unicode=True)
