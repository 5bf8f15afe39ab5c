from typing import Any, Protocol


class Renderer(Protocol):
    def render(self, data: Any) -> str:
        ...
