"""Host rendering contract and render-spec dispatch."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from ..models.render_spec import ImageRenderSpec, TextRenderSpec


class RenderHost(Protocol):
    def get_viewport_width(self) -> float: ...

    def draw_centered_text(self, text: str, font_size: float, margin: float) -> None: ...

    def draw_centered_image(self, uri: str) -> None: ...


def draw(spec: Union[TextRenderSpec, ImageRenderSpec], host: RenderHost) -> None:
    """Issue the draw call matching a render spec."""
    if isinstance(spec, ImageRenderSpec):
        host.draw_centered_image(spec.uri)
    elif isinstance(spec, TextRenderSpec):
        host.draw_centered_text(spec.text, spec.font_size, spec.margin)
    else:
        raise TypeError(f"Unknown render spec: {type(spec).__name__}")


def uri_to_path(uri: str) -> Path:
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        raise ValueError(f"Unsupported image URI scheme: {uri}")
    return Path(url2pathname(parsed.path))
