"""Render cluster objects from templated YAML or JSON manifest files."""

from __future__ import annotations

import dataclasses
import json
import re
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2
import yaml

MANIFEST_FILE_SUFFIXES = ("yaml", "yml", "json")

_WHITESPACE = re.compile(r"\s*")


class RenderError(Exception):
    """Raised when a manifest cannot be read, parsed, rendered or decoded."""


@dataclass
class TemplatingData:
    """Data and extra functions handed to the templating engine."""

    data: Any = None
    funcs: Mapping[str, Callable[..., Any]] | None = None


def indent(spaces: int, v: str) -> str:
    """Indent every line of ``v`` by ``spaces`` spaces."""
    pad = " " * spaces
    return pad + v.replace("\n", "\n" + pad)


def nindent(spaces: int, v: str) -> str:
    """Like :func:`indent`, preceded by a newline."""
    return "\n" + indent(spaces, v)


def nindent_prefix(spaces: int, prefix: str, v: str) -> str:
    """Like :func:`nindent`, with ``prefix`` placed inside the indentation."""
    return nindent(spaces, prefix + v).replace(" ", "", len(prefix))


def _to_yaml(obj: Any) -> str:
    return yaml.safe_dump(obj, default_flow_style=False, sort_keys=True)


def _quote(obj: Any) -> str:
    return json.dumps(obj if isinstance(obj, str) else str(obj), ensure_ascii=False)


_HELPER_GLOBALS: dict[str, Callable[..., Any]] = {
    "yaml": _to_yaml,
    "quote": _quote,
    "indent": indent,
    "nindent": nindent,
    "nindentPrefix": nindent_prefix,
}

_HELPER_FILTERS: dict[str, Callable[..., Any]] = {
    "yaml": _to_yaml,
    "quote": _quote,
    "indent": lambda v, spaces: indent(spaces, v),
    "nindent": lambda v, spaces: nindent(spaces, v),
    "nindentPrefix": lambda v, spaces, prefix: nindent_prefix(spaces, prefix, v),
}


def _template_context(data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
    if hasattr(data, "__dict__"):
        return dict(vars(data))
    raise TypeError(f"unsupported templating data of type {type(data).__name__}")


def _decode_documents(text: str) -> Iterator[Any]:
    stripped = text.lstrip()
    if not stripped.startswith("{"):
        yield from yaml.safe_load_all(text)
        return
    decoder = json.JSONDecoder()
    pos = 0
    while True:
        pos = _WHITESPACE.match(stripped, pos).end()
        if pos >= len(stripped):
            return
        doc, pos = decoder.raw_decode(stripped, pos)
        yield doc


class Renderer:
    """Renders objects from a fixed list of manifest template files."""

    def __init__(self, files: Sequence[str | Path]) -> None:
        self.files = list(files)

    def render_objects(self, data: TemplatingData) -> list[dict[str, Any]]:
        """Render every file in order and return all objects they hold."""
        objs: list[dict[str, Any]] = []
        for file in self.files:
            objs.extend(self._render_file(Path(file), data))
        return objs

    def _environment(self, data: TemplatingData) -> jinja2.Environment:
        env = jinja2.Environment(
            undefined=jinja2.StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        env.globals.update(_HELPER_GLOBALS)
        env.filters.update(_HELPER_FILTERS)
        if data.funcs:
            env.globals.update(data.funcs)
            env.filters.update(data.funcs)
        return env

    def _render_file(self, file_path: Path, data: TemplatingData) -> list[dict[str, Any]]:
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as err:
            raise RenderError(f"failed to read manifest file {file_path}: {err}") from err

        env = self._environment(data)
        try:
            template = env.from_string(text)
        except jinja2.TemplateSyntaxError as err:
            raise RenderError(f"failed to parse manifest file {file_path}: {err}") from err

        try:
            rendered = template.render(_template_context(data.data))
        except Exception as err:
            raise RenderError(f"failed to render manifest {file_path}: {err}") from err

        if not rendered.strip():
            return []

        out: list[dict[str, Any]] = []
        try:
            for doc in _decode_documents(rendered):
                if doc is None:
                    continue
                if not isinstance(doc, dict):
                    raise RenderError(
                        f"failed to unmarshal manifest {file_path}: "
                        f"document is not an object: {type(doc).__name__}"
                    )
                if not doc.get("kind"):
                    continue
                out.append(doc)
        except (yaml.YAMLError, json.JSONDecodeError) as err:
            raise RenderError(f"failed to unmarshal manifest {file_path}: {err}") from err
        return out