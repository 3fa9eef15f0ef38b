"""Sources of raw stub text keyed by logical template name."""

from __future__ import annotations

from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable

from .errors import TemplateMissingError

__all__ = [
    "DirectoryTemplateProvider",
    "MappingTemplateProvider",
    "PackageTemplateProvider",
    "STUB_SUFFIX",
    "TemplateProvider",
]


STUB_SUFFIX = ".stub"


@runtime_checkable
class TemplateProvider(Protocol):
    """Protocol implemented by every stub source."""

    def get(self, key: str) -> str:
        """Return the raw text for ``key`` or raise :class:`TemplateMissingError`."""


class _TraversableTemplateProvider:
    """Read ``<key>.stub`` files below a root, caching each read."""

    def __init__(self, root: Traversable | Path) -> None:
        self._root = root
        self._cache: dict[str, str] = {}

    def get(self, key: str) -> str:
        if key in self._cache:
            return self._cache[key]

        node = self._root
        for part in f"{key}{STUB_SUFFIX}".split("/"):
            if part in {"", ".", ".."}:
                raise TemplateMissingError(key)
            node = node.joinpath(part)
        if not node.is_file():
            raise TemplateMissingError(key)

        text = node.read_text(encoding="utf-8")
        self._cache[key] = text
        return text


class PackageTemplateProvider(_TraversableTemplateProvider):
    """Stubs shipped inside the ``addon_starter`` package."""

    def __init__(self, package: str = "addon_starter", directory: str = "stubs") -> None:
        super().__init__(resources.files(package).joinpath(directory))


class DirectoryTemplateProvider(_TraversableTemplateProvider):
    """Stubs laid out like the packaged ones inside an arbitrary directory."""

    def __init__(self, root: str | Path) -> None:
        root = Path(root).expanduser()
        if not root.is_dir():
            raise FileNotFoundError(root)
        super().__init__(root)


class MappingTemplateProvider:
    """In-memory stubs keyed by template name."""

    def __init__(self, templates: Mapping[str, str]) -> None:
        self._templates = dict(templates)

    def get(self, key: str) -> str:
        try:
            return self._templates[key]
        except KeyError as exc:
            raise TemplateMissingError(key) from exc
