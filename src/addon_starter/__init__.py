"""Scaffold WP Travel Engine addon plugins.

The package derives naming conventions from an addon title, assembles the
packaged stub templates into a file manifest and writes that manifest to a new
plugin directory. The same components back both command line entry points.
"""

from __future__ import annotations

from .assembler import TemplateAssembler
from .config import AddonType, AnswerSet, SettingsType
from .errors import (
    AlreadyExistsError,
    EmptyNameError,
    ScaffoldError,
    TemplateMissingError,
    TemplateRenderingError,
)
from .manifest import FileManifest, ManifestBuilder, ManifestEntry
from .naming import DerivedNames, NameDeriver, derive_names
from .provider import (
    DirectoryTemplateProvider,
    MappingTemplateProvider,
    PackageTemplateProvider,
    TemplateProvider,
)
from .scaffold import AddonScaffolder, ManifestWriter, next_steps
from .template import Template

__all__ = [
    "AddonScaffolder",
    "AddonType",
    "AlreadyExistsError",
    "AnswerSet",
    "DerivedNames",
    "DirectoryTemplateProvider",
    "EmptyNameError",
    "FileManifest",
    "ManifestBuilder",
    "ManifestEntry",
    "ManifestWriter",
    "MappingTemplateProvider",
    "NameDeriver",
    "PackageTemplateProvider",
    "ScaffoldError",
    "SettingsType",
    "Template",
    "TemplateAssembler",
    "TemplateMissingError",
    "TemplateProvider",
    "TemplateRenderingError",
    "derive_names",
    "next_steps",
]

__version__ = "0.1.0"
