"""Addon scaffolding: plan a manifest and commit it to disk."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from .assembler import TemplateAssembler
from .config import AnswerSet
from .errors import AlreadyExistsError
from .manifest import FileManifest
from .naming import DerivedNames, NameDeriver

__all__ = ["AddonScaffolder", "ManifestWriter", "next_steps"]


LOGGER = logging.getLogger(__name__)


class ManifestWriter:
    """Write a :class:`FileManifest` below a fresh target directory."""

    def write(self, manifest: FileManifest, target: str | Path) -> Path:
        """Create ``target`` and every manifest entry inside it.

        The target must not exist yet. If writing fails part way, the partially
        created directory is removed before the error propagates.
        """

        target_path = Path(target).expanduser()
        if target_path.exists():
            raise AlreadyExistsError(target_path)

        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.mkdir()
        try:
            for directory in manifest.directories:
                (target_path / directory).mkdir(exist_ok=True)
            for entry in manifest:
                destination = target_path / entry.path
                with destination.open("x", encoding="utf-8", newline="\n") as handle:
                    handle.write(entry.content)
                LOGGER.debug("wrote %s", entry.path)
        except OSError:
            LOGGER.warning("scaffold of %s failed, removing partial output", target_path)
            shutil.rmtree(target_path, ignore_errors=True)
            raise

        LOGGER.info("created %d files in %s", len(manifest), target_path)
        return target_path


@dataclass(slots=True)
class AddonScaffolder:
    """Derive names, assemble the manifest and write the addon directory."""

    deriver: NameDeriver
    assembler: TemplateAssembler
    writer: ManifestWriter

    def __init__(
        self,
        deriver: NameDeriver | None = None,
        assembler: TemplateAssembler | None = None,
        writer: ManifestWriter | None = None,
    ) -> None:
        self.deriver = deriver or NameDeriver()
        self.assembler = assembler or TemplateAssembler()
        self.writer = writer or ManifestWriter()

    def names(self, answers: AnswerSet) -> DerivedNames:
        return self.deriver.derive(answers.addon_name, answers.is_gateway)

    def plan(self, answers: AnswerSet) -> tuple[DerivedNames, FileManifest]:
        """Return the derived names and manifest without touching the filesystem."""

        names = self.names(answers)
        return names, self.assembler.assemble(answers, names)

    def create(self, answers: AnswerSet, parent_dir: str | Path) -> Path:
        """Create the addon described by ``answers`` inside ``parent_dir``."""

        names = self.names(answers)
        target = Path(parent_dir).expanduser() / names.full_slug
        if target.exists():
            raise AlreadyExistsError(target)

        manifest = self.assembler.assemble(answers, names)
        return self.writer.write(manifest, target)


def next_steps(names: DerivedNames, answers: AnswerSet) -> list[str]:
    """Return the shell commands a user runs after scaffolding."""

    steps = [f"cd {names.full_slug}", "composer install"]
    if answers.use_webpack:
        steps.extend(["yarn install", "yarn build"])
    return steps
