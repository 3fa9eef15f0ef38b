"""Select stubs and fragments for an addon and render them into a manifest."""

from __future__ import annotations

import logging
from typing import Mapping

from .config import AnswerSet
from .manifest import FileManifest, ManifestBuilder
from .naming import DerivedNames
from .provider import PackageTemplateProvider, TemplateProvider
from .template import Template

__all__ = ["ASSET_DIRECTORIES", "TemplateAssembler", "placeholder_tokens"]


LOGGER = logging.getLogger(__name__)

ASSET_DIRECTORIES = ("src/admin/js", "src/public/js", "src/public/scss")

_ASSET_FILES = (
    ("src/admin/js/index.js", "basic-addon/src/admin/js/index"),
    ("src/public/js/index.js", "basic-addon/src/public/js/index"),
    ("src/public/scss/index.scss", "basic-addon/src/public/scss/index"),
    ("webpack.config.js", "config/webpack.config.js"),
)


def placeholder_tokens(answers: AnswerSet, names: DerivedNames) -> dict[str, str]:
    """Return the ``[[TOKEN]]`` values shared by every rendered stub."""

    return {
        "ADDON_NAME": answers.addon_name,
        "DESCRIPTION": answers.description,
        "SLUG": names.slug,
        "FULL_SLUG": names.full_slug,
        "FUNCTION_SLUG": names.function_slug,
        "NAMESPACE": names.namespace,
        "CONSTANT": names.constant,
        "SETTINGS_KEY": names.settings_key,
        "GATEWAY_ID": names.gateway_id,
        "TITLE": names.title,
    }


class TemplateAssembler:
    """Build the :class:`FileManifest` for an addon from packaged stubs.

    Stub keys mirror the layout below ``addon_starter/stubs``: the main file and
    plugin class come from ``payment-gateway/`` or ``basic-addon/``, shared
    configuration from ``config/`` and optional blocks from ``fragments/``.
    """

    def __init__(self, provider: TemplateProvider | None = None) -> None:
        self.provider = provider or PackageTemplateProvider()

    def assemble(self, answers: AnswerSet, names: DerivedNames) -> FileManifest:
        """Return every directory and rendered file for ``answers``."""

        builder = ManifestBuilder()
        tokens = placeholder_tokens(answers, names)
        stub_type = "payment-gateway" if answers.is_gateway else "basic-addon"

        builder.add_directory("includes")
        builder.add_file(
            f"{names.full_slug}.php",
            self._render(f"{stub_type}/main-plugin", tokens, self._bootstrap_fragments(answers)),
        )
        builder.add_file(
            "includes/Plugin.php",
            self._render(f"{stub_type}/includes/Plugin", tokens, self._plugin_class_fragments(answers)),
        )

        if answers.is_gateway:
            self._add_gateway_files(builder, tokens)
        else:
            self._add_basic_files(builder, answers, tokens)

        self._add_config_files(builder, answers, tokens)

        if answers.use_webpack:
            self._add_asset_files(builder, tokens)

        manifest = builder.build()
        LOGGER.debug("assembled %d files for %s", len(manifest), names.full_slug)
        return manifest

    def _add_gateway_files(self, builder: ManifestBuilder, tokens: Mapping[str, str]) -> None:
        builder.add_file("includes/Payment.php", self._render("payment-gateway/includes/Payment", tokens))
        builder.add_file("includes/Builders/API.php", self._render("payment-gateway/includes/Builders/API", tokens))
        builder.add_file(
            "includes/Builders/global-settings.php",
            self._render("payment-gateway/includes/Builders/global-settings", tokens),
        )

    def _add_basic_files(self, builder: ManifestBuilder, answers: AnswerSet, tokens: Mapping[str, str]) -> None:
        if answers.has_settings:
            fragments = self._select(
                "backend-api",
                {
                    "global_imports": answers.has_global_settings,
                    "global_hooks": answers.has_global_settings,
                    "global_methods": answers.has_global_settings,
                    "trip_imports": answers.has_trip_settings,
                    "trip_hooks": answers.has_trip_settings,
                    "trip_methods": answers.has_trip_settings,
                },
            )
            builder.add_file(
                "includes/Backend/API.php",
                self._render("basic-addon/includes/Backend/API", tokens, fragments),
            )

        if answers.has_global_settings:
            builder.add_file(
                "includes/Settings/Globals.php",
                self._render("basic-addon/includes/Settings/Globals", tokens),
            )
            builder.add_file(
                "includes/Builders/global-settings.php",
                self._render("basic-addon/includes/Builders/global-settings", tokens),
            )

        if answers.has_trip_settings:
            builder.add_file(
                "includes/Settings/TripEdits.php",
                self._render("basic-addon/includes/Settings/TripEdits", tokens),
            )
            builder.add_file(
                "includes/Builders/trip-meta.php",
                self._render("basic-addon/includes/Builders/trip-meta", tokens),
            )

    def _add_config_files(self, builder: ManifestBuilder, answers: AnswerSet, tokens: Mapping[str, str]) -> None:
        webpack = answers.use_webpack
        config_files = (
            ("composer.json", "config/composer.json", self._select("composer", {"pro_dependency": answers.requires_pro})),
            (
                "package.json",
                "config/package.json",
                self._select(
                    "package",
                    {
                        "webpack_scripts": webpack,
                        "webpack_build": webpack,
                        "webpack_dev_dependencies": webpack,
                        "webpack_dependencies": webpack,
                    },
                ),
            ),
            ("Gruntfile.js", "config/Gruntfile.js", self._select("gruntfile", {"dist_files": webpack})),
            ("phpcs.xml", "config/phpcs.xml", {}),
            ("readme.txt", "config/readme.txt", {}),
            (".gitignore", "config/gitignore", {}),
        )
        for path, key, fragments in config_files:
            builder.add_file(path, self._render(key, tokens, fragments))

    def _add_asset_files(self, builder: ManifestBuilder, tokens: Mapping[str, str]) -> None:
        for directory in ASSET_DIRECTORIES:
            builder.add_directory(directory)
        for path, key in _ASSET_FILES:
            builder.add_file(path, self._render(key, tokens))

    def _bootstrap_fragments(self, answers: AnswerSet) -> dict[str, str]:
        variant = "pro-compatible" if answers.requires_pro else "standalone"
        return {"bootstrap": self._fragment(f"main-plugin/{variant}")}

    def _plugin_class_fragments(self, answers: AnswerSet) -> dict[str, str]:
        if answers.is_gateway:
            return {}
        return self._select(
            "plugin-class",
            {
                "backend_api_import": answers.has_settings,
                "admin_enqueue_hook": answers.use_webpack,
                "global_settings_hook": answers.has_global_settings,
                "trip_settings_hook": answers.has_trip_settings,
                "api_register_call": answers.has_settings,
                "enqueue_admin_assets_method": answers.use_webpack,
                "add_global_settings_method": answers.has_global_settings,
                "add_trip_meta_method": answers.has_trip_settings,
            },
        )

    def _select(self, group: str, conditions: Mapping[str, bool]) -> dict[str, str]:
        """Load the fragments of ``group`` whose condition holds.

        Slots whose condition is false are left out and resolve to empty text.
        """

        selected = {
            slot: self._fragment(f"{group}/{slot.replace('_', '-')}")
            for slot, enabled in conditions.items()
            if enabled
        }
        LOGGER.debug("%s fragments: %s", group, ", ".join(selected) or "none")
        return selected

    def _fragment(self, key: str) -> str:
        return self.provider.get(f"fragments/{key}").removesuffix("\n")

    def _render(
        self,
        key: str,
        tokens: Mapping[str, str],
        fragments: Mapping[str, str] | None = None,
    ) -> str:
        return Template.parse(self.provider.get(key)).render(tokens, fragments)
