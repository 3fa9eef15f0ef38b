"""Command line interface for the WP Travel Engine addon starter."""

from __future__ import annotations

import argparse
import os
import sys
from functools import partial
from pathlib import Path
from typing import Sequence

from .assembler import TemplateAssembler
from .config import AddonType, AnswerSet, SettingsType, default_description
from .errors import EmptyNameError, ScaffoldError
from .logging_config import resolve_level, setup_logging
from .naming import DerivedNames, NameDeriver
from .prompts import Prompter
from .provider import DirectoryTemplateProvider
from .scaffold import AddonScaffolder, next_steps

NAME_QUESTION = 'Addon Name (e.g., "PayStack Payment Gateway" or "Trip Difficulty Level")'
YES_NO = ["no", "yes"]
SETTINGS_CHOICES = [member.value for member in SettingsType]


def default_plugins_dir() -> Path:
    """Return ``$WP_CONTENT_DIR/plugins`` when set, else the working directory."""

    content_dir = os.environ.get("WP_CONTENT_DIR")
    if content_dir:
        return Path(content_dir) / "plugins"
    return Path.cwd()


def build_parser(
    deriver: NameDeriver | None = None,
    assembler: TemplateAssembler | None = None,
) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="addon-starter",
        description="Scaffold WP Travel Engine addon plugins",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug)",
    )
    parser.add_argument("--log-level", help="Explicit log level, overrides --verbose")
    subparsers = parser.add_subparsers(dest="command", required=True)
    register_commands(subparsers, deriver or NameDeriver(), assembler or TemplateAssembler())
    return parser


def register_commands(
    subparsers: argparse._SubParsersAction,
    deriver: NameDeriver,
    assembler: TemplateAssembler,
) -> None:
    """Attach the ``scaffold`` and ``make-addon`` commands sharing one scaffolder."""

    scaffolder = AddonScaffolder(deriver, assembler)

    scaffold_parser = subparsers.add_parser(
        "scaffold",
        help="scaffold an addon, prompting only for values missing from the flags",
    )
    scaffold_parser.add_argument("--name", help='The addon name, e.g. "PayStack Payment Gateway"')
    scaffold_parser.add_argument("--description", help="The addon description")
    scaffold_parser.add_argument(
        "--type",
        choices=[member.value for member in AddonType],
        help="The addon type",
    )
    scaffold_parser.add_argument(
        "--pro",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Require WP Travel Engine Pro compatibility",
    )
    scaffold_parser.add_argument(
        "--settings",
        choices=SETTINGS_CHOICES,
        help="Settings type for basic addons",
    )
    scaffold_parser.add_argument(
        "--webpack",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include webpack configuration (basic addons only)",
    )
    scaffold_parser.add_argument(
        "--plugins-dir",
        type=Path,
        help="Directory receiving the addon (default: $WP_CONTENT_DIR/plugins or the working directory)",
    )
    scaffold_parser.add_argument("--stubs-dir", type=Path, help="Use stub templates from this directory")
    scaffold_parser.set_defaults(handler=partial(_handle_scaffold, scaffolder))

    make_parser = subparsers.add_parser("make-addon", help="scaffold an addon interactively")
    make_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        help="Directory receiving the addon (default: the working directory)",
    )
    make_parser.add_argument("--stubs-dir", type=Path, help="Use stub templates from this directory")
    make_parser.set_defaults(handler=partial(_handle_make_addon, scaffolder))


def _ask_name(prompter: Prompter, name: str | None) -> str:
    addon_name = (name or prompter.prompt(NAME_QUESTION)).strip()
    if not addon_name:
        raise EmptyNameError()
    return addon_name


def _ask_yes_no(prompter: Prompter, question: str) -> bool:
    return prompter.choice(question, YES_NO, 0) == "yes"


def _collect_answers(
    prompter: Prompter,
    *,
    name: str | None = None,
    description: str | None = None,
    addon_type: str | None = None,
    requires_pro: bool | None = None,
    settings: str | None = None,
    use_webpack: bool | None = None,
) -> AnswerSet:
    """Build an :class:`AnswerSet`, prompting for every value left as ``None``."""

    addon_name = _ask_name(prompter, name)
    if description is None:
        description = prompter.prompt("Addon Description", default_description(addon_name))

    if addon_type is None:
        is_gateway = _ask_yes_no(prompter, "Is this a payment gateway addon?")
    else:
        is_gateway = addon_type == AddonType.PAYMENT_GATEWAY.value

    if requires_pro is None:
        requires_pro = _ask_yes_no(prompter, "Does this addon require WP Travel Engine Pro compatibility?")

    settings_type = SettingsType.GLOBAL.value
    if is_gateway:
        use_webpack = False
    else:
        settings_type = settings or prompter.choice(
            "What type of settings does this addon need?", SETTINGS_CHOICES, 0
        )
        if use_webpack is None:
            use_webpack = _ask_yes_no(prompter, "Does this addon require Webpack configuration?")

    return AnswerSet.from_answers(
        addon_name,
        description=description,
        is_gateway=is_gateway,
        requires_pro=requires_pro,
        settings_type=settings_type,
        use_webpack=use_webpack,
    )


def _with_stubs(scaffolder: AddonScaffolder, stubs_dir: Path | None) -> AddonScaffolder:
    if stubs_dir is None:
        return scaffolder
    if not stubs_dir.is_dir():
        raise ScaffoldError(f"Stub directory not found: {stubs_dir}")
    assembler = TemplateAssembler(DirectoryTemplateProvider(stubs_dir))
    return AddonScaffolder(scaffolder.deriver, assembler, scaffolder.writer)


def _print_summary(answers: AnswerSet, names: DerivedNames) -> None:
    print("\n✓ Addon Configuration:")
    lines = dict(answers.summary())
    lines["Full Slug"] = names.full_slug
    lines["Namespace"] = names.namespace
    for label, value in lines.items():
        print(f"  {label}: {value}")


def _create(
    scaffolder: AddonScaffolder,
    answers: AnswerSet,
    parent_dir: Path,
    *,
    activation_hint: bool,
) -> int:
    names = scaffolder.names(answers)
    _print_summary(answers, names)

    addon_path = scaffolder.create(answers, parent_dir)

    print("\nAddon scaffold created successfully!")
    print(f"Location: {addon_path}")
    print("\nNext steps:")
    for number, step in enumerate(next_steps(names, answers), start=1):
        print(f"  {number}. {step}")
    if activation_hint:
        print("\nThen activate the plugin:")
        print(f"  wp plugin activate {names.full_slug}")
    return 0


def _handle_scaffold(scaffolder: AddonScaffolder, args: argparse.Namespace) -> int:
    answers = _collect_answers(
        Prompter(),
        name=args.name,
        description=args.description,
        addon_type=args.type,
        requires_pro=args.pro,
        settings=args.settings,
        use_webpack=args.webpack,
    )
    parent_dir = args.plugins_dir or default_plugins_dir()
    return _create(_with_stubs(scaffolder, args.stubs_dir), answers, parent_dir, activation_hint=True)


def _handle_make_addon(scaffolder: AddonScaffolder, args: argparse.Namespace) -> int:
    answers = _collect_answers(Prompter())
    parent_dir = args.directory or Path.cwd()
    return _create(_with_stubs(scaffolder, args.stubs_dir), answers, parent_dir, activation_hint=False)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(resolve_level(args.log_level, args.verbose))
    try:
        return args.handler(args)
    except ScaffoldError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
