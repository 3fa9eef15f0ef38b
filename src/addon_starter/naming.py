"""Naming conventions derived from a human friendly addon title."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "DerivedNames",
    "NameDeriver",
    "PRODUCT_NAME",
    "ROOT_NAMESPACE",
    "SLUG_PREFIX",
    "derive_names",
]


PRODUCT_NAME = "WP Travel Engine"
SLUG_PREFIX = "wptravelengine"
ROOT_NAMESPACE = "WPTravelEngine"

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+", re.IGNORECASE)
_MULTIPLE_UNDERSCORES = re.compile(r"_+")
_WORD_SEPARATORS = re.compile(r"[ \-_]+")
_GATEWAY_SUFFIX = re.compile(r"(?:Payment\s+Gateway|Gateway|Payment)\s*$", re.IGNORECASE)


def _product_prefix_pattern(product_name: str) -> re.Pattern[str]:
    words = [re.escape(word) for word in product_name.split()]
    return re.compile(r"^" + r"\s+".join(words) + r"\s*-\s*", re.IGNORECASE)


def _separate(value: str, separator: str) -> str:
    return _NON_ALPHANUMERIC.sub(separator, value).strip(separator).lower()


def _pascal_case(value: str) -> str:
    return "".join(word.capitalize() for word in _WORD_SEPARATORS.split(value) if word)


@dataclass(frozen=True, slots=True)
class DerivedNames:
    """Identifier variants used throughout the generated addon.

    Attributes
    ----------
    slug:
        Kebab-case identifier, e.g. ``trip-difficulty-level``.
    full_slug:
        Plugin directory and main file name, e.g. ``wptravelengine-paystack-payment``.
    function_slug:
        Snake-case identifier for PHP function names.
    namespace:
        PascalCase PHP namespace rooted at ``WPTravelEngine``.
    constant:
        SCREAMING_SNAKE_CASE fragment used in PHP constants.
    settings_key:
        Separator-free key used in settings arrays and REST payloads.
    gateway_id:
        Option key enabling a payment gateway; empty for other addons.
    title:
        Display title with the product prefix and gateway suffix removed.
    """

    slug: str
    full_slug: str
    function_slug: str
    namespace: str
    constant: str
    settings_key: str
    gateway_id: str
    title: str


class NameDeriver:
    """Convert a raw addon title into :class:`DerivedNames`."""

    def __init__(
        self,
        *,
        product_name: str = PRODUCT_NAME,
        slug_prefix: str = SLUG_PREFIX,
        root_namespace: str = ROOT_NAMESPACE,
    ) -> None:
        self._prefix_pattern = _product_prefix_pattern(product_name)
        self._slug_prefix = slug_prefix
        self._root_namespace = root_namespace

    def clean_name(self, addon_name: str, is_gateway: bool) -> str:
        """Strip the product prefix and, for gateways, the payment suffix."""

        clean = self._prefix_pattern.sub("", addon_name, count=1)
        if is_gateway:
            clean = _GATEWAY_SUFFIX.sub("", clean, count=1).strip()
        return clean

    def derive(self, addon_name: str, is_gateway: bool) -> DerivedNames:
        """Return every naming convention for ``addon_name``.

        The result depends only on the arguments, an empty ``addon_name``
        produces empty identifiers and callers are expected to reject it first.
        """

        clean = self.clean_name(addon_name, is_gateway)

        slug = _separate(clean, "-")
        function_slug = _MULTIPLE_UNDERSCORES.sub("_", _separate(clean, "_"))

        full_slug = f"{self._slug_prefix}-{slug}"
        if is_gateway:
            full_slug += "-payment"

        underscored = slug.replace("-", "_")
        return DerivedNames(
            slug=slug,
            full_slug=full_slug,
            function_slug=function_slug,
            namespace=self._root_namespace + _pascal_case(clean),
            constant=underscored.upper(),
            settings_key=re.sub(r"[-_ ]", "", slug).lower(),
            gateway_id=f"{underscored}_enable" if is_gateway else "",
            title=clean,
        )


_DEFAULT_DERIVER = NameDeriver()


def derive_names(addon_name: str, is_gateway: bool = False) -> DerivedNames:
    """Derive names with the default WP Travel Engine conventions."""

    return _DEFAULT_DERIVER.derive(addon_name, is_gateway)
