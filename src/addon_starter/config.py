"""Answer set collected from the command line or the interactive prompts."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import EmptyNameError
from .naming import PRODUCT_NAME

__all__ = ["AddonType", "AnswerSet", "SettingsType", "default_description"]


class SettingsType(str, Enum):
    """Configuration surfaces exposed by a non-gateway addon."""

    NONE = "none"
    GLOBAL = "global"
    TRIP_EDIT = "trip-edit"
    BOTH = "both"


class AddonType(str, Enum):
    """Values accepted by the ``--type`` flag."""

    PAYMENT_GATEWAY = "payment-gateway"
    BASIC = "basic"


def default_description(addon_name: str) -> str:
    """Return the description used when the user does not provide one."""

    return f"{addon_name} for {PRODUCT_NAME}"


class AnswerSet(BaseModel):
    """Validated answers describing the addon to generate.

    Payment gateways always expose global settings and never ship a webpack
    build, whatever values were supplied for those fields.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    addon_name: str = Field(..., description="Free text addon title as entered by the user.")
    description: str = Field("", description="Plugin description; defaults to '<addon_name> for WP Travel Engine'.")
    is_gateway: bool = Field(False, description="Whether the addon is a payment gateway.")
    requires_pro: bool = Field(False, description="Whether the addon boots through WP Travel Engine Pro.")
    settings_type: SettingsType = Field(SettingsType.NONE, description="Settings surfaces of a basic addon.")
    use_webpack: bool = Field(False, description="Whether to ship a webpack asset pipeline.")

    @field_validator("addon_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("addon name must not be empty")
        return value

    @model_validator(mode="before")
    @classmethod
    def _apply_gateway_rules(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("is_gateway"):
            data["settings_type"] = SettingsType.GLOBAL
            data["use_webpack"] = False
        if not data.get("description") and isinstance(data.get("addon_name"), str):
            data["description"] = default_description(data["addon_name"].strip())
        return data

    @classmethod
    def from_answers(
        cls,
        addon_name: str,
        *,
        description: str | None = None,
        is_gateway: bool = False,
        requires_pro: bool = False,
        settings_type: SettingsType | str = SettingsType.NONE,
        use_webpack: bool = False,
    ) -> "AnswerSet":
        """Build an :class:`AnswerSet`, raising :class:`EmptyNameError` for a blank name."""

        name = addon_name.strip()
        if not name:
            raise EmptyNameError()

        return cls(
            addon_name=name,
            description=description or default_description(name),
            is_gateway=is_gateway,
            requires_pro=requires_pro,
            settings_type=SettingsType(settings_type),
            use_webpack=use_webpack,
        )

    @property
    def addon_type(self) -> AddonType:
        return AddonType.PAYMENT_GATEWAY if self.is_gateway else AddonType.BASIC

    @property
    def has_settings(self) -> bool:
        return self.settings_type is not SettingsType.NONE

    @property
    def has_global_settings(self) -> bool:
        return self.settings_type in (SettingsType.GLOBAL, SettingsType.BOTH)

    @property
    def has_trip_settings(self) -> bool:
        return self.settings_type in (SettingsType.TRIP_EDIT, SettingsType.BOTH)

    def summary(self) -> dict[str, str]:
        """Return human readable configuration lines keyed by label."""

        return {
            "Name": self.addon_name,
            "Description": self.description,
            "Type": "Payment Gateway" if self.is_gateway else "Basic Addon",
            "Pro Compatible": "Yes" if self.requires_pro else "No",
            "Settings": self.settings_type.value,
            "Webpack": "Yes" if self.use_webpack else "No",
        }
