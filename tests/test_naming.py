from __future__ import annotations

import pytest

from addon_starter.naming import DerivedNames, NameDeriver, derive_names


def test_payment_gateway_names():
    names = derive_names("PayStack Payment Gateway", True)
    assert names == DerivedNames(
        slug="paystack",
        full_slug="wptravelengine-paystack-payment",
        function_slug="paystack",
        namespace="WPTravelEnginePaystack",
        constant="PAYSTACK",
        settings_key="paystack",
        gateway_id="paystack_enable",
        title="PayStack",
    )


def test_basic_addon_names():
    names = derive_names("Trip Difficulty Level", False)
    assert names.slug == "trip-difficulty-level"
    assert names.full_slug == "wptravelengine-trip-difficulty-level"
    assert names.function_slug == "trip_difficulty_level"
    assert names.namespace == "WPTravelEngineTripDifficultyLevel"
    assert names.constant == "TRIP_DIFFICULTY_LEVEL"
    assert names.settings_key == "tripdifficultylevel"
    assert names.gateway_id == ""
    assert names.title == "Trip Difficulty Level"


def test_derive_is_deterministic(deriver: NameDeriver):
    assert deriver.derive("Heylight Payment Gateway", True) == deriver.derive("Heylight Payment Gateway", True)


@pytest.mark.parametrize(
    "value",
    [
        "WP Travel Engine -   Paystack",
        "wp travel engine- Paystack",
        "WP  Travel\tEngine - Paystack",
        "Paystack",
    ],
)
def test_product_prefix_is_stripped(value):
    assert derive_names(value, False).title == "Paystack"


@pytest.mark.parametrize(
    "value, title",
    [
        ("Heylight Payment Gateway", "Heylight"),
        ("Stripe Gateway", "Stripe"),
        ("Mollie Payment", "Mollie"),
        ("Razorpay payment   GATEWAY", "Razorpay"),
        ("WP Travel Engine - Heylight Payment Gateway", "Heylight"),
    ],
)
def test_gateway_suffix_is_stripped(value, title):
    assert derive_names(value, True).title == title


def test_gateway_id_uses_underscores():
    assert derive_names("Heylight Payment Gateway", True).gateway_id == "heylight_enable"
    assert derive_names("Pay Later Gateway", True).gateway_id == "pay_later_enable"


def test_suffix_is_kept_for_basic_addons():
    names = derive_names("Stripe Gateway", False)
    assert names.slug == "stripe-gateway"
    assert names.full_slug == "wptravelengine-stripe-gateway"


@pytest.mark.parametrize(
    "value, slug, function_slug",
    [
        ("Trip   Difficulty!!Level", "trip-difficulty-level", "trip_difficulty_level"),
        ("my__weird--name", "my-weird-name", "my_weird_name"),
        ("  --Trip Notes--  ", "trip-notes", "trip_notes"),
        ("!!!", "", ""),
    ],
)
def test_slug_variants_collapse_separators(value, slug, function_slug):
    names = derive_names(value, False)
    assert names.slug == slug
    assert names.function_slug == function_slug


def test_namespace_title_cases_each_word():
    assert derive_names("trip-extra_services notes", False).namespace == "WPTravelEngineTripExtraServicesNotes"


def test_empty_name_produces_empty_identifiers():
    names = derive_names("", False)
    assert names.slug == ""
    assert names.function_slug == ""
    assert names.title == ""


def test_custom_conventions():
    deriver = NameDeriver(product_name="Acme Tours", slug_prefix="acme", root_namespace="Acme")
    names = deriver.derive("Acme Tours - Trip Notes", False)
    assert names.title == "Trip Notes"
    assert names.full_slug == "acme-trip-notes"
    assert names.namespace == "AcmeTripNotes"
