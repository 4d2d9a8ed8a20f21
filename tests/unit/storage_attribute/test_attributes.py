"""Unit tests for storage attribute offers and requests."""

import dataclasses

import pytest

from orchestrator.storage_attribute import (
    AttributeType,
    BoolOffer,
    BoolRequest,
    IntOffer,
    IntRequest,
    StringOffer,
    StringRequest,
    create_request,
    create_requests,
    get_attribute_type,
)
from orchestrator.utils.errors import InvalidAttributeError


class TestOffers:
    def test_bool_offer_true_serves_both_requests(self):
        offer = BoolOffer(True)
        assert offer.matches(BoolRequest(True))
        assert offer.matches(BoolRequest(False))

    def test_bool_offer_false_serves_only_false(self):
        offer = BoolOffer(False)
        assert offer.matches(BoolRequest(False))
        assert not offer.matches(BoolRequest(True))

    @pytest.mark.parametrize("value,expected", [
        (999, False),
        (1000, True),
        (5000, True),
        (10000, True),
        (10001, False),
    ])
    def test_int_offer_range_is_inclusive(self, value, expected):
        assert IntOffer(min=1000, max=10000).matches(IntRequest(value)) is expected

    def test_int_offer_rejects_inverted_range(self):
        with pytest.raises(ValueError):
            IntOffer(min=10, max=1)

    def test_string_offer_membership(self):
        offer = StringOffer.of("thin", "thick")
        assert offer.matches(StringRequest("thin"))
        assert offer.matches(StringRequest("thick"))
        assert not offer.matches(StringRequest("sparse"))

    def test_type_mismatch_never_matches(self):
        assert not BoolOffer(True).matches(StringRequest("true"))
        assert not IntOffer(min=0, max=10).matches(StringRequest("5"))
        assert not StringOffer.of("5").matches(IntRequest(5))

    def test_string_offers_compare_by_value(self):
        assert StringOffer.of("a", "b") == StringOffer.of("a", "b")
        assert StringOffer.of("a") != StringOffer.of("b")
        assert hash(StringOffer.of("a")) == hash(StringOffer.of("a"))

    def test_string_offer_is_an_immutable_tuple(self):
        offer = StringOffer(offers=["thin", "thick"])

        assert offer.offers == ("thin", "thick")
        assert offer == StringOffer.of("thin", "thick")
        with pytest.raises(dataclasses.FrozenInstanceError):
            offer.offers = ("thin",)


class TestCreateRequest:
    def test_registered_attribute_types(self):
        assert get_attribute_type("media") == AttributeType.STRING
        assert get_attribute_type("snapshots") == AttributeType.BOOL
        assert get_attribute_type("IOPS") == AttributeType.INT
        assert get_attribute_type("customLabel") == AttributeType.STRING

    @pytest.mark.parametrize("value,expected", [
        (True, True),
        (False, False),
        ("true", True),
        ("False", False),
    ])
    def test_bool_coercion(self, value, expected):
        assert create_request("snapshots", value) == BoolRequest(expected)

    @pytest.mark.parametrize("value,expected", [
        (5000, 5000),
        ("5000", 5000),
        (" 42 ", 42),
    ])
    def test_int_coercion(self, value, expected):
        assert create_request("IOPS", value) == IntRequest(expected)

    def test_unknown_attribute_is_string(self):
        assert create_request("tier", "fast") == StringRequest("fast")

    @pytest.mark.parametrize("name,value", [
        ("snapshots", "yes"),
        ("snapshots", 1),
        ("IOPS", "many"),
        ("IOPS", True),
        ("IOPS", 1.5),
        ("media", 7),
        ("tier", None),
    ])
    def test_invalid_values_raise(self, name, value):
        with pytest.raises(InvalidAttributeError) as exc_info:
            create_request(name, value)
        assert exc_info.value.code == "InvalidAttribute"
        assert exc_info.value.name == name

    def test_typed_request_passes_through(self):
        request = IntRequest(300)
        assert create_request("IOPS", request) is request

    def test_typed_request_with_wrong_type_is_rejected(self):
        with pytest.raises(InvalidAttributeError):
            create_request("IOPS", StringRequest("300"))

    def test_requests_keep_their_json_value(self):
        requests = create_requests({"media": "ssd", "IOPS": "300", "encryption": "true"})
        assert {name: r.to_json_value() for name, r in requests.items()} == {
            "media": "ssd",
            "IOPS": 300,
            "encryption": True,
        }
