# -*- coding: utf-8 -*-
import dataclasses

import pytest

from classes_de_elementos.access_profile import AccessProfile
from funcoes_utilitarias._parse_options import _parse_options
from funcoes_utilitarias._parse_tag_pairs import _parse_tag_pairs


def test_defaults_block_private_but_not_fords():
    profile = AccessProfile.for_bicycle()
    assert profile.block_fords is False
    assert "private" in profile.restricted_values
    assert "private" not in profile.intended_values
    assert profile.restriction_keys == ("bicycle", "vehicle", "access")
    assert {"no", "agricultural", "forestry", "delivery"} <= profile.restricted_values
    assert {"yes", "designated", "official", "permissive", "destination"} <= profile.intended_values


def test_unblocking_private_moves_values_to_intended():
    profile = AccessProfile.for_bicycle(block_fords=True, block_private=False)
    assert profile.block_fords is True
    assert "private" not in profile.restricted_values
    assert "permit" not in profile.restricted_values
    assert {"private", "permit"} <= profile.intended_values


def test_profile_is_immutable():
    profile = AccessProfile.for_bicycle()
    with pytest.raises(dataclasses.FrozenInstanceError):
        profile.block_fords = True
    assert isinstance(profile.restricted_values, frozenset)


def test_vehicle_specific_keys():
    profile = AccessProfile.for_bicycle()
    assert profile.vehicle_oneway_key == "oneway:bicycle"
    assert profile.vehicle_forward_key == "bicycle:forward"
    assert profile.vehicle_backward_key == "bicycle:backward"


def test_from_options():
    profile = AccessProfile.from_options("block_fords=true|block_private=false")
    assert profile == AccessProfile.for_bicycle(block_fords=True, block_private=False)
    assert AccessProfile.from_options(None) == AccessProfile.for_bicycle()
    assert AccessProfile.from_options("") == AccessProfile.for_bicycle()


def test_parse_options():
    assert _parse_options(" block_fords = YES ") == {"block_fords": True, "block_private": True}
    assert _parse_options("block_private=0") == {"block_fords": False, "block_private": False}


@pytest.mark.parametrize("options", ["block_fords=maybe", "max_speed=30", "block_fords"])
def test_parse_options_rejects_invalid_input(options):
    with pytest.raises(ValueError):
        _parse_options(options)


def test_parse_tag_pairs():
    assert _parse_tag_pairs(["highway=tertiary", "name=a=b", "oneway="]) == {
        "highway": "tertiary", "name": "a=b", "oneway": "",
    }
    with pytest.raises(ValueError):
        _parse_tag_pairs(["highway"])
    with pytest.raises(ValueError):
        _parse_tag_pairs(["=yes"])
