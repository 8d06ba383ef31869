# -*- coding: utf-8 -*-
import dataclasses

import pytest

from classes_de_elementos.access_profile import AccessProfile
from classes_de_elementos.tag_set import TagSet
from classes_de_elementos.way_access import RestrictionDecision
from funcoes_utilitarias._resolve_restriction_hierarchy import _resolve_restriction_hierarchy

DENY = RestrictionDecision.DENY
ALLOW = RestrictionDecision.ALLOW
NO_MATCH = RestrictionDecision.NO_MATCH


def _resolve(tags, profile=None):
    return _resolve_restriction_hierarchy(TagSet(tags), profile or AccessProfile.for_bicycle())


@pytest.mark.parametrize("tags, expected", [
    ({}, NO_MATCH),
    ({"foot": "no", "motor_vehicle": "no"}, NO_MATCH),
    ({"access": "no"}, DENY),
    ({"access": "no", "vehicle": "yes"}, ALLOW),
    ({"access": "no", "vehicle": "no"}, DENY),
    ({"access": "no", "vehicle": "no", "bicycle": "yes"}, ALLOW),
    ({"access": "yes", "bicycle": "no"}, DENY),
    ({"access": "destination"}, ALLOW),
    ({"vehicle": "forestry"}, DENY),
    ({"access": "delivery"}, DENY),
])
def test_most_specific_present_key_wins(tags, expected):
    assert _resolve(tags) is expected


def test_present_key_with_unrecognized_value_blocks_fallback():
    # 'customers' não é negado nem pretendido: a chave é consumida e access=no não é consultado
    assert _resolve({"vehicle": "customers", "access": "no"}) is NO_MATCH
    assert _resolve({"bicycle": "unknown", "vehicle": "no", "access": "no"}) is NO_MATCH


def test_absent_or_empty_key_falls_through():
    assert _resolve({"bicycle": "", "vehicle": "no"}) is DENY
    assert _resolve({"bicycle": ";", "access": "yes"}) is ALLOW


def test_multi_value_deny_wins_over_allow():
    assert _resolve({"bicycle": "yes;no"}) is DENY
    assert _resolve({"bicycle": "no;yes"}) is DENY
    assert _resolve({"access": "private;customers"}) is DENY
    assert _resolve({"access": "customers;permissive"}) is ALLOW
    assert _resolve({"access": "yes;;"}) is ALLOW
    assert _resolve({"access": "yes; no"}) is DENY


def test_key_order_is_part_of_the_contract():
    tags = {"access": "no", "bicycle": "yes"}
    profile = AccessProfile.for_bicycle()
    reversed_profile = dataclasses.replace(profile, restriction_keys=tuple(reversed(profile.restriction_keys)))

    assert profile.restriction_keys == ("bicycle", "vehicle", "access")
    assert _resolve(tags, profile) is ALLOW
    assert _resolve(tags, reversed_profile) is DENY


def test_private_depends_on_block_private():
    assert _resolve({"access": "private"}) is DENY
    assert _resolve({"access": "private"}, AccessProfile.for_bicycle(block_private=False)) is ALLOW
    assert _resolve({"access": "permit"}, AccessProfile.for_bicycle(block_private=False)) is ALLOW
