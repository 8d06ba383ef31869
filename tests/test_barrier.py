# -*- coding: utf-8 -*-
from classes_de_elementos.access_profile import AccessProfile
from classes_de_elementos.bike_access_parser import BikeAccessParser


def test_barrier_access(parser):
    # por padrão o portão é aberto para bicicletas
    assert not parser.is_barrier({"barrier": "gate"})
    assert not parser.is_barrier({"barrier": "gate", "bicycle": "yes"})
    assert parser.is_barrier({"barrier": "gate", "access": "no"})
    assert parser.is_barrier({"barrier": "gate", "access": "yes", "bicycle": "no"})
    assert parser.is_barrier({"barrier": "gate", "access": "no", "foot": "yes"})
    # a tag da bicicleta reabre o portão
    assert not parser.is_barrier({"barrier": "gate", "access": "no", "bicycle": "yes"})


def test_locked_gate(parser):
    assert parser.is_barrier({"barrier": "gate", "locked": "yes"})
    assert not parser.is_barrier({"barrier": "gate", "locked": "yes", "bicycle": "yes"})


def test_blocking_barrier_values(parser):
    assert parser.is_barrier({"barrier": "fence"})
    assert not parser.is_barrier({"barrier": "fence", "bicycle": "designated"})
    assert not parser.is_barrier({"barrier": "bollard"})


def test_no_bike(parser):
    assert parser.is_barrier({"bicycle": "no"})


def test_ford_nodes(parser, ford_parser):
    assert not parser.is_barrier({"ford": "yes"})
    assert ford_parser.is_barrier({"ford": "yes"})
    assert not ford_parser.is_barrier({"ford": "yes", "bicycle": "yes"})


def test_private_nodes(parser):
    assert parser.is_barrier({"access": "private"})
    assert not BikeAccessParser(AccessProfile.for_bicycle(block_private=False)).is_barrier({"access": "private"})
