# -*- coding: utf-8 -*-
"""
Fixtures globais:
- parser com o perfil padrão de bicicleta (block_fords=False, block_private=True)
- parser que bloqueia vaus
- helper que classifica uma way e devolve (access, forward, backward)
"""
from __future__ import annotations

import pytest

from classes_de_elementos.access_profile import AccessProfile
from classes_de_elementos.bike_access_parser import BikeAccessParser
from classes_de_elementos.edge_access_store import EdgeAccessStore
from constantes.constantes import ACCESS_KEY, ROUNDABOUT_KEY


@pytest.fixture
def parser() -> BikeAccessParser:
    return BikeAccessParser(AccessProfile.for_bicycle())


@pytest.fixture
def ford_parser() -> BikeAccessParser:
    return BikeAccessParser(AccessProfile.for_bicycle(block_fords=True))


@pytest.fixture
def handle(parser):
    """Classifica uma way numa aresta nova e devolve (access, forward, backward)."""
    def _handle(tags, roundabout=False, node_tags=None):
        store = EdgeAccessStore()
        store.set_bool(ROUNDABOUT_KEY, False, 0, roundabout)
        access = parser.handle_way_tags(0, store, tags, node_tags)
        return access, store.get_bool(ACCESS_KEY, False, 0), store.get_bool(ACCESS_KEY, True, 0)
    return _handle


@pytest.fixture
def directions(handle):
    """Só os sentidos (forward, backward) de uma way roteável."""
    def _directions(tags, roundabout=False):
        _, forward, backward = handle(tags, roundabout=roundabout)
        return forward, backward
    return _directions
