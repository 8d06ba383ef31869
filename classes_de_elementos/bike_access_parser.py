import logging
from typing import Callable, Hashable, Mapping, Optional, Protocol, Sequence, Tuple
from classes_de_elementos.access_profile import AccessProfile
from classes_de_elementos.tag_set import TagSet
from classes_de_elementos.way_access import WayAccess
from constantes.constantes import ACCESS_KEY, BARRIER_EDGE_TAG, ROUNDABOUT_KEY
from funcoes_utilitarias._classify_way import _classify_way
from funcoes_utilitarias._is_barrier import _is_barrier
from funcoes_utilitarias._is_ferry import _is_ferry
from funcoes_utilitarias._resolve_directions import _resolve_directions


class EdgeStore(Protocol):
    def set_bool(self, key: str, reverse: bool, edge_id: Hashable, value: bool) -> None: ...
    def get_bool(self, key: str, reverse: bool, edge_id: Hashable) -> bool: ...


class BikeAccessParser:
    '''
    Classificador de acesso para bicicletas: decide se uma way entra no grafo,
    se é balsa e em quais sentidos pode ser percorrida, gravando o resultado
    em um armazenamento de flags por aresta.

    Observações
    -----------
    - Não guarda estado entre chamadas; o perfil é imutável, então a mesma
      instância pode ser usada por várias threads, desde que cada aresta seja
      gravada por uma única chamada.
    - O flag de rotatória é lido do armazenamento (gravado por quem monta o grafo).
    '''
    def __init__(self, profile: Optional[AccessProfile] = None,
                 is_ferry: Callable[[TagSet], bool] = _is_ferry,
                 access_key: str = ACCESS_KEY,
                 roundabout_key: str = ROUNDABOUT_KEY) -> None:
        '''
        Parâmetros
        ----------
        profile        : AccessProfile (padrão: bicicleta com opções padrão)
        is_ferry       : predicado de balsa
        access_key     : nome do flag de acesso gravado por aresta
        roundabout_key : nome do flag de rotatória lido por aresta
        '''
        self.profile = profile or AccessProfile.for_bicycle()
        self.is_ferry = is_ferry
        self.access_key = access_key
        self.roundabout_key = roundabout_key

    def get_access(self, way_tags: Mapping) -> WayAccess:
        '''
        Classifica a way em ROUTABLE, FERRY ou SKIP.
        '''
        return _classify_way(TagSet.of(way_tags), self.profile, self.is_ferry)

    def resolve_directions(self, way_tags: Mapping, is_roundabout: bool = False) -> Tuple[bool, bool]:
        '''
        Retorna (forward, backward) para uma way já classificada como ROUTABLE.
        '''
        return _resolve_directions(TagSet.of(way_tags), is_roundabout, self.profile)

    def is_barrier(self, node_tags: Mapping) -> bool:
        return _is_barrier(TagSet.of(node_tags), self.profile)

    def handle_way_tags(self, edge_id: Hashable, store: EdgeStore, way_tags: Mapping,
                        node_tags: Optional[Sequence[Mapping]] = None) -> WayAccess:
        '''
        Classifica a way e grava os flags de acesso da aresta.

        Parâmetros
        ----------
        edge_id   : identificador da aresta no armazenamento
        store     : EdgeStore (set_bool/get_bool)
        way_tags  : Mapping com as tags da way
        node_tags : tags dos nós associados (usado só em arestas de barreira)

        Retorno
        -------
        WayAccess : a classificação aplicada

        Observações
        -----------
        - SKIP não grava nada.
        - FERRY grava os dois sentidos como True.
        - Em arestas de barreira, o primeiro nó associado pode bloquear os dois sentidos.
        '''

        tags = TagSet.of(way_tags)
        access = _classify_way(tags, self.profile, self.is_ferry)
        if access.can_skip():
            logging.debug("Aresta %s ignorada: %s", edge_id, tags)
            return access

        if access.is_way():
            is_roundabout = store.get_bool(self.roundabout_key, False, edge_id)
            forward, backward = _resolve_directions(tags, is_roundabout, self.profile)
        else:
            forward, backward = True, True
        store.set_bool(self.access_key, False, edge_id, forward)
        store.set_bool(self.access_key, True, edge_id, backward)

        if tags.has_tag(BARRIER_EDGE_TAG) and node_tags:
            self.handle_barrier_edge(edge_id, store, node_tags[0])
        return access

    def handle_barrier_edge(self, edge_id: Hashable, store: EdgeStore, node_tags: Mapping) -> None:
        '''
        Bloqueia os dois sentidos da aresta sintetizada quando o nó é uma barreira.
        '''
        if self.is_barrier(node_tags):
            logging.debug("Aresta %s bloqueada por barreira: %s", edge_id, dict(node_tags))
            store.set_bool(self.access_key, False, edge_id, False)
            store.set_bool(self.access_key, True, edge_id, False)
