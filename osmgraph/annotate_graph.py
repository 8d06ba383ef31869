import logging
from collections import Counter
from typing import Dict
import networkx as nx

from classes_de_elementos.bike_access_parser import BikeAccessParser
from classes_de_elementos.tag_set import TagSet
from funcoes_utilitarias._is_roundabout import _is_roundabout
from .edge_store import NetworkXEdgeStore

def annotate_graph(G: nx.DiGraph, parser: BikeAccessParser) -> Dict[str, int]:
    """
    Classifica cada aresta de um grafo já montado (atributo 'tags' com as tags
    da way) e grava os flags de acesso como atributos da aresta:
    <access_key> (sentido da geometria) e <access_key>_reverse.
    Arestas SKIP recebem os dois flags False.
    Retorna a contagem de arestas por classificação.
    """
    store = NetworkXEdgeStore(G)
    counts: Counter = Counter()

    for u, v, data in G.edges(data=True):
        tags = TagSet.of(data.get("tags") or {})
        store.set_bool(parser.roundabout_key, False, (u, v), _is_roundabout(tags))

        access = parser.handle_way_tags((u, v), store, tags, data.get("node_tags"))
        if access.can_skip():
            store.set_bool(parser.access_key, False, (u, v), False)
            store.set_bool(parser.access_key, True, (u, v), False)
        counts[access.value] += 1

    logging.info("Grafo anotado: %d arestas (%s)", G.number_of_edges(), dict(counts))
    return dict(counts)
