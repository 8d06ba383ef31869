from typing import Tuple
import networkx as nx

class NetworkXEdgeStore:
    """
    Grava flags booleanos como atributos das arestas de um nx.DiGraph.
    edge_id é a tupla (u, v) da aresta; o sentido reverso usa o atributo
    '<key>_reverse' da mesma aresta.
    """

    def __init__(self, G: nx.DiGraph):
        self.G = G

    @staticmethod
    def attribute_name(key: str, reverse: bool) -> str:
        return f"{key}_reverse" if reverse else key

    def set_bool(self, key: str, reverse: bool, edge_id: Tuple[int, int], value: bool) -> None:
        u, v = edge_id
        self.G.edges[u, v][self.attribute_name(key, reverse)] = bool(value)

    def get_bool(self, key: str, reverse: bool, edge_id: Tuple[int, int]) -> bool:
        u, v = edge_id
        return bool(self.G.edges[u, v].get(self.attribute_name(key, reverse), False))
