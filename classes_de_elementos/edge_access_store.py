from typing import Dict, Hashable, Tuple

class EdgeAccessStore:
    '''
    Armazena valores booleanos por aresta e por sentido, identificados por
    nome (ex.: 'bike_access', 'roundabout').

    Observações
    -----------
    - reverse=False é o sentido da geometria armazenada; reverse=True o contrário.
    - Valores nunca gravados são lidos como False.
    '''
    def __init__(self) -> None:
        self.flags: Dict[Tuple[str, Hashable, bool], bool] = {}

    def set_bool(self, key: str, reverse: bool, edge_id: Hashable, value: bool) -> None:
        self.flags[(key, edge_id, bool(reverse))] = bool(value)

    def get_bool(self, key: str, reverse: bool, edge_id: Hashable) -> bool:
        return self.flags.get((key, edge_id, bool(reverse)), False)

    def edge_count(self, key: str) -> int:
        '''
        Quantidade de arestas distintas com algum valor gravado para 'key'.
        '''
        return len({edge_id for flag_key, edge_id, _ in self.flags if flag_key == key})
