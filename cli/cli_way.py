from typing import List
from classes_de_elementos.bike_access_parser import BikeAccessParser
from classes_de_elementos.edge_access_store import EdgeAccessStore
from classes_de_elementos.tag_set import TagSet
from funcoes_utilitarias._is_roundabout import _is_roundabout
from funcoes_utilitarias._parse_tag_pairs import _parse_tag_pairs

def cli_way(tag_pairs: List[str], parser: BikeAccessParser) -> None:
    '''
    Classifica uma única way informada como "chave=valor" e imprime a
    classificação e os sentidos liberados.

    Parâmetros
    ----------
    tag_pairs : List[str] (ex.: ["highway=tertiary", "oneway=yes"])
    parser    : BikeAccessParser

    Retorno
    -------
    None
    '''

    tags = TagSet(_parse_tag_pairs(tag_pairs))
    store = EdgeAccessStore()
    store.set_bool(parser.roundabout_key, False, 0, _is_roundabout(tags))
    access = parser.handle_way_tags(0, store, tags)

    forward = store.get_bool(parser.access_key, False, 0)
    backward = store.get_bool(parser.access_key, True, 0)
    print(f"access={access.value} forward={forward} backward={backward}")
