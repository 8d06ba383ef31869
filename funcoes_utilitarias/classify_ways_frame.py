import json
import pandas as pd
from classes_de_elementos.bike_access_parser import BikeAccessParser
from classes_de_elementos.edge_access_store import EdgeAccessStore
from classes_de_elementos.tag_set import TagSet
from funcoes_utilitarias._is_roundabout import _is_roundabout

def _load_json_cell(cell, default):
    '''Aceita dict/list já carregados, texto JSON ou célula vazia (NaN/None/"").'''
    if isinstance(cell, (dict, list)):
        return cell
    if cell is None or (isinstance(cell, float) and pd.isna(cell)) or str(cell).strip() == "":
        return default
    return json.loads(cell)

def classify_ways_frame(ways_df: pd.DataFrame, parser: BikeAccessParser) -> pd.DataFrame:
    '''
    Classifica em lote as ways de um DataFrame.

    Parâmetros
    ----------
    ways_df : pd.DataFrame com colunas 'way_id' e 'tags' (objeto JSON em texto ou dict);
              opcional 'node_tags' (lista JSON de objetos, para arestas de barreira)
    parser  : BikeAccessParser

    Retorno
    -------
    pd.DataFrame : colunas way_id, access, forward, backward

    Observações
    -----------
    - Ways SKIP saem com forward=backward=False.
    - O flag de rotatória vem de junction=roundabout|circular.
    - Levanta ValueError se faltar coluna obrigatória ou se a célula de tags
      não for JSON válido.
    '''

    missing = [col for col in ("way_id", "tags") if col not in ways_df.columns]
    if missing:
        raise ValueError(f"Colunas ausentes no CSV de ways: {', '.join(missing)}")
    has_node_tags = "node_tags" in ways_df.columns

    store = EdgeAccessStore()
    rows: list[dict] = []
    for position, row in enumerate(ways_df.itertuples(index=False)):
        try:
            tags = TagSet(_load_json_cell(row.tags, {}))
            node_tags = _load_json_cell(row.node_tags, []) if has_node_tags else []
        except (AttributeError, TypeError, ValueError) as exc:
            raise ValueError(f"Linha {position + 1} (way {row.way_id}) inválida: {exc}") from exc

        store.set_bool(parser.roundabout_key, False, position, _is_roundabout(tags))
        access = parser.handle_way_tags(position, store, tags, node_tags)
        rows.append({
            "way_id": row.way_id,
            "access": access.value,
            "forward": store.get_bool(parser.access_key, False, position),
            "backward": store.get_bool(parser.access_key, True, position),
        })

    return pd.DataFrame(rows, columns=["way_id", "access", "forward", "backward"])
