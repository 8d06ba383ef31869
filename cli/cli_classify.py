import logging
from pathlib import Path
import pandas as pd
from classes_de_elementos.bike_access_parser import BikeAccessParser
from funcoes_utilitarias.classify_ways_frame import classify_ways_frame

def cli_classify(ways_csv: Path, access_csv: Path, parser: BikeAccessParser) -> None:
    '''
    Lê o CSV de ways, classifica cada uma e grava o CSV de acesso
    (way_id, access, forward, backward).

    Parâmetros
    ----------
    ways_csv   : Path (CSV com colunas way_id, tags[, node_tags])
    access_csv : Path (CSV de saída)
    parser     : BikeAccessParser

    Retorno
    -------
    None
    '''

    logging.info("Lendo ways de %s", ways_csv)
    ways_df = pd.read_csv(ways_csv, dtype=str, keep_default_na=False)

    access_df = classify_ways_frame(ways_df, parser)

    logging.info("Gravando CSV de acesso em %s", access_csv)
    access_csv.parent.mkdir(parents=True, exist_ok=True)
    access_df.to_csv(access_csv, index=False)
    print(f"Ways classificadas: {len(access_df)} -> {access_csv}")
