from pathlib import Path
import pandas as pd
from classes_de_elementos.bike_access_parser import BikeAccessParser
from funcoes_utilitarias.classify_ways_frame import classify_ways_frame

def cli_stats(ways_csv: Path, parser: BikeAccessParser) -> None:
    '''
    Classifica o CSV de ways e imprime estatísticas básicas: total, contagem
    por classificação e quantas ways roteáveis ficaram de mão única.

    Parâmetros
    ----------
    ways_csv : Path (CSV com colunas way_id, tags[, node_tags])
    parser   : BikeAccessParser

    Retorno
    -------
    None
    '''

    ways_df = pd.read_csv(ways_csv, dtype=str, keep_default_na=False)
    access_df = classify_ways_frame(ways_df, parser)

    counts = access_df["access"].value_counts()
    routable = access_df[access_df["access"] == "routable"]
    oneway_count = int((routable["forward"] != routable["backward"]).sum())

    print(f"Ways |W|={len(access_df)}")
    for access in ("routable", "ferry", "skip"):
        print(f"  {access}: {int(counts.get(access, 0))}")
    print(f"  mão única (bicicleta): {oneway_count}")
