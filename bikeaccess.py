#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
============================================================================
Acesso de bicicletas a ways do OSM
----------------------------------------------------------------------------
Classifica cada way (via, caminho, balsa) a partir das suas tags:

  1) access  : routable | ferry | skip
  2) forward : a way pode ser percorrida no sentido da geometria
  3) backward: a way pode ser percorrida no sentido contrário

Hierarquia de restrições
------------------------
- bicycle -> vehicle -> access (da mais específica para a menos específica).
- Só a primeira chave presente decide; valor desconhecido NÃO passa a
  decisão para a chave seguinte.

Mão única
---------
- oneway, oneway:bicycle, cycleway:<lado>:oneway, <veículo>:forward/backward.
- Ciclofaixas em contramão (cycleway=opposite*, cycleway:both, ...=no)
  reabrem o sentido contrário para bicicletas.

Entrada (CSV)
-------------
- way_id, tags (objeto JSON) e opcionalmente node_tags (lista JSON).
============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from classes_de_elementos.access_profile import AccessProfile
from classes_de_elementos.bike_access_parser import BikeAccessParser
from cli._build_arg_parser import _build_arg_parser
from cli.cli_classify import cli_classify
from cli.cli_stats import cli_stats
from cli.cli_way import cli_way
from funcoes_utilitarias._parse_options import _parse_options

def _build_profile(args) -> AccessProfile:
    options = _parse_options(args.options)
    if args.block_fords:
        options["block_fords"] = True
    if args.allow_private:
        options["block_private"] = False
    return AccessProfile.for_bicycle(**options)

def main(argv: List[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        access_parser = BikeAccessParser(_build_profile(args))
    except ValueError as exc:
        logging.error("Configuração inválida: %s", exc)
        return 1

    if args.command == "way":
        try:
            cli_way(args.tags, access_parser)
        except ValueError as exc:
            logging.error("%s", exc)
            return 1
        return 0

    ways_csv = Path(args.ways_in).expanduser().resolve()
    if not ways_csv.exists():
        logging.error("Arquivo de entrada não existe: %s", ways_csv)
        return 1

    try:
        if args.command == "classify":
            cli_classify(ways_csv, Path(args.access_out).expanduser().resolve(), access_parser)
        else:
            cli_stats(ways_csv, access_parser)
    except Exception as exc:  # noqa: BLE001
        logging.exception("Falha ao classificar ways: %s", exc)
        return 2

    logging.info("Concluído.")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
