import argparse

# CLI
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bikeaccess",
        description=(
            "Classifica o acesso de bicicletas a ways do OSM a partir das tags:\n"
            " - access: routable | ferry | skip\n"
            " - forward/backward: sentidos liberados"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", dest="log_level", default="INFO", help="Nível de log (ex.: INFO, DEBUG)")
    parser.add_argument("--block-fords", dest="block_fords", action="store_true",
                        help="Trata vaus (ford) como bloqueio")
    parser.add_argument("--allow-private", dest="allow_private", action="store_true",
                        help="Trata private/permit como acesso permitido")
    parser.add_argument("--options", dest="options", default=None,
                        help='Opções do perfil (ex.: "block_fords=true|block_private=false")')

    commands = parser.add_subparsers(dest="command", required=True)

    classify = commands.add_parser("classify", help="Classifica um CSV de ways (way_id,tags[,node_tags])")
    classify.add_argument("--in", dest="ways_in", required=True, help="Caminho do CSV de ways de entrada")
    classify.add_argument("--out", dest="access_out", required=True, help="Caminho do CSV de acesso (saída)")

    stats = commands.add_parser("stats", help="Imprime a contagem de ways por classificação")
    stats.add_argument("--in", dest="ways_in", required=True, help="Caminho do CSV de ways de entrada")

    way = commands.add_parser("way", help="Classifica uma única way informada como chave=valor")
    way.add_argument("tags", nargs="*", help="Tags da way (ex.: highway=tertiary oneway=yes)")
    return parser
