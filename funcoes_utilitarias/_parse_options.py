from constantes.constantes import DEFAULT_OPTIONS, FALSE_OPTION_VALUES, TRUE_OPTION_VALUES

def _parse_options(options: str | None) -> dict[str, bool]:
    '''
    Converte uma string de opções "chave=valor|chave=valor" no dicionário de
    configuração do perfil, partindo dos valores padrão.

    Parâmetros
    ----------
    options : str | None (ex.: "block_fords=true|block_private=false")

    Retorno
    -------
    dict[str, bool] : {'block_fords': ..., 'block_private': ...}

    Observações
    -----------
    - Levanta ValueError para chave desconhecida, item sem '=' ou valor não booleano.
    '''

    parsed = dict(DEFAULT_OPTIONS)
    for item in [s.strip() for s in (options or "").split("|") if s.strip()]:
        if "=" not in item:
            raise ValueError(f"Opção inválida: {item!r}. Esperado: chave=valor")
        key, value = [p.strip() for p in item.split("=", 1)]
        if key not in DEFAULT_OPTIONS:
            raise ValueError(f"Opção desconhecida: {key!r}. Aceitas: {', '.join(sorted(DEFAULT_OPTIONS))}")
        lowered = value.lower()
        if lowered in TRUE_OPTION_VALUES:
            parsed[key] = True
        elif lowered in FALSE_OPTION_VALUES:
            parsed[key] = False
        else:
            raise ValueError(f"Valor inválido para {key}: {value!r} (use true/false)")
    return parsed
