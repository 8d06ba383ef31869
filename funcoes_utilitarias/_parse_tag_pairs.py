from typing import Dict, Iterable

def _parse_tag_pairs(pairs: Iterable[str]) -> Dict[str, str]:
    '''
    Converte argumentos "chave=valor" em um dicionário de tags.

    Parâmetros
    ----------
    pairs : Iterable[str] (ex.: ["highway=tertiary", "oneway=yes"])

    Retorno
    -------
    Dict[str, str] : tags; a última ocorrência de uma chave prevalece

    Observações
    -----------
    - Só o primeiro '=' separa chave e valor ("name=a=b" -> {'name': 'a=b'}).
    - Levanta ValueError para item sem '=' ou com chave vazia.
    '''

    tags: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Tag inválida: {pair!r}. Esperado: chave=valor")
        tags[key.strip()] = value.strip()
    return tags
