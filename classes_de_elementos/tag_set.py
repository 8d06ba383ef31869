from collections.abc import Mapping
from typing import Collection, Iterator, Tuple
from constantes.constantes import MULTI_VALUE_DELIMITER

class TagSet(Mapping):
    '''
    Conjunto imutável de tags (chave -> valor) de uma way ou de um nó.

    Observações
    -----------
    - Valores múltiplos separados por ';' são quebrados uma única vez, na
      construção; sub-valores vazios são descartados e os espaços em volta
      de cada sub-valor são removidos ("yes; no" -> ("yes", "no")).
    - has_tag compara o valor inteiro, como ele aparece no OSM.
    '''
    __slots__ = ("_tags", "_values")

    def __init__(self, tags: Mapping | None = None) -> None:
        self._tags: dict[str, str] = {str(k): str(v) for k, v in (tags or {}).items()}
        self._values: dict[str, Tuple[str, ...]] = {
            key: tuple(part.strip() for part in value.split(MULTI_VALUE_DELIMITER) if part.strip())
            for key, value in self._tags.items()
        }

    @classmethod
    def of(cls, tags: Mapping | None) -> "TagSet":
        '''Reaproveita a instância quando já for um TagSet.'''
        return tags if isinstance(tags, TagSet) else cls(tags)

    def __getitem__(self, key: str) -> str:
        return self._tags[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagSet({self._tags!r})"

    def values_of(self, key: str) -> Tuple[str, ...]:
        '''
        Retorna os sub-valores (não vazios) da tag, na ordem em que aparecem.

        Parâmetros
        ----------
        key : str (chave da tag)

        Retorno
        -------
        Tuple[str, ...] : vazio se a chave não existir ou não tiver valor útil
        '''
        return self._values.get(key, ())

    def has_tag(self, key: str, values: str | Collection[str] | None = None) -> bool:
        '''
        Informa se a tag existe e, opcionalmente, se o seu valor é o esperado.

        Parâmetros
        ----------
        key    : str
        values : None (basta existir) | str (valor exato) | coleção de valores aceitos

        Retorno
        -------
        bool
        '''
        value = self._tags.get(key)
        if value is None:
            return False
        if values is None:
            return True
        if isinstance(values, str):
            return value == values
        return value in values
