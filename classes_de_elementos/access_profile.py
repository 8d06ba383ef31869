from dataclasses import dataclass, field
from typing import FrozenSet, Tuple
from constantes.constantes import (
    BIKE_BARRIERS, BIKE_HIGHWAYS, BIKE_RESTRICTION_KEYS, BOTH_SIDES_KEY, INTENDED_VALUES,
    MOTORWAY_HIGHWAYS, OPPOSITE_LANE_KEYS, OPPOSITE_LANES, PRIVATE_VALUES, RESTRICTED_VALUES,
    SIDE_ONEWAY_KEYS,
)
from funcoes_utilitarias._parse_options import _parse_options

@dataclass(frozen=True)
class AccessProfile:
    '''
    Perfil de acesso de uma classe de veículo: chaves de restrição ordenadas,
    valores negados/pretendidos, tipos de highway aceitos e as chaves usadas
    na resolução de sentido.

    Observações
    -----------
    - Imutável (frozen=True) e com coleções imutáveis: uma mesma instância pode
      ser compartilhada por várias classificações simultâneas.
    - restriction_keys DEVE estar ordenada da chave mais específica para a
      menos específica; a ordem faz parte do contrato.
    '''
    vehicle: str
    restriction_keys: Tuple[str, ...]
    restricted_values: FrozenSet[str]
    intended_values: FrozenSet[str]
    allowed_highways: FrozenSet[str]
    motorway_highways: FrozenSet[str] = frozenset(MOTORWAY_HIGHWAYS)
    barriers: FrozenSet[str] = frozenset(BIKE_BARRIERS)
    block_fords: bool = False
    side_oneway_keys: Tuple[str, ...] = field(default=SIDE_ONEWAY_KEYS, repr=False)
    opposite_lane_keys: Tuple[str, ...] = field(default=OPPOSITE_LANE_KEYS, repr=False)
    opposite_lane_values: FrozenSet[str] = field(default=frozenset(OPPOSITE_LANES), repr=False)
    both_sides_key: str = field(default=BOTH_SIDES_KEY, repr=False)

    @property
    def vehicle_oneway_key(self) -> str:
        return f"oneway:{self.vehicle}"

    @property
    def vehicle_forward_key(self) -> str:
        return f"{self.vehicle}:forward"

    @property
    def vehicle_backward_key(self) -> str:
        return f"{self.vehicle}:backward"

    @classmethod
    def for_bicycle(cls, block_fords: bool = False, block_private: bool = True) -> "AccessProfile":
        '''
        Monta o perfil de bicicleta.

        Parâmetros
        ----------
        block_fords   : bool (vaus contam como bloqueio; padrão False)
        block_private : bool (private/permit negam o acesso; padrão True)

        Retorno
        -------
        AccessProfile

        Observações
        -----------
        Com block_private=False os valores 'private' e 'permit' deixam de ser
        negações e passam a ser valores pretendidos.
        '''
        restricted = set(RESTRICTED_VALUES)
        intended = set(INTENDED_VALUES)
        if not block_private:
            restricted -= PRIVATE_VALUES
            intended |= PRIVATE_VALUES
        return cls(
            vehicle="bicycle",
            restriction_keys=BIKE_RESTRICTION_KEYS,
            restricted_values=frozenset(restricted),
            intended_values=frozenset(intended),
            allowed_highways=frozenset(BIKE_HIGHWAYS),
            block_fords=bool(block_fords),
        )

    @classmethod
    def from_options(cls, options: str | None) -> "AccessProfile":
        '''
        Monta o perfil de bicicleta a partir de uma string de opções no formato
        "block_fords=true|block_private=false".
        '''
        return cls.for_bicycle(**_parse_options(options))
