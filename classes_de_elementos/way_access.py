from enum import Enum

class WayAccess(Enum):
    '''
    Resultado da classificação de uma way para o veículo do perfil.

    - ROUTABLE : entra no grafo como via comum
    - FERRY    : entra no grafo como travessia de balsa (sempre bidirecional)
    - SKIP     : não entra no grafo
    '''
    ROUTABLE = "routable"
    FERRY = "ferry"
    SKIP = "skip"

    def can_skip(self) -> bool:
        return self is WayAccess.SKIP

    def is_ferry(self) -> bool:
        return self is WayAccess.FERRY

    def is_way(self) -> bool:
        return self is WayAccess.ROUTABLE


class RestrictionDecision(Enum):
    '''Resultado da hierarquia de restrições: negação, permissão ou nenhuma regra explícita.'''
    DENY = "deny"
    ALLOW = "allow"
    NO_MATCH = "no_match"
