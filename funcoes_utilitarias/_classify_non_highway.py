from typing import Callable
from classes_de_elementos.access_profile import AccessProfile
from classes_de_elementos.tag_set import TagSet
from classes_de_elementos.way_access import RestrictionDecision, WayAccess
from ._resolve_restriction_hierarchy import _resolve_restriction_hierarchy

def _classify_non_highway(tags: TagSet, profile: AccessProfile,
                          is_ferry: Callable[[TagSet], bool]) -> WayAccess:
    '''
    Classifica uma way sem tag 'highway' (plataformas, píeres, balsas, ...).

    Parâmetros
    ----------
    tags     : TagSet
    profile  : AccessProfile
    is_ferry : predicado externo de balsa

    Retorno
    -------
    WayAccess

    Regras
    ------
    - railway=platform ou man_made=pier -> ROUTABLE.
    - Negação explícita -> SKIP.
    - Permissão explícita -> FERRY se for balsa, senão ROUTABLE.
    - Sem regra explícita: balsa vira FERRY, exceto com foot=yes
      (balsa só de pedestres); qualquer outra way -> SKIP.
    '''

    if tags.has_tag("railway", "platform") or tags.has_tag("man_made", "pier"):
        return WayAccess.ROUTABLE

    decision = _resolve_restriction_hierarchy(tags, profile)
    if decision is RestrictionDecision.DENY:
        return WayAccess.SKIP

    ferry = is_ferry(tags)
    if decision is RestrictionDecision.ALLOW:
        return WayAccess.FERRY if ferry else WayAccess.ROUTABLE

    if ferry and not tags.has_tag("foot", "yes"):
        return WayAccess.FERRY
    return WayAccess.SKIP
