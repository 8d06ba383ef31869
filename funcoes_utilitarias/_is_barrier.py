from classes_de_elementos.access_profile import AccessProfile
from classes_de_elementos.tag_set import TagSet
from classes_de_elementos.way_access import RestrictionDecision
from ._resolve_restriction_hierarchy import _resolve_restriction_hierarchy

def _is_barrier(node_tags: TagSet, profile: AccessProfile) -> bool:
    '''
    Informa se um nó bloqueia a passagem do veículo do perfil.

    Parâmetros
    ----------
    node_tags : TagSet (tags do nó)
    profile   : AccessProfile

    Retorno
    -------
    bool : True se o nó for uma barreira

    Regras
    ------
    - Negação explícita na hierarquia -> barreira; permissão explícita -> livre.
    - locked=yes -> barreira.
    - barrier=<valor bloqueante do perfil> -> barreira (barrier=gate sozinho é livre).
    - ford=yes -> barreira apenas com block_fords.
    '''

    decision = _resolve_restriction_hierarchy(node_tags, profile)
    if decision is RestrictionDecision.DENY:
        return True
    if decision is RestrictionDecision.ALLOW:
        return False
    if node_tags.has_tag("locked", "yes"):
        return True
    if node_tags.has_tag("barrier", profile.barriers):
        return True
    return profile.block_fords and node_tags.has_tag("ford", "yes")
