from classes_de_elementos.access_profile import AccessProfile
from classes_de_elementos.tag_set import TagSet
from classes_de_elementos.way_access import RestrictionDecision

def _resolve_restriction_hierarchy(tags: TagSet, profile: AccessProfile) -> RestrictionDecision:
    '''
    Percorre as chaves de restrição do perfil (da mais específica para a menos
    específica) e informa se alguma negação ou permissão explícita se aplica.

    Parâmetros
    ----------
    tags    : TagSet (tags da way ou do nó)
    profile : AccessProfile

    Retorno
    -------
    RestrictionDecision : DENY, ALLOW ou NO_MATCH

    Observações
    -----------
    - Só a PRIMEIRA chave presente é avaliada. Se nenhum sub-valor dela for
      negado ou pretendido, o resultado é NO_MATCH e as chaves menos
      específicas NÃO são consultadas. Apenas chaves ausentes passam adiante.
    - Dentro de uma mesma chave, negação vence permissão ('yes;no' -> DENY).
    - Sub-valores vazios não contam; uma chave sem sub-valor útil é tratada
      como ausente.
    '''

    for key in profile.restriction_keys:
        values = tags.values_of(key)
        if not values:
            continue
        if any(value in profile.restricted_values for value in values):
            return RestrictionDecision.DENY
        if any(value in profile.intended_values for value in values):
            return RestrictionDecision.ALLOW
        return RestrictionDecision.NO_MATCH
    return RestrictionDecision.NO_MATCH
