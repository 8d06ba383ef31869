from typing import Callable
from classes_de_elementos.access_profile import AccessProfile
from classes_de_elementos.tag_set import TagSet
from classes_de_elementos.way_access import RestrictionDecision, WayAccess
from constantes.constantes import DISMOUNT_VALUE
from ._classify_non_highway import _classify_non_highway
from ._resolve_restriction_hierarchy import _resolve_restriction_hierarchy

def _classify_way(tags: TagSet, profile: AccessProfile,
                  is_ferry: Callable[[TagSet], bool]) -> WayAccess:
    '''
    Decide se a way entra no grafo para o veículo do perfil.

    Parâmetros
    ----------
    tags     : TagSet (tags da way)
    profile  : AccessProfile
    is_ferry : predicado externo de balsa (usado só sem 'highway')

    Retorno
    -------
    WayAccess : ROUTABLE, FERRY ou SKIP

    Observações
    -----------
    A ordem das verificações importa: exclusões estruturais (tipo de highway,
    motorway, motorroad, vau) vêm antes da hierarquia de restrições, e só uma
    permissão explícita na tag do veículo (ex.: bicycle=yes) as dispensa.
    '''

    highway = tags.get("highway")
    if highway is None:
        return _classify_non_highway(tags, profile, is_ferry)

    if highway not in profile.allowed_highways:
        return WayAccess.SKIP

    vehicle_value = tags.get(profile.vehicle)
    # usável empurrando a bicicleta; a velocidade reduzida é definida em outro lugar
    if vehicle_value == DISMOUNT_VALUE:
        return WayAccess.ROUTABLE

    if vehicle_value not in profile.intended_values:
        if highway in profile.motorway_highways:
            return WayAccess.SKIP
        if tags.has_tag("motorroad", "yes"):
            return WayAccess.SKIP
        if profile.block_fords and (highway == "ford" or tags.has_tag("ford")):
            return WayAccess.SKIP

    decision = _resolve_restriction_hierarchy(tags, profile)
    if decision is RestrictionDecision.DENY:
        return WayAccess.SKIP
    return WayAccess.ROUTABLE
