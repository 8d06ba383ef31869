from typing import Tuple
from classes_de_elementos.access_profile import AccessProfile
from classes_de_elementos.tag_set import TagSet
from constantes.constantes import ONEWAYS, REVERSE_ONEWAY

def _resolve_directions(tags: TagSet, is_roundabout: bool, profile: AccessProfile) -> Tuple[bool, bool]:
    '''
    Calcula o acesso por sentido (ida, volta) de uma way já classificada como
    ROUTABLE, considerando mão única e as exceções para o veículo do perfil.

    Parâmetros
    ----------
    tags          : TagSet (tags da way)
    is_roundabout : bool (flag de rotatória já gravado na aresta)
    profile       : AccessProfile

    Retorno
    -------
    Tuple[bool, bool] : (forward, backward); nunca (False, False)

    Observações
    -----------
    Duas passadas: primeiro a mão única "de base" (oneway genérico, oneway do
    veículo, oneway das ciclofaixas laterais, negações por sentido); depois as
    exceções que reabrem o sentido contrário para o veículo (oneway:bicycle=no,
    cycleway:both, ciclofaixa em contramão, cycleway:<lado>:oneway=no).
    A volta é escolhida quando algum sinal de sentido reverso disparou.
    '''

    restricted = profile.restricted_values
    intended = profile.intended_values
    forward_key = profile.vehicle_forward_key
    backward_key = profile.vehicle_backward_key
    oneway_key = profile.vehicle_oneway_key

    forward_allowed = tags.has_tag(forward_key, intended)
    backward_allowed = tags.has_tag(backward_key, intended)
    reverse = tags.has_tag("oneway", REVERSE_ONEWAY)

    is_oneway = (
        (tags.has_tag("oneway", ONEWAYS) and not reverse and not backward_allowed)
        or (reverse and not forward_allowed)
        or tags.has_tag(oneway_key, ONEWAYS)
        or any(tags.has_tag(key, ONEWAYS) for key in profile.side_oneway_keys)
        or (tags.has_tag("vehicle:backward", restricted) and not forward_allowed)
        or (tags.has_tag("vehicle:forward", restricted) and not backward_allowed)
        or tags.has_tag(forward_key, restricted)
        or tags.has_tag(backward_key, restricted)
    )

    reopened = (
        tags.has_tag(oneway_key, "no")
        or (tags.has_tag(profile.both_sides_key) and not tags.has_tag(profile.both_sides_key, "no"))
        or any(tags.has_tag(key, profile.opposite_lane_values) for key in profile.opposite_lane_keys)
        or any(tags.has_tag(key, "no") for key in profile.side_oneway_keys)
    )

    if (is_oneway or is_roundabout) and not reopened:
        backward = (
            reverse
            or tags.has_tag(oneway_key, REVERSE_ONEWAY)
            or any(tags.has_tag(key, REVERSE_ONEWAY) for key in profile.side_oneway_keys)
            or tags.has_tag("vehicle:forward", restricted)
            or tags.has_tag(forward_key, restricted)
        )
        directions = (not backward, backward)
    else:
        directions = (True, True)

    assert directions[0] or directions[1], "way ROUTABLE sem nenhum sentido liberado"
    return directions
