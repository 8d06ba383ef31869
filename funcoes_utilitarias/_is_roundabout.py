from classes_de_elementos.tag_set import TagSet
from constantes.constantes import ROUNDABOUT_JUNCTIONS

def _is_roundabout(tags: TagSet) -> bool:
    '''
    Informa se a way faz parte de uma rotatória (junction=roundabout|circular).
    '''
    return tags.has_tag("junction", ROUNDABOUT_JUNCTIONS)
