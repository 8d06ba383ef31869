from classes_de_elementos.tag_set import TagSet
from constantes.constantes import FERRY_ROUTES

def _is_ferry(tags: TagSet) -> bool:
    '''
    Informa se a way é uma rota de balsa (route=ferry ou route=shuttle_train),
    desde que não esteja negada por ferry=no / shuttle_train=no.
    '''
    return (
        tags.has_tag("route", FERRY_ROUTES)
        and not tags.has_tag("ferry", "no")
        and not tags.has_tag("shuttle_train", "no")
    )
