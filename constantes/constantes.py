# Constantes: vocabulário de tags usado na classificação de acesso

# Hierarquia de chaves de restrição para bicicletas (mais específica -> menos específica)
# referência: https://wiki.openstreetmap.org/wiki/Key:access#Land-based_transportation
BIKE_RESTRICTION_KEYS = ("bicycle", "vehicle", "access")

# Valores que negam o acesso explicitamente
RESTRICTED_VALUES = {
    "no", "restricted", "military", "emergency", "private", "permit",
    "agricultural", "forestry", "delivery",
}

# Valores que concedem o acesso explicitamente
INTENDED_VALUES = {"yes", "designated", "official", "permissive", "destination"}

# Valores liberados quando block_private=False
PRIVATE_VALUES = {"private", "permit"}

# Tipos de highway utilizáveis por bicicleta (independente de tags de acesso)
BIKE_HIGHWAYS = {
    "living_street", "steps", "cycleway", "path", "footway", "platform",
    "pedestrian", "track", "service", "residential", "unclassified", "road", "bridleway",
    "motorway", "motorway_link", "trunk", "trunk_link",
    "primary", "primary_link", "secondary", "secondary_link", "tertiary", "tertiary_link",
}

# Só entram com bicycle=<valor pretendido>
MOTORWAY_HIGHWAYS = {"motorway", "motorway_link"}

# Valores de barrier que bloqueiam a passagem por padrão
BIKE_BARRIERS = {"fence"}

# Valor especial: via usável empurrando a bicicleta
DISMOUNT_VALUE = "dismount"

# Sentidos de mão única ('-1' = contra a geometria)
ONEWAYS = {"yes", "true", "1", "-1"}
REVERSE_ONEWAY = "-1"

# Ciclofaixas em contramão
OPPOSITE_LANES = {"opposite", "opposite_lane", "opposite_track"}
OPPOSITE_LANE_KEYS = ("cycleway", "cycleway:left", "cycleway:right")
SIDE_ONEWAY_KEYS = ("cycleway:left:oneway", "cycleway:right:oneway")
BOTH_SIDES_KEY = "cycleway:both"

# Balsas
FERRY_ROUTES = {"ferry", "shuttle_train"}

# Rotatórias (usado para preencher o flag quando ninguém mais o faz)
ROUNDABOUT_JUNCTIONS = {"roundabout", "circular"}

# Separador de múltiplos valores em uma mesma tag
MULTI_VALUE_DELIMITER = ";"

# Tag artificial que marca arestas sintetizadas para barreiras pontuais
BARRIER_EDGE_TAG = "barrier_edge"

# Nomes dos valores booleanos gravados por aresta
ACCESS_KEY = "bike_access"
ROUNDABOUT_KEY = "roundabout"

# Opções de configuração aceitas (e seus padrões)
DEFAULT_OPTIONS = {
    "block_fords": False,
    "block_private": True,
}

TRUE_OPTION_VALUES = {"true", "1", "yes", "on"}
FALSE_OPTION_VALUES = {"false", "0", "no", "off"}
