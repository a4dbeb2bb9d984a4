from wikibase_claims.models.values import URLValue
from wikibase_claims.tree import Node
from .common import scalar_value


def parse_url_value(datavalue: Node) -> URLValue:
    return URLValue(value=scalar_value(datavalue))
