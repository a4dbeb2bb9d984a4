from wikibase_claims.models.values import CommonsMediaValue
from wikibase_claims.tree import Node
from .common import scalar_value


def parse_commons_media_value(datavalue: Node) -> CommonsMediaValue:
    return CommonsMediaValue(value=scalar_value(datavalue))
