from wikibase_claims.models.values import StringValue
from wikibase_claims.tree import Node
from .common import scalar_value


def parse_string_value(datavalue: Node) -> StringValue:
    return StringValue(value=scalar_value(datavalue))
