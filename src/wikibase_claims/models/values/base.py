from typing import ClassVar

from wikibase_claims.models.base import WikibaseModel
from wikibase_claims.models.datatypes import Datatype


class Value(WikibaseModel):
    """Base of the closed set of value variants.

    ``datatype`` names the snak datatype a variant belongs to and
    ``datavalue_type`` the ``datavalue@type`` tag it travels under.
    """

    kind: str

    datatype: ClassVar[Datatype]
    datavalue_type: ClassVar[str]
