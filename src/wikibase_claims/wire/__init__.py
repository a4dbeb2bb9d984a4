from .encoder import (
    claim_to_wire,
    encode_claim,
    encode_reference,
    encode_snak,
    encode_value,
    reference_to_wire,
    snak_to_wire,
    value_to_wire,
)

__all__ = [
    "claim_to_wire",
    "encode_claim",
    "encode_reference",
    "encode_snak",
    "encode_value",
    "reference_to_wire",
    "snak_to_wire",
    "value_to_wire",
]
