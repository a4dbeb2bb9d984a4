import pytest

from wikibase_claims.exceptions import EditRejected, UnexpectedNodeShape
from wikibase_claims.parsers import parse_edit_response
from wikibase_claims.tree import parse_xml


def test_created_claim_id():
    """Test created claim id"""
    node = parse_xml(
        '<api success="1"><pageinfo lastrevid="123"/>'
        '<claim id="Q42$F078E5B3-F9A8-480E-B7AC-D97778CBBEF9" rank="normal" type="statement"/></api>'
    )

    assert parse_edit_response(node) == "Q42$F078E5B3-F9A8-480E-B7AC-D97778CBBEF9"


def test_created_entity_id():
    """Test created entity id"""
    node = parse_xml('<api success="1"><entity id="Q123" type="item"/></api>')

    assert parse_edit_response(node) == "Q123"


def test_success_without_payload():
    """Test success without payload"""
    node = parse_xml('<api success="1"><claims><claim id="Q1$x"/></claims></api>')

    assert parse_edit_response(node) is None


def test_error_info_is_raised():
    """Test error info is raised"""
    node = parse_xml('<api><error code="modification-failed" info="Malformed input: bogus"/></api>')

    with pytest.raises(EditRejected, match="Malformed input: bogus"):
        parse_edit_response(node)


def test_response_without_flag_or_error():
    """Test response without flag or error"""
    with pytest.raises(UnexpectedNodeShape):
        parse_edit_response(parse_xml("<api/>"))


def test_response_must_be_api_node():
    """Test response must be api node"""
    with pytest.raises(UnexpectedNodeShape):
        parse_edit_response(parse_xml('<error info="x"/>'))
