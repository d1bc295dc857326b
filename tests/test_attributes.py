from lxml import etree

from opendriveparser import attributes as attr


def _node(xml):
    return etree.fromstring(xml)


def test_absent_attribute_yields_default():
    node = _node('<lane/>')
    assert attr.as_int(node, "id") == 0
    assert attr.as_float(node, "s") == 0.0
    assert attr.as_str(node, "type") == ""
    assert attr.as_str(node, "type", "none") == "none"
    assert attr.as_bool(node, "level") is False


def test_absent_node_yields_default():
    assert attr.as_int(None, "id", 7) == 7
    assert attr.as_float(None, "max") == 0.0
    assert attr.as_str(None, "unit") == ""
    assert attr.as_bool(None, "level", True) is True


def test_numeric_prefix_is_read():
    node = _node('<road id=" -12abc" length="3.5m" s="1e2" t=".25"/>')
    assert attr.as_int(node, "id") == -12
    assert attr.as_float(node, "length") == 3.5
    assert attr.as_float(node, "s") == 100.0
    assert attr.as_float(node, "t") == 0.25


def test_int_of_decimal_text_truncates_at_the_point():
    node = _node('<road id="4.9"/>')
    assert attr.as_int(node, "id") == 4


def test_malformed_numbers_coerce_to_zero():
    node = _node('<road id="abc" length="" junction="--1"/>')
    assert attr.as_int(node, "id") == 0
    assert attr.as_float(node, "length") == 0.0
    assert attr.as_int(node, "junction") == 0


def test_bool_first_character_rule():
    node = _node('<l a="true" b="1" c="Yes" d="false" e="0" f="no" g=""/>')
    assert attr.as_bool(node, "a") is True
    assert attr.as_bool(node, "b") is True
    assert attr.as_bool(node, "c") is True
    assert attr.as_bool(node, "d") is False
    assert attr.as_bool(node, "e") is False
    assert attr.as_bool(node, "f") is False
    assert attr.as_bool(node, "g") is False


def test_children_keep_document_order_and_skip_comments():
    node = _node('<lanes><laneOffset s="1"/><!-- note --><laneSection/>'
                 '<laneOffset s="2"/></lanes>')
    offsets = attr.children(node, "laneOffset")
    assert [o.get("s") for o in offsets] == ["1", "2"]
    assert attr.child(node, "laneSection") is not None
    assert attr.child(node, "left") is None
    assert attr.children(None, "lane") == []
    assert attr.child(None, "lane") is None


def test_children_ignore_namespaces():
    node = _node('<OpenDRIVE xmlns="http://example.com/odr"><road id="1"/></OpenDRIVE>')
    roads = attr.children(node, "road")
    assert len(roads) == 1
    assert attr.strip_ns(node.tag) == "OpenDRIVE"
