from nodesort.links.classify import classify_text
from nodesort.links.constants import INVALID, REMARK_MISSING, RULE_CONFLICT, VALID_RULED, VALID_UNRULED
from nodesort.links.models import ParsedRemark
from nodesort.ordering.compare import sort_nodes
from tests.link_builders import vless_link, vmess_link


def test_vmess_ruled_remark():
    [node] = classify_text(vmess_link({"ps": "US-East-Tier1"}))
    assert node.status == VALID_RULED
    assert node.parsed == ParsedRemark(country="US", region="East", tier=1, sid=None, sn=None, flag=None)


def test_vless_unruled_remark():
    [node] = classify_text("vless://host:443?x=1#My%20Node")
    assert node.status == VALID_UNRULED
    assert node.remark == "My Node"


def test_empty_ss_link_is_invalid():
    [node] = classify_text("ss://")
    assert node.status == INVALID
    assert node.error_kind == REMARK_MISSING


def test_sn_without_sid_is_rule_conflict():
    [node] = classify_text(vless_link("US-East-Tier1-sn:3"))
    assert node.status == INVALID
    assert node.error_kind == RULE_CONFLICT


def test_flag_d_sorts_before_sid():
    nodes = classify_text("\n".join([vless_link("A-B-Tier1-sid:x"), vless_link("A-B-Tier1-flag:D")]))
    assert [n.remark for n in sort_nodes(nodes)] == ["A-B-Tier1-flag:D", "A-B-Tier1-sid:x"]


def test_lower_sn_sorts_first_within_sid():
    nodes = classify_text("\n".join([vless_link("A-B-Tier1-sid:alpha-sn:2"), vless_link("A-B-Tier1-sid:alpha-sn:1")]))
    assert [n.parsed.sn for n in sort_nodes(nodes)] == [1, 2]
