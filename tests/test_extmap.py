import pytest
from sdper.attribute import ATTRIBUTE_KEY, END_LINE, parse_attribute_line
from sdper.extmap import TRANSPORT_CC_URI, Direction, ExtensionId, ExtMap
from sdper.exceptions import (
    ExtMapError,
    ExtMapUriError,
    InvalidDirectionError,
    InvalidExtensionIdError,
    MalformedExtMapError,
    MissingTerminatorError,
)

EXAMPLE_ATTR_EXTMAP1 = "extmap:1 http://example.com/082005/ext.htm#ttime"
EXAMPLE_ATTR_EXTMAP2 = "extmap:2/sendrecv http://example.com/082005/ext.htm#xmeta short"
FAILING_ATTR_EXTMAP1 = "extmap:257/sendrecv http://example.com/082005/ext.htm#xmeta short"
FAILING_ATTR_EXTMAP2 = "extmap:2/blorg http://example.com/082005/ext.htm#xmeta short"


def wire(text):
    return f"{ATTRIBUTE_KEY}{text}{END_LINE}"


def test_extmap_without_direction():
    e = ExtMap.unmarshal(EXAMPLE_ATTR_EXTMAP1)
    assert e.value == 1
    assert e.direction is Direction.UNSPECIFIED
    assert e.uri == "http://example.com/082005/ext.htm#ttime"
    assert e.extension_attributes is None
    assert e.marshal() == EXAMPLE_ATTR_EXTMAP1

def test_extmap_with_direction_and_attributes():
    e = ExtMap.unmarshal(EXAMPLE_ATTR_EXTMAP2)
    assert e.value == 2
    assert e.direction is Direction.SENDRECV
    assert e.uri == "http://example.com/082005/ext.htm#xmeta"
    assert e.extension_attributes == "short"
    assert e.marshal() == EXAMPLE_ATTR_EXTMAP2

@pytest.mark.parametrize("text", [
    EXAMPLE_ATTR_EXTMAP1,
    EXAMPLE_ATTR_EXTMAP2,
    "extmap:14/recvonly urn:ietf:params:rtp-hdrext:ssrc-audio-level vad=on level=3",
    "extmap:255/inactive urn:3gpp:video-orientation",
    "extmap:7",
])
def test_extmap_round_trip(text):
    assert ExtMap.unmarshal(text).marshal() == text
    assert ExtMap.from_line(wire(text)).to_line() == wire(text)

def test_extmap_id_out_of_range():
    with pytest.raises(InvalidExtensionIdError):
        ExtMap.from_line(wire(FAILING_ATTR_EXTMAP1))
    with pytest.raises(InvalidExtensionIdError):
        ExtMap.unmarshal(FAILING_ATTR_EXTMAP1)

def test_extmap_unknown_direction():
    with pytest.raises(InvalidDirectionError):
        ExtMap.from_line(wire(FAILING_ATTR_EXTMAP2))

@pytest.mark.parametrize("text, error", [
    ("extmap:0 urn:x", InvalidExtensionIdError),
    ("extmap:abc urn:x", InvalidExtensionIdError),
    ("extmap:01 urn:x", InvalidExtensionIdError),
    ("extmap:-1 urn:x", InvalidExtensionIdError),
    ("extmap:2/SendRecv urn:x", InvalidDirectionError),
    ("extmap:2/ urn:x", InvalidDirectionError),
    ("extmap:2 not-a-uri", ExtMapUriError),
    ("extmap:2 ", ExtMapUriError),
    ("extmap:", MalformedExtMapError),
    ("extmap", MalformedExtMapError),
    ("rtpmap:2 urn:x", MalformedExtMapError),
])
def test_extmap_rejects(text, error):
    with pytest.raises(error):
        ExtMap.unmarshal(text)

def test_extmap_errors_share_base():
    with pytest.raises(ExtMapError):
        ExtMap.unmarshal(FAILING_ATTR_EXTMAP2)

def test_extmap_line_requires_terminator():
    with pytest.raises(MissingTerminatorError):
        ExtMap.from_line(ATTRIBUTE_KEY + EXAMPLE_ATTR_EXTMAP1)

def test_transport_cc_extmap():
    e = ExtMap(value=3, uri=TRANSPORT_CC_URI, direction=Direction.UNSPECIFIED, extension_attributes=None)
    s = e.marshal()
    assert s != "3 " + TRANSPORT_CC_URI
    assert s == "extmap:3 http://www.ietf.org/id/draft-holmer-rmcat-transport-wide-cc-extensions-01"

def test_extmap_absent_direction_omits_slash():
    e = ExtMap(5, uri="urn:ietf:params:rtp-hdrext:toffset")
    assert "/" not in e.marshal().split(" ")[0]
    assert e.marshal() == "extmap:5 urn:ietf:params:rtp-hdrext:toffset"

def test_extmap_constructed_round_trip():
    e = ExtMap(ExtensionId(9), Direction.SENDONLY, "urn:ietf:params:rtp-hdrext:sdes:mid", "a  b")
    assert ExtMap.unmarshal(e.marshal()) == e

def test_extmap_construction_validates():
    with pytest.raises(InvalidExtensionIdError):
        ExtMap(256)
    with pytest.raises(InvalidDirectionError):
        ExtMap(1, direction="both")
    with pytest.raises(ExtMapUriError):
        ExtMap(1, uri="relative/path")
    with pytest.raises(MalformedExtMapError):
        ExtMap(1, extension_attributes="orphan")

def test_extmap_direction_from_string():
    assert ExtMap(1, direction="recvonly").direction is Direction.RECVONLY
    assert ExtMap(1, direction=None).direction is Direction.UNSPECIFIED

def test_parse_attribute_line_dispatches_extmap():
    attr = parse_attribute_line(wire(EXAMPLE_ATTR_EXTMAP2))
    assert isinstance(attr, ExtMap)
    assert attr.direction is Direction.SENDRECV

def test_extmap_is_immutable():
    e = ExtMap.unmarshal(EXAMPLE_ATTR_EXTMAP1)
    with pytest.raises(AttributeError):
        e.value = 4

@pytest.mark.parametrize("text", [
    "extmap:1\thttp://example.com/x",
    "extmap:1 http://example.com/x\tshort",
])
def test_extmap_tab_separator(text):
    with pytest.raises(MalformedExtMapError):
        ExtMap.unmarshal(text)

def test_extmap_attributes_keep_tabs():
    text = "extmap:1 urn:x a\tb"
    assert ExtMap.unmarshal(text).extension_attributes == "a\tb"
    assert ExtMap.unmarshal(text).marshal() == text

def test_extmap_attributes_must_be_text():
    with pytest.raises(MalformedExtMapError):
        ExtMap(1, uri="urn:x", extension_attributes=5)
