import pytest

from gfa2.core import models
from gfa2.core.errors import (FieldCountError, InvalidOrientation,
                              MissingOrientation, UnknownRecordType)
from gfa2.core.gfa1 import GFA1Document, Link, Segment
from gfa2.core.identifiers import (NUMERIC_IDENTIFIERS, NUMERIC_WITH_TAGS,
                                   TEXT_WITHOUT_TAGS, Orientation, Reference,
                                   fold_ascii)
from gfa2.parsers.gfa1_parser import GFA1Parser

from conftest import SIMPLE_GFA1


@pytest.fixture
def parser():
    return GFA1Parser()


def test_parse_gfa1(parser):
    doc = parser.parse(SIMPLE_GFA1)

    assert isinstance(doc, GFA1Document)
    assert doc.counts() == {"headers": 1, "segments": 3, "links": 3, "containments": 1, "paths": 1}
    assert doc.headers[0].version_number == "1.0"
    assert doc.segments[0] == Segment("11", "ACCTT")
    assert doc.links[0] == Link("11", Orientation.FORWARD, "12", Orientation.BACKWARD, "4M")


def test_link_references(parser):
    link = parser.parse(SIMPLE_GFA1).links[1]
    assert link.source == Reference("12", Orientation.BACKWARD)
    assert link.target == Reference("13", Orientation.FORWARD)


def test_containment(parser):
    containment = parser.parse(SIMPLE_GFA1).containments[0]
    assert containment.container_name == "11"
    assert containment.contained_orient is Orientation.FORWARD
    assert containment.pos == "2"
    assert containment.overlap == "3M"


def test_path_segments(parser):
    path = parser.parse(SIMPLE_GFA1).paths[0]
    assert path.path_name == "14"
    assert path.overlaps == "4M,5M"
    assert list(path.iter_segments()) == [
        Reference("11", Orientation.FORWARD),
        Reference("12", Orientation.BACKWARD),
        Reference("13", Orientation.FORWARD),
    ]
    assert [r.id for r in path.iter_segments(NUMERIC_IDENTIFIERS)] == [539, 540, 541]


def test_numeric_gfa1(parser):
    doc = GFA1Parser(NUMERIC_WITH_TAGS).parse(SIMPLE_GFA1)
    assert doc.segments[0].name == fold_ascii("11")
    assert doc.links[0].to_segment == fold_ascii("12")
    # Path names are not identifiers of segments
    assert doc.paths[0].path_name == "14"


def test_gfa1_without_tags():
    doc = GFA1Parser(TEXT_WITHOUT_TAGS).parse("S\t1\tACGT\tLN:i:4\n")
    assert doc.segments[0].tags == ()


def test_gfa1_round_trip(parser):
    doc = parser.parse(SIMPLE_GFA1)
    assert doc.to_gfa() == SIMPLE_GFA1
    assert parser.parse(doc.to_gfa()) == doc


@pytest.mark.parametrize("line, expected", [
    ("S\t1", 3),
    ("L\t1\t+\t2\t-", 6),
    ("C\t1\t+\t2\t-\t0", 7),
    ("P\tp1\t1+,2-", 4),
])
def test_gfa1_too_few_fields(parser, line, expected):
    with pytest.raises(FieldCountError) as excinfo:
        parser.parse(line)
    assert excinfo.value.expected == expected


def test_gfa1_bad_orientation(parser):
    with pytest.raises(InvalidOrientation):
        parser.parse("L\t1\tx\t2\t-\t0M\n")
    with pytest.raises(MissingOrientation):
        parser.parse("L\t1\t\t2\t-\t0M\n")


def test_gfa2_records_are_unknown_in_gfa1(parser):
    with pytest.raises(UnknownRecordType):
        parser.parse("E\t*\t1+\t2+\t0\t1\t0\t1\t*\n")


def test_headers_are_shared_with_gfa2(parser):
    header = parser.parse(SIMPLE_GFA1).headers[0]
    assert type(header) is models.Header
    assert header == models.Header("VN:Z:1.0")


def test_segment_id_is_its_name():
    assert Segment("11", "ACCTT").id == "11"
    assert GFA1Parser(NUMERIC_WITH_TAGS).parse_line("S\t11\tACCTT").id == 539
