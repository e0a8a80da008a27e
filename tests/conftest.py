import pytest

# The example from the GFA2 format description: already in canonical order
SIMPLE_GFA2 = (
    "H\tVN:Z:2.0\n"
    "S\t11\t5\tACCTT\n"
    "S\t12\t6\tTCAAGG\n"
    "E\t*\t11+\t12-\t1\t5$\t2\t6$\t4M\n"
    "O\t14\t11+ 12- 13+\n"
)

# Every record kind and every tag type, written the way the serializer writes them
FULL_GFA2 = (
    "H\tVN:Z:2.0\tTS:i:15\n"
    "H\tul:Z:https://example.org/graph\n"
    "S\t1\t122\t*\n"
    "S\t3\t29\tTGCTAGCTGACTGTCGATGCTGTGTG\n"
    "S\t5\t130\t*\tRC:i:12\tXH:H:1AE3\n"
    "S\t13\t150\t*\txx:B:i,1,2,3\tzz:B:f,0.5,2.0\n"
    "F\t12\t2-\t0\t78\t0\t78\t*\tid:Z:read1\n"
    "E\t*\t1+\t2+\t3\t8$\t0\t5\t0,2,4\tTS:i:2\n"
    "E\te2\t3-\t5+\t0\t9\t12\t21$\t9M\tXC:A:c\n"
    "G\tg1\t7+\t22+\t10\t30\twh:f:0.5\n"
    "G\tg2\t9-\t11+\t-7\t*\n"
    "O\t14\t11+ 12- 13+\tjs:J:{\"a\":[1,2]}\n"
    "U\t16\t1 3 15 9\n"
)

SIMPLE_GFA1 = (
    "H\tVN:Z:1.0\n"
    "S\t11\tACCTT\n"
    "S\t12\tTCAAGG\n"
    "S\t13\tCTTGATT\n"
    "L\t11\t+\t12\t-\t4M\n"
    "L\t12\t-\t13\t+\t5M\n"
    "L\t11\t+\t13\t+\t3M\n"
    "C\t11\t+\t13\t+\t2\t3M\n"
    "P\t14\t11+,12-,13+\t4M,5M\n"
)


@pytest.fixture
def simple_gfa2_text():
    return SIMPLE_GFA2


@pytest.fixture
def full_gfa2_text():
    return FULL_GFA2


@pytest.fixture
def simple_gfa1_text():
    return SIMPLE_GFA1


@pytest.fixture
def gfa2_file(tmp_path):
    """Writes the full GFA2 example to disk."""
    p = tmp_path / "graph.gfa"
    with open(p, "w") as f:
        f.write(FULL_GFA2)
    return p


@pytest.fixture
def gfa1_file(tmp_path):
    """Writes the GFA1 example to disk."""
    p = tmp_path / "graph_v1.gfa"
    with open(p, "w") as f:
        f.write(SIMPLE_GFA1)
    return p


@pytest.fixture
def malformed_gfa2_file(tmp_path):
    """A GFA2 file whose second line is missing fields."""
    p = tmp_path / "malformed.gfa"
    with open(p, "w") as f:
        f.write("H\tVN:Z:2.0\n")
        f.write("S\t11\t5\n")
        f.write("E\t*\ts1+\ts2+\t10\t10\t0\t0\t*\n")
    return p
