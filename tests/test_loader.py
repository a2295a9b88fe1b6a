import pytest

from pond.cells import Terrain
from pond.errors import PondFormatError
from pond.hexgrid import Hex
from pond.loader import load_pond, parse_pond


def test_ids_terrain_and_start():
    pond = parse_pond(
        "# comment\n"
        "S.2\n"
        "\n"
        "LRM\n"
        "AE3\n"
    )
    assert len(pond) == 9
    assert pond.start_id == 0
    assert [c.terrain for c in pond] == [
        Terrain.WATER, Terrain.WATER, Terrain.WATER,
        Terrain.LILY_PAD, Terrain.REEDS, Terrain.MUD,
        Terrain.ALLIGATOR, Terrain.WATER, Terrain.WATER,
    ]
    assert pond.get_cell(2).flies == 2
    assert pond.get_cell(1).flies is None
    assert pond.get_cell(7).is_end
    assert pond.get_cell(8).flies == 3


def test_odd_rows_are_shifted_right():
    pond = parse_pond("S.\n..\n..\n")
    # row 0: ids 0,1 ; row 1: ids 2,3 ; row 2: ids 4,5
    assert pond.get_cell(2).hex == Hex(0, 1)
    assert pond.get_cell(4).hex == Hex(-1, 2)

    c2 = pond.get_cell(2)
    assert sorted(n.cell_id for n in c2.neighbors()) == [0, 1, 3, 4, 5]
    c0 = pond.get_cell(0)
    assert sorted(n.cell_id for n in c0.neighbors()) == [1, 2]


def test_neighbour_links_are_symmetric():
    pond = parse_pond("S.L\n.R.\nM2E\n")
    for cell in pond:
        for d in range(6):
            n = cell.neighbor(d)
            if n is not None:
                assert n.neighbor((d + 3) % 6) is cell


def test_gaps_leave_holes():
    pond = parse_pond("S -.\n")
    assert len(pond) == 2
    assert pond.get_cell(1).hex == Hex(3, 0)
    assert pond.start.neighbors() == []


def test_lily_pad_start():
    pond = parse_pond("..P\n")
    assert pond.start_id == 2
    assert pond.start.is_lily_pad


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("", "no cells"),
        ("# only a comment\n", "no cells"),
        ("...\n", "no start"),
        ("S.S\n", "second start"),
        ("S.x\n", "unknown cell character"),
    ],
)
def test_bad_descriptions(text, fragment):
    with pytest.raises(PondFormatError, match=fragment):
        parse_pond(text)


def test_error_carries_line_number():
    with pytest.raises(PondFormatError) as exc:
        parse_pond("S..\n..?\n")
    assert exc.value.line_no == 2
    assert str(exc.value).startswith("line 2:")


def test_load_pond_from_file(tmp_path):
    f = tmp_path / "pond.txt"
    f.write_text("P.E\n", encoding="utf-8")
    pond = load_pond(f)
    assert len(pond) == 3


def test_missing_file_is_a_format_error(tmp_path):
    with pytest.raises(PondFormatError, match="cannot read"):
        load_pond(tmp_path / "nope.txt")


def test_non_utf8_file_is_a_format_error(tmp_path):
    f = tmp_path / "pond.txt"
    f.write_bytes(b"S\xff\xfeE\n")
    with pytest.raises(PondFormatError, match="not UTF-8"):
        load_pond(f)


@pytest.mark.parametrize("text", ["s.E\n", "S.e\n", "Sl.E\n", "p.E\n"])
def test_lowercase_cell_characters_are_rejected(text):
    with pytest.raises(PondFormatError, match="unknown cell character"):
        parse_pond(text)
