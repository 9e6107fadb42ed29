from pathlib import Path

import pytest

from solong.gamemap import (
    GameMap,
    MapError,
    Tile,
    has_ber_extension,
    load_map,
    parse_map,
    read_map_text,
)

VALID = "1111111\n1P0C0E1\n1111111\n"


def test_parse_valid_map_dimensions():
    game_map = parse_map(VALID)
    rows = VALID.split()
    assert game_map.height == len(rows)
    assert game_map.width == len(rows[0])


def test_parse_valid_map_counts():
    game_map = parse_map(VALID)
    assert game_map.count(Tile.PLAYER) == 1
    assert game_map.count(Tile.EXIT) == 1
    assert game_map.count(Tile.COLLECTIBLE) == 1


def test_find_returns_position_of_tile():
    game_map = parse_map(VALID)
    for tile in (Tile.PLAYER, Tile.EXIT, Tile.COLLECTIBLE):
        assert game_map[game_map.find(tile)] == tile


def test_find_missing_tile_is_none():
    game_map = parse_map("11111\n1PCE1\n11111")
    assert game_map.find(Tile.SPACE) is None


def test_str_round_trip():
    game_map = parse_map(VALID)
    assert str(game_map) == VALID.rstrip("\n")
    assert parse_map(str(game_map)) == game_map


def test_copy_is_independent():
    game_map = parse_map(VALID)
    duplicate = game_map.copy()
    assert duplicate == game_map
    position = duplicate.find(Tile.COLLECTIBLE)
    duplicate[position] = Tile.SPACE
    assert game_map[position] == Tile.COLLECTIBLE
    assert duplicate.count(Tile.COLLECTIBLE) == game_map.count(Tile.COLLECTIBLE) - 1


def test_tiles_cover_every_cell():
    game_map = parse_map(VALID)
    cells = list(game_map.tiles())
    assert len(cells) == game_map.width * game_map.height
    assert all(game_map[pos] == tile for pos, tile in cells)


def test_blank_lines_are_ignored():
    spaced = "1111111\n\n1P0C0E1\n\n\n1111111\n"
    assert parse_map(spaced) == parse_map(VALID)


@pytest.mark.parametrize("text", ["", "\n", "\n\n\n"])
def test_empty_map_text(text):
    with pytest.raises(MapError, match="Wrong lecture map"):
        parse_map(text)


def test_not_rectangle():
    with pytest.raises(MapError, match="Map must be a rectangle or a square"):
        parse_map("1111\n1P0C1\n1111")


def test_top_line_not_closed():
    with pytest.raises(MapError, match="Map line not close"):
        parse_map("11011\n1PCE1\n11111")


def test_bottom_line_not_closed():
    with pytest.raises(MapError, match="Map line not close"):
        parse_map("11111\n1PCE1\n11011")


def test_side_not_closed():
    with pytest.raises(MapError, match="Map column not close"):
        parse_map("11111\n0PCE1\n11111")


def test_unknown_symbol():
    with pytest.raises(MapError, match=r"Unknown symbol\(s\) in map"):
        parse_map("111111\n1PCXE1\n111111")


def test_collectible_walled_off_is_not_solvable():
    with pytest.raises(MapError, match="Map is not solvable"):
        parse_map("1111111\n1P0E1C1\n1111111")


def test_exit_walled_off_is_not_solvable():
    with pytest.raises(MapError, match="Map is not solvable"):
        parse_map("1111111\n1PC01E1\n1111111")


def test_no_player_is_not_solvable():
    with pytest.raises(MapError, match="Map is not solvable"):
        parse_map("11111\n10CE1\n11111")


def test_single_wall_row_is_not_solvable():
    with pytest.raises(MapError, match="Map is not solvable"):
        parse_map("11111")


@pytest.mark.parametrize(
    "text",
    [
        "1111111\n1PPCE01\n1111111",
        "11111\n1P0E1\n11111",
        "111111\n1PCEE1\n111111",
    ],
)
def test_wrong_piece_counts(text):
    with pytest.raises(MapError, match="Need 1 Player/Exit and at least 1 Object"):
        parse_map(text)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/level.ber", True),
        (".ber", True),
        ("level.ber.txt", False),
        ("level.BER", False),
        ("level", False),
        ("", False),
    ],
)
def test_has_ber_extension(path, expected):
    assert has_ber_extension(path) is expected


def test_has_ber_extension_accepts_path_objects():
    assert has_ber_extension(Path("a") / "b.ber") is True


def test_load_map_from_file(tmp_path):
    map_file = tmp_path / "level.ber"
    map_file.write_text(VALID)
    assert load_map(map_file) == parse_map(VALID)


def test_load_map_rejects_extension(tmp_path):
    map_file = tmp_path / "level.txt"
    map_file.write_text(VALID)
    with pytest.raises(MapError, match="No correct format map founded"):
        load_map(map_file)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="Failed to open file"):
        load_map(tmp_path / "missing.ber")


def test_read_map_text_empty_file(tmp_path):
    map_file = tmp_path / "empty.ber"
    map_file.write_text("")
    with pytest.raises(MapError, match="Wrong lecture map"):
        read_map_text(map_file)


def test_read_map_text_returns_contents(tmp_path):
    map_file = tmp_path / "level.ber"
    map_file.write_text(VALID)
    assert read_map_text(map_file) == VALID


def test_in_bounds():
    game_map = GameMap([[Tile.WALL, Tile.WALL], [Tile.WALL, Tile.WALL]])
    assert game_map.in_bounds((0, 0))
    assert not game_map.in_bounds((game_map.width, 0))
    assert not game_map.in_bounds((0, -1))