import json

import pytest

import benchmark_generation
import main as cli
from dungeon_config import DungeonConfig
from dungeon_generator import generate_dungeon
from dungeon_models import TileType
from sampling import ScriptedSampler

WIRE_TAGS = {tile_type.value for tile_type in TileType}


def test_main_prints_chain_as_json(capsys):
    cli.main(["--seed", "3", "--rooms", "4"])

    captured = capsys.readouterr()
    rooms = json.loads(captured.out)
    assert 1 <= len(rooms) <= 4
    assert rooms[0]["entrance"] == {"x": 0, "y": 0}
    tags = {tile["type"] for room in rooms for row in room["tiles"] for tile in row}
    assert tags <= WIRE_TAGS
    assert "ladderUp" in tags
    assert "ladderDown" in tags
    assert "Using random seed 3" in captured.err


def test_main_verbose_progress_stays_off_stdout(capsys):
    cli.main(["--seed", "3", "--rooms", "2", "--verbose", "--indent", "2"])

    captured = capsys.readouterr()
    json.loads(captured.out)
    assert "Attempting to place 2 rooms" in captured.err


@pytest.mark.parametrize("argv", [["--rooms", "0"], ["--retries", "-1"]])
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit):
        cli.main(argv)


def test_room_graph_links_consecutive_rooms(two_room_script):
    rooms = generate_dungeon(DungeonConfig(target_rooms=2), ScriptedSampler(two_room_script))

    graph = benchmark_generation.build_room_graph(rooms)

    assert sorted(graph.edges()) == [(0, 1)]
    assert benchmark_generation.is_linear_chain(graph)


def test_bounding_box_area(two_room_script):
    rooms = generate_dungeon(DungeonConfig(target_rooms=2), ScriptedSampler(two_room_script))

    # Tiles span x -1..8 and y -1..4.
    assert benchmark_generation.bounding_box_area(rooms) == 10 * 6


def test_percentile_interpolates():
    assert benchmark_generation.percentile([1.0, 2.0, 3.0, 4.0], 50.0) == pytest.approx(2.5)
    assert benchmark_generation.percentile([5.0], 95.0) == 5.0


def test_benchmark_main_without_report(capsys):
    results, summary = benchmark_generation.main(["-n", "3", "--seed", "1", "--no-report"])

    assert len(results) == 3
    assert all(1 <= result.total_rooms <= 8 for result in results)
    assert 0.0 <= summary["completion_fraction"] <= 1.0
    assert "Config runs: 3" in capsys.readouterr().out
