"""Tests for the command-line entry point."""

from isopath.main import main


def _write_map(tmp_path, text: str) -> str:
    path = tmp_path / "map.txt"
    path.write_text(text)
    return str(path)


class TestPrintPath:
    def test_prints_waypoints(self, tmp_path, capsys):
        map_file = _write_map(tmp_path, "000\n000\n000\n")
        assert main([map_file, "--start", "0,0", "--goal", "2,2"]) == 0
        assert capsys.readouterr().out.splitlines() == ["0,0,0", "1,1,0", "2,2,0"]

    def test_default_start_is_closest_valid_cell(self, tmp_path, capsys):
        map_file = _write_map(tmp_path, ".0\n00\n")
        assert main([map_file, "--goal", "1,1"]) == 0
        assert capsys.readouterr().out.splitlines() == ["0,1,0", "1,1,0"]

    def test_boxes_from_arguments(self, tmp_path, capsys):
        map_file = _write_map(tmp_path, "000\n")
        args = [map_file, "--goal", "0,2", "--box", "0,2,32", "--box", "0,2,32"]
        assert main(args) == 1
        assert "No valid path" in capsys.readouterr().out

    def test_recalculate_prints_partial_path(self, tmp_path, capsys):
        map_file = _write_map(tmp_path, "0.\n.0\n")
        assert main([map_file, "--start", "0,0", "--goal", "1,1", "--recalculate"]) == 0
        assert capsys.readouterr().out.splitlines() == ["0,0,0"]

    def test_accumulated_costs(self, tmp_path, capsys):
        map_file = _write_map(tmp_path, "000\n000\n000\n")
        assert main([map_file, "--start", "0,0", "--goal", "2,2", "--accumulate-costs"]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "2,2,0"


class TestErrors:
    def test_missing_map_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt"), "--goal", "0,0"]) == 1
        assert capsys.readouterr().out.startswith("Error:")

    def test_bad_map_character(self, tmp_path, capsys):
        map_file = _write_map(tmp_path, "0X\n")
        assert main([map_file, "--goal", "0,0"]) == 1
        assert "Invalid map character" in capsys.readouterr().out

    def test_goal_on_void(self, tmp_path, capsys):
        map_file = _write_map(tmp_path, "0.\n")
        assert main([map_file, "--goal", "0,1"]) == 1
        assert "No tile" in capsys.readouterr().out

    def test_box_too_large_for_stack(self, tmp_path, capsys):
        map_file = _write_map(tmp_path, "00\n")
        assert main([map_file, "--goal", "0,1", "--box", "0,1,8", "--box", "0,1,16"]) == 1
        assert "larger" in capsys.readouterr().out

    def test_malformed_coordinates(self, tmp_path, capsys):
        map_file = _write_map(tmp_path, "00\n")
        assert main([map_file, "--goal", "a,b"]) == 1
        assert "Expected integers" in capsys.readouterr().out

    def test_goal_required_without_preview(self, tmp_path, capsys):
        map_file = _write_map(tmp_path, "00\n")
        assert main([map_file]) == 1
        assert "--goal is required" in capsys.readouterr().out
