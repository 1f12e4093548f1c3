"""Tests for the orbit registry, YAML configuration and the export CLI."""

import csv
import json

import pytest
import yaml

from orbit_core.apps.engine.main import main
from orbit_core.pkgs.engine_runtime import (ConfigError, OrbitSystem, TrackRecorder,
                                            build_system, load_config)
from orbit_core.pkgs.geometry import Color, IdGenerator, OrbitConfiguration, Position

SYSTEM = {
    'orbits': [
        {'name': 'sun', 'step_count': 1},
        {'name': 'planet', 'parent': 'sun', 'major_width': 10, 'minor_width': 8,
         'step_count': 4, 'clockwise': True, 'color': 'blue'},
        {'name': 'moon', 'parent': 'planet', 'major_width': 1, 'minor_width': 1,
         'step_count': 2, 'rotation_degrees': 90},
    ]
}


def square(**kw):
    return OrbitConfiguration(major_width=1, minor_width=1, step_count=4, **kw)


class TestOrbitSystem:

    def test_add_assigns_ids(self):
        system = OrbitSystem(IdGenerator())
        first, second = system.add(square()), system.add(square())
        assert (first, second) == (1, 2)
        assert system.get(2).id == 2
        assert len(system) == 2

    def test_lookup_errors(self):
        system = OrbitSystem(IdGenerator())
        system.add(square(name='a'))
        with pytest.raises(KeyError):
            system.get(99)
        with pytest.raises(KeyError):
            system.by_name('b')
        with pytest.raises(ValueError):
            system.add(square(name='a'))

    def test_link_composes_positions(self):
        system = OrbitSystem(IdGenerator())
        parent = system.add(square(clockwise=True))
        child = system.add(square(offset_x=5), parent_id=parent)
        assert system.get(child).parent is system.get(parent)
        assert system.get(child).parent_id == parent
        assert system.positions_at_turn(0)[child] == Position(7, 0)

    def test_link_rejects_cycles(self):
        system = OrbitSystem(IdGenerator())
        a = system.add(square())
        b = system.add(square(), parent_id=a)
        c = system.add(square(), parent_id=b)
        with pytest.raises(ValueError):
            system.link(a, c)
        with pytest.raises(ValueError):
            system.link(a, a)
        assert system.get(a).parent is None

    def test_remove_detaches_children(self):
        system = OrbitSystem(IdGenerator())
        a = system.add(square(name='a'))
        b = system.add(square(), parent_id=a)
        system.remove(a)
        assert a not in system
        assert system.get(b).parent is None
        with pytest.raises(KeyError):
            system.by_name('a')

    def test_errors_only_lists_invalid(self):
        system = OrbitSystem(IdGenerator())
        system.add(square())
        bad = system.add(OrbitConfiguration(major_width=1, minor_width=1))
        assert system.errors() == {bad: {'step_count': ['must be at least one for any orbit']}}

    def test_errors_include_name_length(self):
        system = OrbitSystem(IdGenerator())
        orbit_id = system.add(square(name='n' * 121))
        assert system.errors() == {orbit_id: {'name': ['must be at most 120 characters']}}
        assert system.get(orbit_id).position_at_turn(0) == Position(1, 0)

    def test_track(self):
        system = OrbitSystem(IdGenerator())
        orbit_id = system.add(square(clockwise=True))
        track = system.track(orbit_id, 0, 8)
        assert len(track) == 8
        assert track[0] == track[4]
        assert track[1].y == pytest.approx(-1)


class TestConfig:

    def test_build_system(self):
        system = build_system(SYSTEM)
        sun, planet, moon = (system.by_name(n) for n in ('sun', 'planet', 'moon'))
        assert planet.parent is sun
        assert moon.parent is planet
        assert planet.color == Color.parse('blue')
        assert system.errors() == {}

        pos = moon.position_at_turn(0)
        # planet at (10, 0); moon rotated 90 degrees sits at (0, 1) from it.
        assert pos.x == pytest.approx(10)
        assert pos.y == pytest.approx(1)

    def test_unknown_parent(self):
        with pytest.raises(ConfigError):
            build_system({'orbits': [{'name': 'a', 'parent': 'ghost', 'step_count': 1}]})

    def test_cyclic_parents(self):
        with pytest.raises(ConfigError):
            build_system({'orbits': [
                {'name': 'a', 'parent': 'b', 'step_count': 1},
                {'name': 'b', 'parent': 'a', 'step_count': 1},
            ]})

    def test_both_rotations(self):
        with pytest.raises(ConfigError):
            build_system({'orbits': [{'name': 'a', 'rotation': 1.0, 'rotation_degrees': 45}]})

    @pytest.mark.parametrize("raw", [
        {'orbits': [{'name': 'a', 'step_count': 'many'}]},
        {'orbits': [{'step_count': 1}]},
        {'orbits': [{'name': 'a', 'color': 'not-a-colour'}]},
        ['orbits'],
    ])
    def test_bad_structure(self, raw):
        with pytest.raises(ConfigError):
            build_system(raw)

    def test_invalid_geometry_still_loads(self):
        system = build_system({'orbits': [{'name': 'a', 'major_width': 5, 'minor_width': 1,
                                           'step_count': 4}]})
        assert list(system.errors().values())[0]['major_width'] == [
            'must have a ratio less than or equal to 2:1']

    def test_load_yaml(self, tmp_path):
        path = tmp_path / 'system.yaml'
        path.write_text(yaml.safe_dump(SYSTEM))
        spec = load_config(str(path))
        assert [o.name for o in spec.orbits] == ['sun', 'planet', 'moon']

    def test_load_errors(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / 'missing.yaml'))
        broken = tmp_path / 'broken.yaml'
        broken.write_text('orbits: [unclosed')
        with pytest.raises(ConfigError):
            load_config(str(broken))

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('')
        assert load_config(str(path)).orbits == []


class TestTrackRecorder:

    def test_disabled_records_nothing(self):
        recorder = TrackRecorder(enabled=False)
        recorder.log(0, 1, Position(1, 2))
        assert recorder.rows == []

    def test_summary(self):
        recorder = TrackRecorder()
        assert recorder.get_summary() == {'row_count': 0}
        recorder.log(3, 1, Position(1, 2), 'a')
        recorder.log(5, 2, Position(0, 0), 'b')
        assert recorder.get_summary() == {'row_count': 2, 'objects': 2,
                                          'first_turn': 3, 'last_turn': 5}

    def test_unsupported_format(self, tmp_path):
        with pytest.raises(ValueError):
            TrackRecorder().dump(str(tmp_path / 'out'), 'parquet')


class TestCli:

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / 'system.yaml'
        path.write_text(yaml.safe_dump(SYSTEM))
        return path

    def test_csv_export(self, tmp_path, config_file, restore_root_logging):
        prefix = tmp_path / 'out' / 'positions'
        code = main(['-c', str(config_file), '--turns', '0', '4',
                     '--object', 'planet', '-o', str(prefix), '--log-level', 'ERROR'])
        assert code == 0

        with open(f"{prefix}.csv", newline='') as f:
            rows = list(csv.DictReader(f))
        assert [int(r['turn']) for r in rows] == [0, 1, 2, 3]
        assert float(rows[0]['x']) == pytest.approx(10)
        assert float(rows[1]['y']) == pytest.approx(-8)

    def test_jsonl_export(self, tmp_path, config_file, restore_root_logging):
        prefix = tmp_path / 'positions'
        code = main(['-c', str(config_file), '-t', '0', '2', '-f', 'jsonl',
                     '-o', str(prefix), '--log-level', 'ERROR'])
        assert code == 0

        lines = (tmp_path / 'positions.jsonl').read_text().splitlines()
        assert '_metadata' in json.loads(lines[0])
        rows = [json.loads(line) for line in lines[1:]]
        assert len(rows) == 6
        assert {row['name'] for row in rows} == {'sun', 'planet', 'moon'}

    def test_validate_only(self, tmp_path, config_file, restore_root_logging):
        assert main(['-c', str(config_file), '--validate-only', '--log-level', 'ERROR']) == 0

        bad = tmp_path / 'bad.yaml'
        bad.write_text(yaml.safe_dump({'orbits': [{'name': 'a', 'step_count': 3}]}))
        assert main(['-c', str(bad), '--validate-only', '--log-level', 'ERROR']) == 1

    def test_config_errors(self, tmp_path, config_file, restore_root_logging):
        assert main(['-c', str(tmp_path / 'missing.yaml'), '--log-level', 'ERROR']) == 2
        assert main(['-c', str(config_file), '--object', 'comet',
                     '-o', str(tmp_path / 'x'), '--log-level', 'ERROR']) == 2


def test_example_config_is_valid():
    from pathlib import Path
    path = Path(__file__).resolve().parents[2] / 'configs' / 'example.yaml'
    system = build_system(load_config(str(path)))
    assert len(system) == 3
    assert system.errors() == {}


class TestCliOptions:

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / 'system.yaml'
        path.write_text(yaml.safe_dump(SYSTEM))
        return path

    def test_plain_log_format(self, config_file, capsys, restore_root_logging):
        code = main(['-c', str(config_file), '--validate-only', '--log-format', 'plain'])
        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert 'INFO - All 3 orbits are valid' in lines
        assert all(line.startswith('INFO - ') for line in lines)

    @pytest.mark.parametrize("turns", [('5', '5'), ('7', '2')])
    def test_empty_turn_range_rejected(self, tmp_path, config_file, turns, restore_root_logging):
        prefix = tmp_path / 'positions'
        code = main(['-c', str(config_file), '--turns', *turns, '-o', str(prefix),
                     '--log-level', 'ERROR'])
        assert code == 2
        assert not (tmp_path / 'positions.csv').exists()
