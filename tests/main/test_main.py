import logging

import pytest
import tomlkit

from main import build_parser, main, run, setup_logging
from shared.constants import CACHE_VERSION_KEY, SCENARIO_NODE_NAME

SYSTEM = """
[[bodies]]
name = "Sun"
solid_surface = false

[[bodies]]
name = "Kerbin"
parent = "Sun"
semi_major_axis = 13599840256.0
home = true
[[bodies.hills]]
latitude = 20.0
longitude = 30.0
height = 6000.0
width_deg = 6.0

[[bodies]]
name = "Mun"
parent = "Kerbin"
semi_major_axis = 12000000.0
[[bodies.hills]]
latitude = -10.0
longitude = 100.0
height = 7000.0
width_deg = 8.0
"""


@pytest.fixture
def system_file(tmp_path):
    path = tmp_path / 'system.toml'
    path.write_text(SYSTEM, encoding='utf-8')
    return path


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / 'settings.toml'
    path.write_text('initial_scan_points = 800\nfilter_size = 10\n', encoding='utf-8')
    return path


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def parse(*argv):
    return build_parser().parse_args(list(argv))


class TestMain:
    def test_setup_logging(self, tmp_path, monkeypatch, restore_logging):
        localappdata = tmp_path / "localappdata"
        monkeypatch.setenv("LOCALAPPDATA", str(localappdata))

        log_file = setup_logging()
        logging.getLogger('test').info('hello')

        assert log_file == localappdata / "ElevationScanner" / "log" / "elevation_scanner.log"
        assert log_file.exists()

    def test_parser_requires_command(self, system_file):
        with pytest.raises(SystemExit):
            parse('--system', str(system_file))

    def test_precalc_persists_cache(self, tmp_path, system_file, settings_file):
        save = tmp_path / 'persistent.toml'
        args = parse('--system', str(system_file), '--config', str(settings_file), '--save', str(save), 'precalc')

        assert run(args) == 0

        node = tomlkit.parse(save.read_text(encoding='utf-8'))[SCENARIO_NODE_NAME]
        assert CACHE_VERSION_KEY in node
        assert set(node) == {CACHE_VERSION_KEY, 'elevation:Kerbin', 'elevation:Mun'}
        altitude = float(str(node['elevation:Mun']).split(',')[0])
        assert altitude == pytest.approx(7000.0, abs=1.0)

    def test_corrupt_save_is_recomputed(self, tmp_path, system_file, settings_file):
        save = tmp_path / 'persistent.toml'
        save.write_text('this is = = not toml [[[', encoding='utf-8')
        args = parse('--system', str(system_file), '--config', str(settings_file), '--save', str(save), 'precalc')

        assert run(args) == 0

        node = tomlkit.parse(save.read_text(encoding='utf-8'))[SCENARIO_NODE_NAME]
        assert set(node) == {CACHE_VERSION_KEY, 'elevation:Kerbin', 'elevation:Mun'}

    def test_dump_writes_file(self, tmp_path, system_file, settings_file):
        output = tmp_path / 'dump' / 'peaks.cfg'
        args = parse('--system', str(system_file), '--config', str(settings_file), 'dump', '--output', str(output))

        assert run(args) == 0

        text = output.read_text(encoding='utf-8')
        assert '// 2 bodies present in file' in text
        assert 'name = Kerbin' in text
        assert 'name = Sun' not in text

    def test_startup_reuses_persisted_cache(self, tmp_path, system_file, settings_file, monkeypatch):
        save = tmp_path / 'persistent.toml'
        base = ('--system', str(system_file), '--config', str(settings_file), '--save', str(save))
        assert run(parse(*base, 'precalc')) == 0
        before = tomlkit.parse(save.read_text(encoding='utf-8')).unwrap()

        def fail(*args, **kwargs):
            raise AssertionError('cached bodies must not be rescanned')

        monkeypatch.setattr('elevation.cache.scan_for_max_elevation', fail)
        assert run(parse(*base, 'startup', '--budget-ms', '-1')) == 0
        assert tomlkit.parse(save.read_text(encoding='utf-8')).unwrap() == before

    def test_startup_disabled(self, tmp_path, system_file):
        settings = tmp_path / 'off.toml'
        settings.write_text('precompute_on_startup = false\n', encoding='utf-8')
        save = tmp_path / 'persistent.toml'
        args = parse('--system', str(system_file), '--config', str(settings), '--save', str(save), 'startup')

        assert run(args) == 0
        # nothing computed, so nothing written
        assert not save.exists()

    def test_bad_catalog_returns_error(self, tmp_path, settings_file):
        bad = tmp_path / 'bad.toml'
        bad.write_text('[[bodies]]\nname = "A"\nparent = "B"\n', encoding='utf-8')
        assert run(parse('--system', str(bad), '--config', str(settings_file), 'precalc')) == 2

    def test_missing_catalog_returns_error(self, tmp_path, settings_file):
        args = parse('--system', str(tmp_path / 'none.toml'), '--config', str(settings_file), 'precalc')
        assert run(args) == 2

    def test_invalid_settings_return_error(self, tmp_path, system_file):
        settings = tmp_path / 'bad_settings.toml'
        settings.write_text('filter_size = -3\n', encoding='utf-8')
        assert run(parse('--system', str(system_file), '--config', str(settings), 'precalc')) == 2

    def test_main_entry(self, tmp_path, system_file, settings_file, monkeypatch, restore_logging):
        monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "localappdata"))
        output = tmp_path / 'peaks.cfg'
        code = main(['--system', str(system_file), '--config', str(settings_file), 'dump', '--output', str(output)])
        assert code == 0
        assert output.exists()
