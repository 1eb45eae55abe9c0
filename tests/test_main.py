import io
import sys

import pytest

from main_avg import main


def test_main_default_mode(stdin, capsys):
    stdin('1 2 3 4\n')

    assert main([]) == 0
    assert capsys.readouterr().out == '2.500000\n'


def test_main_empty_input(stdin, capsys):
    stdin('')

    assert main([]) == 0
    assert capsys.readouterr().out == '0.000000\n'


def test_main_intermediates(stdin, capsys):
    stdin('2\n4\n9\n')

    assert main(['-I']) == 0
    assert capsys.readouterr().out == '2.000000\n3.000000\n5.000000\n'


def test_main_simple_moving_average(stdin, capsys):
    stdin('1 2 3 4')

    assert main(['--mode', 'SMA', '--window-size', '3']) == 0
    assert capsys.readouterr().out == '2.000000\n'


def test_main_simple_moving_average_intermediates(stdin, capsys):
    stdin('1 3 10 20 7')

    assert main(['-m', 'SMA', '-W', '2', '--show-intermediates']) == 0
    assert capsys.readouterr().out == '2.000000\n8.500000\n'


def test_main_stops_at_non_numeric_token(stdin, capsys):
    stdin('1 3 stop 100')

    assert main([]) == 0
    assert capsys.readouterr().out == '2.000000\n'


def test_main_data_file(tmp_path, capsys):
    path = tmp_path / 'data.txt'
    path.write_text('10\n20\n30\n')

    assert main([str(path)]) == 0
    assert capsys.readouterr().out == '20.000000\n'


def test_main_missing_data_file(tmp_path, capsys):
    path = tmp_path / 'missing.txt'

    assert main([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'missing.txt' in captured.err


def test_main_unknown_mode(stdin, capsys):
    stream = stdin('1 2 3\n')

    assert main(['--mode', 'XYZ']) == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'Unknown runtime mode: XYZ' in captured.err
    assert 'usage: avg [OPTIONS] [DATAFILE]' in captured.err
    assert stream.tell() == 0


@pytest.mark.parametrize('window_size', ['0', '-3', 'ten'])
def test_main_invalid_window_size(stdin, window_size):
    stdin('1 2 3\n')

    with pytest.raises(SystemExit) as excinfo:
        main(['-m', 'SMA', '-W', window_size])

    assert excinfo.value.code != 0


def test_main_unrecognized_flag(stdin, capsys):
    stdin('1 2 3\n')

    with pytest.raises(SystemExit) as excinfo:
        main(['--bogus'])

    assert excinfo.value.code != 0
    assert 'usage: avg [OPTIONS] [DATAFILE]' in capsys.readouterr().err


@pytest.mark.parametrize('flag', ['-h', '--help'])
def test_main_help(stdin, capsys, flag):
    stream = stdin('1 2 3\n')

    with pytest.raises(SystemExit) as excinfo:
        main([flag])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert 'usage: avg [OPTIONS] [DATAFILE]' in out
    assert 'CMA -- Cumulative Moving Average' in out
    assert 'SMA -- Simple Moving Average' in out
    assert stream.tell() == 0


@pytest.mark.parametrize('flag', ['-V', '--version'])
def test_main_version(stdin, capsys, flag):
    stream = stdin('1 2 3\n')

    with pytest.raises(SystemExit) as excinfo:
        main([flag])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out == 'avg (avg) Version 0.0.1\n'
    assert stream.tell() == 0


def test_main_logconfig(stdin, capsys, tmp_path):
    logconfig = tmp_path / 'logconfig.yaml'
    logconfig.write_text(
        'version: 1\n'
        'disable_existing_loggers: false\n'
        'handlers:\n'
        '  stderr:\n'
        '    class: logging.StreamHandler\n'
        '    stream: ext://sys.stderr\n'
        'root:\n'
        '  level: INFO\n'
        '  handlers: [stderr]\n'
    )
    stdin('1 2 3\n')

    assert main(['--logconfig', str(logconfig)]) == 0

    captured = capsys.readouterr()
    assert captured.out == '2.000000\n'
    assert 'processed 3 values' in captured.err


def test_main_undecodable_data_file(tmp_path, capsys):
    path = tmp_path / 'data.txt'
    path.write_bytes(b'1 2 3\n\xff\xfe\n4\n')

    assert main([str(path)]) == 0
    assert capsys.readouterr().out == '2.000000\n'


def test_main_undecodable_stdin(monkeypatch, capsys):
    stdin = io.TextIOWrapper(io.BytesIO(b'2 4 \xff 100\n'), encoding='utf-8')
    monkeypatch.setattr(sys, 'stdin', stdin)

    assert main(['-I']) == 0
    assert capsys.readouterr().out == '2.000000\n3.000000\n'


class ClosedPipe(io.StringIO):
    """Standard output whose reader has gone away."""

    def __init__(self, fd: int):
        super().__init__()
        self.fd = fd

    def write(self, s):
        raise BrokenPipeError

    def fileno(self) -> int:
        return self.fd


def test_main_closed_output(stdin, monkeypatch, tmp_path):
    stdin('1 2 3\n')

    with open(tmp_path / 'stdout.txt', 'w') as f:
        monkeypatch.setattr(sys, 'stdout', ClosedPipe(f.fileno()))
        assert main(['-I']) == 1
