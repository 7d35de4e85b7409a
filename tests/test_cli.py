import logging

import ezdxf
import pytest

from dxfent.__main__ import main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("dxfent")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_writes_polyline(tmp_path, capsys):
    out = tmp_path / "hole.dxf"
    rc = main(["--center", "10", "10", "0", "--radius", "5",
               "--precision", "16", "--layer", "CLI_HOLES", "--output", str(out)])
    assert rc == 0
    assert str(out) in capsys.readouterr().out

    doc = ezdxf.readfile(out)
    msp = doc.modelspace()
    assert len(msp.query("CIRCLE")) == 0
    lw = msp.query("LWPOLYLINE")
    assert len(lw) == 1
    assert len(lw[0]) == 16
    assert lw[0].dxf.layer == "CLI_HOLES"


def test_keep_circle_and_config(tmp_path):
    config = tmp_path / "dxfent.yaml"
    config.write_text("default_precision: 9\nlog_level: WARNING\n", encoding="utf-8")
    out = tmp_path / "tilted.dxf"
    rc = main(["--config", str(config), "--normal", "0", "1", "1",
               "--keep-circle", "--output", str(out)])
    assert rc == 0

    msp = ezdxf.readfile(out).modelspace()
    assert len(msp.query("CIRCLE")) == 1
    assert len(msp.query("LWPOLYLINE")[0]) == 9


def test_bad_precision(tmp_path):
    rc = main(["--precision", "2", "--output", str(tmp_path / "bad.dxf")])
    assert rc == 2
    assert not (tmp_path / "bad.dxf").exists()


def test_zero_normal(tmp_path):
    rc = main(["--normal", "0", "0", "0", "--output", str(tmp_path / "bad.dxf")])
    assert rc == 2


def test_missing_config(tmp_path, capsys):
    rc = main(["--config", str(tmp_path / "missing.yaml")])
    assert rc == 2
    assert "settings file not found" in capsys.readouterr().err


def test_unwritable_output(tmp_path, capsys):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    rc = main(["--output", str(blocker / "out.dxf")])
    assert rc == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "could not write" in captured.err
