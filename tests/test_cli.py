from __future__ import annotations

from PIL import Image

from helmetlink.app import cli
from helmetlink.config import LinkConfig
from helmetlink.protocol import build_frame
from helmetlink.rendering import RotatingView


def _no_sleep(monkeypatch):
    monkeypatch.setattr("helmetlink.protocol.transmitter.time.sleep", lambda seconds: None)


def test_output_file_holds_rotated_frame(tmp_path, monkeypatch):
    _no_sleep(monkeypatch)
    img = Image.new("L", (64, 64), 0)
    for x in range(64):
        img.putpixel((x, 0), 255)
    source = tmp_path / "in.png"
    img.save(source)
    target = tmp_path / "frame.bin"

    assert cli.main([str(source), "--output", str(target)]) == 0

    samples = list(img.tobytes())
    assert target.read_bytes() == build_frame(RotatingView(samples, 64, 64))
    assert len(target.read_bytes()) == 11 + 64 * 9


def test_missing_image_exits_non_zero(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.png"), "--output", str(tmp_path / "out.bin")]) == 2
    assert "nope.png" in capsys.readouterr().err


def test_wrong_size_exits_non_zero(tmp_path, capsys):
    source = tmp_path / "small.png"
    Image.new("L", (8, 8), 0).save(source)
    assert cli.main([str(source), "--output", str(tmp_path / "out.bin")]) == 2
    assert "8x8" in capsys.readouterr().err


def test_config_defaults_and_overrides(monkeypatch):
    monkeypatch.setenv("HELMETLINK_DEVICE", "/dev/ttyACM1")
    config = cli.build_config(cli.parse_args(["pic.png", "--baud", "9600"]))
    assert config == LinkConfig(image_path="pic.png", device="/dev/ttyACM1", baud_rate=9600)


def test_device_flag_beats_environment(monkeypatch):
    monkeypatch.setenv("HELMETLINK_DEVICE", "/dev/ttyACM1")
    config = cli.build_config(cli.parse_args(["--device", "/dev/ttyUSB3", "--fit", "--delay-ms", "5"]))
    assert config.device == "/dev/ttyUSB3"
    assert config.image_path == "tallintest.png"
    assert config.fit is True
    assert config.block_delay_ms == 5
