"""
Unit tests for GameConfig, audio cues and the telemetry logger.
"""

import json

import pytest

from engine.audio import PygameAudio
from engine.config import GameConfig, load_config
from engine.effects import SoundCue
from settings import SOUND_VOLUME, TICKS_PER_SECOND
from telemetry.logger import TelemetryLogger


class TestGameConfig:

    def test_defaults(self, tmp_path):
        config = GameConfig(tmp_path / "settings.json")
        assert config.ticks_per_second == TICKS_PER_SECOND
        assert config.volume == SOUND_VOLUME
        assert config.sound_enabled is True

    def test_missing_file_keeps_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.json")
        assert config.ticks_per_second == TICKS_PER_SECOND

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(
            json.dumps({
                "ticks_per_second": 4,
                "sound_enabled": False,
                "save_file": str(tmp_path / "store.json"),
            }),
            encoding="utf-8",
        )

        loaded = load_config(path)
        assert loaded.ticks_per_second == 4
        assert loaded.sound_enabled is False
        assert loaded.save_file == tmp_path / "store.json"
        assert loaded.tick_interval == 0.25

    def test_values_are_clamped(self, tmp_path):
        config = GameConfig(tmp_path / "settings.json")
        config.from_dict({"ticks_per_second": 0, "volume": 3.0})
        assert config.ticks_per_second == 1
        assert config.volume == 1.0

    @pytest.mark.parametrize("text", ["{broken", "[1, 2]"])
    def test_broken_file_is_ignored(self, tmp_path, text):
        path = tmp_path / "settings.json"
        path.write_text(text, encoding="utf-8")
        config = GameConfig(path)
        assert config.load() is False
        assert config.ticks_per_second == TICKS_PER_SECOND


class TestPygameAudio:

    def test_cue_filenames(self, tmp_path):
        audio = PygameAudio(tmp_path)
        assert audio.path_for(SoundCue.GAMEOVER) == tmp_path / "gameover.wav"
        assert {cue.filename for cue in SoundCue} == {
            "coin.wav",
            "damage.wav",
            "key.wav",
            "door.wav",
            "win.wav",
            "gameover.wav",
        }

    def test_missing_asset_is_skipped(self, tmp_path):
        audio = PygameAudio(tmp_path)
        audio.play(SoundCue.COIN)
        audio.play(SoundCue.COIN)

    def test_volume_clamped(self, tmp_path):
        assert PygameAudio(tmp_path, volume=2.0).volume == 1.0
        assert PygameAudio(tmp_path).volume == SOUND_VOLUME


class TestTelemetry:

    @staticmethod
    def _rows(path):
        return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]

    def test_writes_json_lines(self, tmp_path):
        path = tmp_path / "logs" / "telemetry.jsonl"
        telemetry = TelemetryLogger(path)
        telemetry.session_start(enemies=1)
        telemetry.saved(frame=3)
        telemetry.session_end(7, "loss", score=20, health=0, keys=1)

        rows = self._rows(path)
        assert [row["event"] for row in rows] == ["session_start", "save", "session_end"]
        assert rows[1]["frame"] == 3
        assert rows[2]["result"] == "loss"
        assert (rows[2]["score"], rows[2]["health"], rows[2]["keys"]) == (20, 0, 1)

    def test_disabled_writes_nothing(self, tmp_path):
        path = tmp_path / "t.jsonl"
        telemetry = TelemetryLogger(path, enabled=False)
        telemetry.loaded(frame=1)
        assert not path.exists()

    def test_write_failure_disables(self, tmp_path):
        # The target is a directory, so opening it for append fails.
        path = tmp_path / "t.jsonl"
        path.mkdir()
        telemetry = TelemetryLogger(path)
        telemetry.saved(frame=0)
        assert telemetry.enabled is False
