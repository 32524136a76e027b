import logging

from src.catalog.audio import AudioTrack, audio_markup, bundled_file, check_track
from src.utils.config_loader import AudioConfig


def test_track_from_config():
    track = AudioTrack.from_config(AudioConfig(track="/static/theme.mp3", volume=0.3, loop=True))

    assert track == AudioTrack("/static/theme.mp3", volume=0.3, loop=True)


def test_markup_carries_track_settings():
    markup = audio_markup(AudioTrack("/static/theme.mp3", volume=0.3, loop=True))

    assert 'src="/static/theme.mp3"' in markup
    assert "audio.volume = 0.3;" in markup
    assert "audio.loop = true;" in markup


def test_markup_plays_on_first_click_only():
    markup = audio_markup(AudioTrack("/static/theme.mp3"))

    # Nothing plays on load; the body listener is the only caller of play().
    assert markup.count("audio.play()") == 1
    assert markup.count('document.body.addEventListener("click", function startMusic()') == 1
    assert markup.index('removeEventListener("click", startMusic)') < markup.index("audio.play()")
    assert 'console.error("Music playback failed:", error)' in markup


def test_missing_bundled_track_is_logged(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        assert check_track(AudioTrack("/static/csgo_theme.mp3"), tmp_path) is False

    assert "background music will not play" in caplog.text


def test_present_or_external_track_passes(tmp_path):
    (tmp_path / "theme.mp3").write_bytes(b"ID3")

    assert check_track(AudioTrack("/static/theme.mp3"), tmp_path) is True
    assert check_track(AudioTrack("https://cdn.example/theme.mp3"), tmp_path) is True
    assert bundled_file(AudioTrack("https://cdn.example/theme.mp3"), tmp_path) is None
