from pathlib import Path

from asset_converter.config.common import USER_CONFIG_FILE_NAME, load_user_config


def test_missing_user_config_gives_defaults(tmp_path):
    assert load_user_config(tmp_path) == {"ffmpeg_dir": None, "run_videos": None}


def test_user_config_values(tmp_path):
    (tmp_path / USER_CONFIG_FILE_NAME).write_text(
        "paths:\n  ffmpeg_dir: /opt/ffmpeg/bin\nconversion:\n  run_videos: true\n",
        encoding="utf-8",
    )

    settings = load_user_config(tmp_path)

    assert settings == {"ffmpeg_dir": Path("/opt/ffmpeg/bin"), "run_videos": True}


def test_partial_user_config(tmp_path):
    (tmp_path / USER_CONFIG_FILE_NAME).write_text("conversion:\n  run_videos: false\n", encoding="utf-8")

    assert load_user_config(tmp_path) == {"ffmpeg_dir": None, "run_videos": False}


def test_invalid_yaml_is_ignored(tmp_path):
    (tmp_path / USER_CONFIG_FILE_NAME).write_text("paths: [unclosed\n", encoding="utf-8")

    assert load_user_config(tmp_path) == {"ffmpeg_dir": None, "run_videos": None}


def test_non_mapping_yaml_is_ignored(tmp_path):
    (tmp_path / USER_CONFIG_FILE_NAME).write_text("- just\n- a list\n", encoding="utf-8")

    assert load_user_config(tmp_path) == {"ffmpeg_dir": None, "run_videos": None}
