"""Tests for build_output_params."""

from multistream.domain.platforms import apply_field_defaults, build_output_params, youtube_adapter


def test_build_output_params(youtube_values):
    output = build_output_params(youtube_adapter, youtube_values)

    assert output.name == "My Channel"
    assert output.protocol == "rtmp"
    assert output.url == "rtmp://a.rtmp.youtube.com/live2"
    assert output.stream_key == "abcd-efgh-ijkl-mnop"
    assert output.max_bitrate == 6000
    assert output.categories == ["youtube", "live"]


def test_values_are_trimmed(youtube_values):
    youtube_values["name"] = "  My Channel  "
    youtube_values["ingestUrl"] = " rtmp://a.rtmp.youtube.com/live2 "

    output = build_output_params(youtube_adapter, youtube_values)

    assert output.name == "My Channel"
    assert output.url == "rtmp://a.rtmp.youtube.com/live2"


def test_numeric_string_bitrate(youtube_values):
    youtube_values["maxBitrate"] = "2500"

    assert build_output_params(youtube_adapter, youtube_values).max_bitrate == 2500


def test_default_bitrate_after_defaults_applied(youtube_values):
    del youtube_values["maxBitrate"]

    output = build_output_params(youtube_adapter, apply_field_defaults(youtube_adapter, youtube_values))

    assert output.max_bitrate == 4500


def test_missing_bitrate_means_unlimited(youtube_values):
    del youtube_values["maxBitrate"]

    assert build_output_params(youtube_adapter, youtube_values).max_bitrate == 0
