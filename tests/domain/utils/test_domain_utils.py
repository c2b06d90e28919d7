"""Tests for id generation, title suggestions and video link helpers."""

import random

import pytest

from multistream.domain.utils.idgen import new_session_id, new_ulid
from multistream.domain.utils.titles import ADJECTIVES, NOUNS, TIMES, generate_fireplace_title
from multistream.domain.utils.video_links import (
    get_google_drive_permissions_guidance,
    is_google_drive_link,
)


def test_session_ids_are_unique_and_prefixed():
    ids = {new_session_id() for _ in range(50)}

    assert len(ids) == 50
    assert all(i.startswith("session-") for i in ids)


def test_new_ulid_without_prefix():
    value = new_ulid()

    assert len(value) == 26
    assert value == value.lower()


def test_fireplace_title_shape():
    title = generate_fireplace_title(random.Random(42))

    head, time_of_day = title.split(" - ")
    adjective, noun = head.split(" ")
    assert adjective in ADJECTIVES
    assert noun in NOUNS
    assert time_of_day in TIMES


def test_fireplace_title_is_deterministic_with_seeded_rng():
    assert generate_fireplace_title(random.Random(7)) == generate_fireplace_title(random.Random(7))


@pytest.mark.parametrize(
    "url",
    [
        "https://drive.google.com/file/d/abc123/view?usp=sharing",
        "https://drive.google.com/open?id=abc123",
        "https://DRIVE.GOOGLE.COM/uc?id=abc123",
        "https://docs.google.com/presentation/d/abc123/edit",
    ],
)
def test_google_drive_links(url):
    assert is_google_drive_link(url)


@pytest.mark.parametrize("url", ["https://example.com/video.mp4", "", None, "rtmp://host/live"])
def test_not_google_drive_links(url):
    assert not is_google_drive_link(url)


def test_guidance_mentions_public_sharing():
    assert "Anyone with the link" in get_google_drive_permissions_guidance()
