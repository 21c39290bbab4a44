from __future__ import annotations

from urllib.parse import parse_qs, urlparse

from toneswap.services.share import build_share_url, resolve_deep_link_tone
from toneswap.services.tone_catalog import Tone


def test_share_url_keeps_base_and_encodes_params():
    url = build_share_url("https://toneswap.example/", "line one\nline two", Tone.cowboy)
    parsed = urlparse(url)

    assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == "https://toneswap.example/"
    assert parse_qs(parsed.query) == {"text": ["line one\nline two"], "tone": ["cowboy"]}


def test_deep_link_tone_resolution():
    assert resolve_deep_link_tone("drunk", Tone.gen_z) is Tone.drunk
    assert resolve_deep_link_tone("nope", Tone.gen_z) is Tone.gen_z
    assert resolve_deep_link_tone(None, Tone.shakespeare) is Tone.shakespeare
