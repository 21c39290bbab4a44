from __future__ import annotations

from urllib.parse import urlencode

from toneswap.services.tone_catalog import Tone


def build_share_url(base_url: str, text: str, tone: Tone) -> str:
    """Deep link that pre-fills the form and runs the transform on open."""
    base = (base_url or "").rstrip("/") + "/"
    return base + "?" + urlencode({"text": text, "tone": tone.value})


def resolve_deep_link_tone(code: str | None, default: Tone) -> Tone:
    return Tone.parse(code) or default
