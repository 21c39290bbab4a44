"""Tone catalog.

Every tone is a single ``Tone`` member carrying its prompt template and its
display data (badge label, picker label, badge color). Adding or removing a
tone is a one-line change here; nothing else keeps a tone-keyed table.
"""

from __future__ import annotations

import enum


class Tone(str, enum.Enum):
    # code, badge label, picker label, badge color, prompt template
    gen_z = (
        "gen-z", "Gen Z", "Gen Z Slang", "bg-pink-500",
        "Rewrite the following text in Gen Z slang. Use current slang terms, abbreviations, and emoji "
        "where appropriate. Make it sound authentic to how Gen Z communicates online: \"{text}\"",
    )
    shakespeare = (
        "shakespeare", "Shakespearean", "Shakespearean", "bg-purple-500",
        "Rewrite the following text as if William Shakespeare wrote it. Use Early Modern English, "
        "Shakespearean vocabulary, iambic pentameter where possible, and his characteristic style: \"{text}\"",
    )
    pirate = (
        "pirate", "Pirate", "Pirate", "bg-amber-500",
        "Rewrite the following text as if a stereotypical pirate is speaking. Use pirate slang, "
        "terminology, and speech patterns: \"{text}\"",
    )
    corporate = (
        "corporate", "Corporate", "Corporate BS", "bg-blue-500",
        "Rewrite the following text using excessive corporate jargon, buzzwords, and business speak. "
        "Make it sound like the most stereotypical corporate communication possible: \"{text}\"",
    )
    yoda = (
        "yoda", "Yoda", "Yoda Speak", "bg-green-500",
        "Rewrite the following text in Yoda's speech pattern from Star Wars. Rearrange sentence structure "
        "with object-subject-verb order where appropriate and use his characteristic speaking style: \"{text}\"",
    )
    baby = (
        "baby", "Baby Talk", "Baby Talk", "bg-rose-300",
        "Rewrite the following text as if a baby or toddler is speaking. Use simple words, baby talk, "
        "cute mispronunciations, and repetitive patterns: \"{text}\"",
    )
    cat = (
        "cat", "Cat", "Cat", "bg-orange-400",
        "Rewrite the following text as if a cat is speaking. Include cat-like behaviors, meows, "
        "references to cat activities, and a feline perspective: \"{text}\"",
    )
    dog = (
        "dog", "Excited Dog", "Excited Dog", "bg-yellow-500",
        "Rewrite the following text as if an excited dog is speaking. Include lots of enthusiasm, "
        "references to treats, walks, belly rubs, and typical dog behaviors: \"{text}\"",
    )
    drunk = (
        "drunk", "Tipsy", "Tipsy", "bg-red-400",
        "Rewrite the following text as if someone who is tipsy is speaking. Include slight word slurring, "
        "meandering thoughts, and overly friendly tone (but keep it family-friendly): \"{text}\"",
    )
    angry = (
        "angry", "Angry", "Angry", "bg-red-600",
        "Rewrite the following text as if someone is really frustrated and angry (but keep it clean). "
        "Use ALL CAPS where appropriate, lots of exclamation marks, and exaggerated expressions of "
        "frustration: \"{text}\"",
    )
    valley_girl = (
        "valley-girl", "Valley Girl", "Valley Girl", "bg-pink-400",
        "Rewrite the following text in valley girl speak. Use \"like\", \"totally\", \"oh my god\", and "
        "other valley girl expressions. Make it sound stereotypically valley girl: \"{text}\"",
    )
    cowboy = (
        "cowboy", "Cowboy", "Cowboy", "bg-brown-500",
        "Rewrite the following text as if a stereotypical cowboy from the Old West is speaking. "
        "Use Western slang, \"yeehaw\", and cowboy expressions: \"{text}\"",
    )
    anime = (
        "anime", "Anime", "Anime", "bg-indigo-500",
        "Rewrite the following text as if an over-the-top anime character is speaking. Include anime "
        "expressions, references to power levels, and dramatic declarations: \"{text}\"",
    )
    superhero = (
        "superhero", "Superhero", "Superhero", "bg-sky-500",
        "Rewrite the following text as if a classic superhero is speaking. Use noble, dramatic language "
        "with superhero catchphrases and references to justice and heroic deeds: \"{text}\"",
    )

    def __new__(cls, code: str, label: str, option_label: str, color: str, template: str):
        obj = str.__new__(cls, code)
        obj._value_ = code
        obj.label = label
        obj.option_label = option_label
        obj.color = color
        obj.template = template
        return obj

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> list[str]:
        return [e.value for e in cls]

    @classmethod
    def parse(cls, code: str | None) -> Tone | None:
        key = (code or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            return None


def _check_catalog() -> None:
    for tone in Tone:
        for attr in ("label", "option_label", "color", "template"):
            if not getattr(tone, attr, ""):
                raise RuntimeError(f"tone {tone.value!r} has no {attr}")
        if "{text}" not in tone.template:
            raise RuntimeError(f"tone {tone.value!r} template has no {{text}} placeholder")


_check_catalog()


def prompt_for(text: str, tone: Tone) -> str:
    """Build the generator prompt. ``text`` goes in verbatim, nothing is escaped."""
    return tone.template.format(text=text)


def tone_options() -> list[dict[str, str]]:
    return [
        {
            "value": t.value,
            "label": t.option_label,
            "badge": t.label,
            "color": t.color,
        }
        for t in Tone
    ]
