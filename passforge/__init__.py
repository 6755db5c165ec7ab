"""PassForge -- password strength scoring and generation.

Core functions for rule-based strength analysis, option-driven password
generation, and improvement of weak passwords.
"""

import logging
import random
import secrets
import string
from dataclasses import asdict, dataclass

log = logging.getLogger(__name__)

SYMBOLS = '!@#$%^&*(),.?":{}|<>'
SIMILAR_CHARS = "il1o0IL1O0"

DEFAULT_LENGTH = 12
MIN_LENGTH = 6    # Streamlit slider bounds; the core accepts any length >= 0
MAX_LENGTH = 64

IMPROVED_MIN_LENGTH = 12
IMPROVE_SUFFIXES = {
    "lowercase": "abc",
    "uppercase": "XYZ",
    "digits": "123",
    "symbols": "!@#",
}
PAD_ALPHABET = string.digits + string.ascii_lowercase

_system_rng = secrets.SystemRandom()


class InvalidArgument(ValueError):
    """Raised when a core operation is called with an unusable argument."""


# ── Character classes ──────────────────────────────────────────────────────


def has_lowercase(s: str) -> bool:
    return any("a" <= c <= "z" for c in s)


def has_uppercase(s: str) -> bool:
    return any("A" <= c <= "Z" for c in s)


def has_digit(s: str) -> bool:
    return any("0" <= c <= "9" for c in s)


def has_symbol(s: str) -> bool:
    return any(c in SYMBOLS for c in s)


def count_symbols(s: str) -> int:
    return sum(1 for c in s if c in SYMBOLS)


_CLASS_CHECKS = {
    "lowercase": has_lowercase,
    "uppercase": has_uppercase,
    "digits": has_digit,
    "symbols": has_symbol,
}


# ── Strength analysis ──────────────────────────────────────────────────────

# (minimum score, label, color tag), checked top-down
_TIERS = [
    (85, "Very Strong", "strongest"),
    (70, "Strong", "strong"),
    (50, "Moderate", "moderate"),
    (25, "Weak", "weak"),
]
_FLOOR_TIER = ("Weak", "weakest")

_FEEDBACK = {
    "length": "Use at least 8 characters (12+ recommended)",
    "lowercase": "Include lowercase letters",
    "uppercase": "Include uppercase letters",
    "digits": "Include numbers",
    "symbols": "Include special characters (!@#$%^&*)",
}

_CLASS_POINTS = {
    "lowercase": 15,
    "uppercase": 15,
    "digits": 15,
    "symbols": 20,
}


@dataclass(frozen=True)
class StrengthReport:
    score: int
    label: str
    color: str
    feedback: tuple[str, ...] = ()

    def as_dict(self) -> dict:
        d = asdict(self)
        d["feedback"] = list(self.feedback)
        return d


def analyze(password: str) -> StrengthReport:
    """Score *password* with a fixed rule set and list what is missing.

    Points: length >= 12 gives 25, 8-11 gives 15, shorter gives nothing and a
    feedback line.  Each present character class adds its points, each
    missing one adds a feedback line instead.  Bonuses: 16+ characters (+10)
    and two or more symbols anywhere (+5).  The sum is capped at 100.
    """
    if not password:
        return StrengthReport(score=0, label="No password", color="neutral")

    score = 0
    feedback: list[str] = []

    length = len(password)
    if length >= 12:
        score += 25
    elif length >= 8:
        score += 15
    else:
        feedback.append(_FEEDBACK["length"])

    for name, check in _CLASS_CHECKS.items():
        if check(password):
            score += _CLASS_POINTS[name]
        else:
            feedback.append(_FEEDBACK[name])

    if length >= 16:
        score += 10
    if count_symbols(password) >= 2:
        score += 5

    score = min(score, 100)

    label, color = _FLOOR_TIER
    for threshold, tier_label, tier_color in _TIERS:
        if score >= threshold:
            label, color = tier_label, tier_color
            break

    return StrengthReport(
        score=score, label=label, color=color, feedback=tuple(feedback),
    )


# ── Charset building ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class GenerationOptions:
    """Which character classes a generated password may draw from.

    Letters are a master switch: lowercase and uppercase are only used when
    ``include_letters`` and their own flag are both set.
    """

    include_symbols: bool = True
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_letters: bool = True
    include_similar_chars: bool = True

    def enabled_classes(self) -> list[str]:
        enabled = []
        if self.include_letters and self.include_lowercase:
            enabled.append("lowercase")
        if self.include_letters and self.include_uppercase:
            enabled.append("uppercase")
        if self.include_numbers:
            enabled.append("digits")
        if self.include_symbols:
            enabled.append("symbols")
        return enabled


@dataclass(frozen=True)
class Charset:
    available: str
    required: str


def _without(alphabet: str, excluded: str) -> str:
    return "".join(c for c in alphabet if c not in excluded)


def _base_alphabets(include_similar: bool) -> dict[str, str]:
    alphabets = {
        "lowercase": string.ascii_lowercase,
        "uppercase": string.ascii_uppercase,
        "digits": string.digits,
        "symbols": SYMBOLS,
    }
    if not include_similar:
        for name in ("lowercase", "uppercase", "digits"):
            alphabets[name] = _without(alphabets[name], SIMILAR_CHARS)
    return alphabets


def class_alphabets(options: GenerationOptions) -> dict[str, str]:
    """Return the alphabet of every enabled class, in generation order.

    Visually similar characters are dropped from the letter and digit
    alphabets when ``include_similar_chars`` is off.  Symbols are never
    filtered.
    """
    alphabets = _base_alphabets(options.include_similar_chars)
    return {name: alphabets[name] for name in options.enabled_classes()}


def build_charset(
    options: GenerationOptions, rng: random.Random | None = None,
) -> Charset:
    """Build the shared pool plus one required character per enabled class.

    With no class enabled both fall back to the lowercase alphabet, minus
    similar characters when those are excluded, so generation always has
    something to draw from.
    """
    if rng is None:
        rng = _system_rng
    alphabets = class_alphabets(options)

    if not alphabets:
        fallback = _base_alphabets(options.include_similar_chars)["lowercase"]
        log.debug("No character class enabled, falling back to lowercase")
        return Charset(available=fallback, required=rng.choice(fallback))

    available = "".join(alphabets.values())
    required = "".join(rng.choice(a) for a in alphabets.values())
    log.debug(
        "Charset built: classes=%s pool=%d", ",".join(alphabets), len(available),
    )
    return Charset(available=available, required=required)


# ── Shuffling ──────────────────────────────────────────────────────────────


def shuffle(chars: list[str], rng: random.Random) -> list[str]:
    """Fisher-Yates shuffle *chars* in place and return it."""
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randrange(i + 1)
        chars[i], chars[j] = chars[j], chars[i]
    return chars


# ── Password generation ────────────────────────────────────────────────────


def generate(
    length: int = DEFAULT_LENGTH,
    options: GenerationOptions | None = None,
    *,
    rng: random.Random | None = None,
) -> str:
    """Generate a random password of exactly *length* characters.

    Contains at least one character from each enabled class, as long as
    *length* leaves room for one of each.  When it does not, a random subset
    of the required characters is kept.  Defaults to :mod:`secrets`
    randomness; pass a seeded :class:`random.Random` as *rng* for
    reproducible output.
    """
    if length < 0:
        raise InvalidArgument(f"Password length must not be negative (got {length})")

    options = options or GenerationOptions()
    if rng is None:
        rng = _system_rng
    charset = build_charset(options, rng)

    chars = list(charset.required)
    if length < len(chars):
        log.debug("Length %d below %d required characters, truncating", length, len(chars))
        chars = shuffle(chars, rng)[:length]

    chars.extend(rng.choice(charset.available) for _ in range(length - len(chars)))

    return "".join(shuffle(chars, rng))


# ── Password improvement ───────────────────────────────────────────────────


def improve(password: str, *, rng: random.Random | None = None) -> str:
    """Return a stronger variant of *password* that keeps all its characters.

    A fixed suffix is appended for every missing character class, the result
    is padded with base-36 characters up to 12, and then shuffled.
    """
    if not password:
        raise InvalidArgument("Please enter a password to improve")

    if rng is None:
        rng = _system_rng
    improved = password

    for name, check in _CLASS_CHECKS.items():
        if not check(password):
            improved += IMPROVE_SUFFIXES[name]

    padding = max(IMPROVED_MIN_LENGTH - len(improved), 0)
    improved += "".join(rng.choice(PAD_ALPHABET) for _ in range(padding))
    log.debug(
        "Improved password: %d -> %d characters (%d padded)",
        len(password), len(improved), padding,
    )

    return "".join(shuffle(list(improved), rng))
