"""IPA symbol tables.

IPA_SYMBOLS is every code point that may appear in a phonemic alphabet.
NON_ESSENTIAL_IPA_SYMBOLS are prosodic and boundary marks that carry no
segmental information; they are stripped before validation and never
become part of an alphabet. The two sets are disjoint.
"""

PULMONIC_CONSONANTS = (
    "pbtdʈɖcɟkgɡqɢʔ"
    "mɱnɳɲŋɴ"
    "ʙrʀ"
    "ⱱɾɽ"
    "ɸβfvθðszʃʒʂʐçʝxɣχʁħʕhɦ"
    "ɬɮ"
    "ʋɹɻjɰ"
    "lɭʎʟ"
)

NON_PULMONIC_CONSONANTS = "ʘǀǃǂǁɓɗʄɠʛʼ"

OTHER_CONSONANTS = "ʍwɥʜʢʡɕʑɺɧɫ"

VOWELS = "iyɨʉɯuɪʏʊeøɘɵɤoəɛœɜɞʌɔæɐaɶɑɒɚɝ"

LENGTH_MARKS = "ːˑ"

SPACING_MODIFIERS = "ʰʱʷʲˠˤⁿˡ˞ᵊ"

COMBINING_DIACRITICS = (
    "̥"  # voiceless
    "̊"  # voiceless (above)
    "̬"  # voiced
    "̹"  # more rounded
    "̜"  # less rounded
    "̟"  # advanced
    "̠"  # retracted
    "̈"  # centralized
    "̽"  # mid-centralized
    "̩"  # syllabic
    "̍"  # syllabic (above)
    "̯"  # non-syllabic
    "̑"  # non-syllabic (above)
    "̤"  # breathy voiced
    "̰"  # creaky voiced
    "̼"  # linguolabial
    "̴"  # velarized or pharyngealized
    "̝"  # raised
    "̞"  # lowered
    "̘"  # advanced tongue root
    "̙"  # retracted tongue root
    "̪"  # dental
    "̺"  # apical
    "̻"  # laminal
    "̃"  # nasalized
    "̚"  # no audible release
    "̆"  # extra-short
)

TONE_LETTERS = "˥˦˧˨˩"

COMBINING_TONES = (
    "̋"  # extra high
    "́"  # high
    "̄"  # mid
    "̀"  # low
    "̏"  # extra low
    "̌"  # rising
    "̂"  # falling
)

IPA_SYMBOLS: frozenset[str] = frozenset(
    PULMONIC_CONSONANTS
    + NON_PULMONIC_CONSONANTS
    + OTHER_CONSONANTS
    + VOWELS
    + LENGTH_MARKS
    + SPACING_MODIFIERS
    + COMBINING_DIACRITICS
    + TONE_LETTERS
    + COMBINING_TONES
)

NON_ESSENTIAL_IPA_SYMBOLS: frozenset[str] = frozenset(
    "ˈˌ"  # primary/secondary stress
    "."  # syllable break
    "‿"  # linking
    "͜͡"  # tie bars
    "|‖"  # minor/major group
    "↗↘"  # global rise/fall
    "ꜛꜜ"  # upstep/downstep
)


def is_ipa_symbol(symbol: str) -> bool:
    """Check if a single code point is a recognized IPA symbol."""
    return symbol in IPA_SYMBOLS


def strip_non_essential(pronunciation: str) -> str:
    """Remove prosodic and boundary marks from a transcription."""
    return "".join(
        symbol for symbol in pronunciation
        if symbol not in NON_ESSENTIAL_IPA_SYMBOLS
    )
