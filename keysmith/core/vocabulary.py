from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

from keysmith.core.error_dialect import VocabularyUnavailableError

MAX_WORDLIST_FILE_BYTES = 1024 * 1024
MAX_WORD_LENGTH = 64


def split_words(text: str) -> List[str]:
    return [w for w in text.split() if w]


def dedupe_keep_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        token = w.strip()
        if not token or token in seen:
            continue
        seen.add(token)
        out.append(token)
    return out


DEFAULT_WORD_LIST: Tuple[str, ...] = tuple(dedupe_keep_order("""
apple banana orange grape strawberry blueberry raspberry pineapple kiwi mango peach plum cherry
lemon lime coconut avocado pear apricot fig date melon watermelon cantaloupe honeydew pomegranate
guava papaya lychee dragonfruit passionfruit persimmon tangerine clementine nectarine blackberry
cranberry currant gooseberry quince rhubarb starfruit ugli zucchini cucumber tomato potato carrot
broccoli spinach kale lettuce cabbage onion garlic ginger pepper chili eggplant pumpkin squash bean
pea corn rice wheat oat barley rye bread pasta noodle pizza burger sushi taco burrito sandwich soup
salad stew curry fry bake roast grill steam boil simmer blend chop slice dice mince forest mountain
river ocean desert valley glacier volcano sunrise sunset moonlight starlight thunder lightning
rainbow blizzard whisper giggle shimmer sparkle twinkle breeze melody harmony journey adventure
explore discover wander travel expedition pilgrim ancient modern future present past timeless
eternal moment brave courage heroic valiant fearless daring bold gallant gentle kindness compassion
empathy tender softly peaceful calmness wisdom knowledge insight enlighten learn study thoughtful
clever freedom liberty sovereign unbound release escape openness wildness mystery secret puzzle
enigma riddle hidden unknown unseen dreamer imagine create invent design build artist writer
speaker listen communicate converse dialogue express narrate recite runner jumper swimmer climber
dancer singer player athlete garden flower tree plant bloom petal leafy rooting library bookish
reader chapter story novel poetry script keyboard monitor mousepad webcam printer scanner router
cloudy sunny rainy windy snowing stormy foggy misty laughter smiling joyful happy blissful cheerful
gleeful merry serene tranquil placid untroubled undisturbed relaxed composed stillness vibrant
luminous radiant brilliant sparkling gleaming shining glowing whiskey bourbon scotch vodka gin rum
tequila brandy coffee tea latte espresso cappuccino mocha chai matcha bicycle caravan airplane
trains shipment rocket balloon submarine diamond emerald ruby sapphire pearl topaz amethyst garnet
guitar piano violin trumpet drummer flute cello saxophone chocolate vanilla caramel minty cookie
brownie fudge""".split()))


def load_wordlist_file(path: str) -> List[str]:
    """Read a whitespace-separated word list; every failure maps to VocabularyUnavailableError."""
    p = Path(path).expanduser()
    try:
        st = p.stat()
    except FileNotFoundError as exc:
        raise VocabularyUnavailableError(f"word list file not found: {p}") from exc
    except OSError as exc:
        raise VocabularyUnavailableError(f"unable to stat word list file '{p}': {exc}") from exc

    if not p.is_file():
        raise VocabularyUnavailableError(f"word list path is not a file: {p}")
    if st.st_size > MAX_WORDLIST_FILE_BYTES:
        raise VocabularyUnavailableError(f"word list file too large: {p} ({st.st_size} bytes)")

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise VocabularyUnavailableError(f"unable to read word list file '{p}': {exc}") from exc

    words = split_words(text.lstrip("\ufeff"))
    too_long = [w for w in words if len(w) > MAX_WORD_LENGTH]
    if too_long:
        raise VocabularyUnavailableError(f"word list contains a word longer than {MAX_WORD_LENGTH} chars: {too_long[0][:16]!r}")
    return words


def build_vocabulary(
    use_default: bool = True,
    custom_words: Iterable[str] = (),
    extra_sources: Iterable[Iterable[str]] = (),
) -> Tuple[str, ...]:
    """
    Combine the built-in list with caller-supplied words.
    Order is built-in first, then custom words, then each extra source.
    The result may be empty; the word-chain generator rejects that.
    """
    combined: List[str] = list(DEFAULT_WORD_LIST) if use_default else []
    combined.extend(custom_words)
    for source in extra_sources:
        combined.extend(source)
    return tuple(dedupe_keep_order(combined))
