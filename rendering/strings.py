"""Language strings and safe text formatting."""

import html
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from config import get_lang_dir
from logger import get_logger

logger = get_logger()

DEFAULT_LANG = "en"

_SPAN = re.compile(r"<span\b([^>]*)>(.*?)</span>", re.IGNORECASE | re.DOTALL)
_LANG_ATTR = re.compile(r'\blang="([a-zA-Z0-9_-]+)"', re.IGNORECASE)
_MULTILANG_CLASS = re.compile(r'\bclass="multilang"', re.IGNORECASE)
_TAG = re.compile(r"<[^>]*>")
_BARE_AMP = re.compile(r"&(?!(?:#\d+|#x[0-9a-f]+|[a-z][a-z0-9]*);)", re.IGNORECASE)


class StringManager:
    """Loads language packs from YAML files and looks strings up.

    Packs live in ``<lang_dir>/<lang>.yaml``. A string missing from a pack
    falls back to the English pack.
    """

    def __init__(self, lang_dir: Optional[Path] = None, default_lang: str = DEFAULT_LANG):
        self.lang_dir = lang_dir if lang_dir is not None else get_lang_dir()
        self.default_lang = default_lang
        self._cache: Dict[str, Dict[str, str]] = {}

    def load_pack(self, lang: str) -> Dict[str, str]:
        """Load one language pack, caching it.

        A missing pack loads as empty, except for English which must exist.

        Raises:
            FileNotFoundError: If the English pack is missing.
            yaml.YAMLError: If a pack is invalid.
        """
        if lang in self._cache:
            return self._cache[lang]

        pack_file = self.lang_dir / f"{lang}.yaml"
        if not pack_file.exists():
            if lang == DEFAULT_LANG:
                raise FileNotFoundError(f"Language pack not found: {pack_file}")
            logger.debug(f"No language pack for '{lang}', using {DEFAULT_LANG}")
            pack = {}
        else:
            with open(pack_file, "r", encoding="utf-8") as f:
                pack = yaml.safe_load(f) or {}

        self._cache[lang] = pack
        return pack

    def get_string(self, identifier: str, a: Any = None, lang: Optional[str] = None) -> str:
        """Look up a string and substitute {$a} placeholders.

        Args:
            identifier: String identifier, e.g. "questioncatsfor".
            a: Value for {$a}, or a dict whose keys fill {$a->key}.
            lang: Language to use, defaults to the manager's language.

        Raises:
            KeyError: If the identifier exists in neither pack.
        """
        lang = lang or self.default_lang
        pack = self.load_pack(lang)
        if identifier in pack:
            text = pack[identifier]
        else:
            english = self.load_pack(DEFAULT_LANG)
            if identifier not in english:
                raise KeyError(f"Unknown language string: {identifier}")
            text = english[identifier]

        if isinstance(a, dict):
            for key, value in a.items():
                text = text.replace("{$a->" + key + "}", str(value))
        elif a is not None:
            text = text.replace("{$a}", str(a))
        return text


def _choose_language(block: List[Tuple[str, str]], lang: str) -> str:
    by_lang = dict(block)
    if lang in by_lang:
        return by_lang[lang]
    parent_lang = lang.split("_")[0]
    if parent_lang in by_lang:
        return by_lang[parent_lang]
    return block[0][1]


def filter_multilang(text: str, lang: str) -> str:
    """Keep only one language out of each run of multilang spans.

    A run is a sequence of ``<span lang="xx" class="multilang">`` elements
    separated by nothing but whitespace. The span for ``lang`` wins, then its
    parent language ("fr" for "fr_ca"), then the first span of the run.
    """
    if "multilang" not in text:
        return text

    pieces = []
    pos = 0
    block: List[Tuple[str, str]] = []
    block_start = block_end = 0

    for match in _SPAN.finditer(text):
        span_attrs = match.group(1)
        lang_match = _LANG_ATTR.search(span_attrs)
        if not lang_match or not _MULTILANG_CLASS.search(span_attrs):
            continue
        entry = (lang_match.group(1).lower().replace("-", "_"), match.group(2))

        if block and not text[block_end:match.start()].strip():
            block.append(entry)
            block_end = match.end()
            continue

        if block:
            pieces.append(text[pos:block_start])
            pieces.append(_choose_language(block, lang))
            pos = block_end
        block = [entry]
        block_start, block_end = match.start(), match.end()

    if block:
        pieces.append(text[pos:block_start])
        pieces.append(_choose_language(block, lang))
        pos = block_end
    pieces.append(text[pos:])
    return "".join(pieces)


class StringFormatter:
    """Formats user supplied text for safe display in a given context."""

    def __init__(self, strings: StringManager, lang: str = DEFAULT_LANG):
        self.strings = strings
        self.lang = lang

    def language_for(self, context=None) -> str:
        """A context with a forced language overrides the formatter's."""
        if context is not None and getattr(context, "lang", None):
            return context.lang
        return self.lang

    def format_string(self, text: str, context=None) -> str:
        """Filter, strip tags from and escape a short piece of text.

        Existing entities such as ``&amp;`` are left as they are.
        """
        text = filter_multilang(str(text), self.language_for(context))
        text = _TAG.sub("", text).strip()
        text = _BARE_AMP.sub("&amp;", text)
        return text.replace("<", "&lt;").replace(">", "&gt;")

    def get_string(self, identifier: str, a: Any = None, context=None) -> str:
        return self.strings.get_string(identifier, a, lang=self.language_for(context))
