import asyncio
import logging
import re
from typing import Dict, List, Tuple

import pykakasi

from kanaedge.api.schemas import MODES
from kanaedge.core.errors import ConversionError

logger = logging.getLogger(__name__)

# pykakasi token field carrying the reading for each output script
READING_FIELDS: Dict[str, str] = {
    "hiragana": "hira",
    "katakana": "kana",
    "romaji": "hepburn",
}


kanji_regex = re.compile(r"[\u3400-\u4DBF\u4E00-\u9FFF\uF900-\uFAFF々〆ヶ]")
japanese_regex = re.compile(r"[\u3040-\u30FF\u3400-\u4DBF\u4E00-\u9FFF\uF900-\uFAFF々〆ヶ]")


def _split_okurigana(orig: str, hira: str, reading: str) -> Tuple[str, str, str]:
    """
    Peel trailing kana shared by the written form and its reading.

    >>> _split_okurigana("食べる", "たべる", "たべる")
    ('食', 'た', 'べる')
    """
    n = 0
    while (
        n < len(orig) - 1
        and n < len(hira) - 1
        and not kanji_regex.match(orig[-1 - n])
        and orig[-1 - n] == hira[-1 - n]
    ):
        n += 1
    if n == 0 or len(reading) != len(hira):
        return orig, reading, ""
    return orig[:-n], reading[:-n], orig[-n:]


def _annotate(base: str, reading: str, mode: str) -> str:
    if mode == "furigana":
        return f"<ruby>{base}<rp>(</rp><rt>{reading}</rt><rp>)</rp></ruby>"
    return f"{base}({reading})"


class KakasiAdapter:
    """
    Transliteration engine backed by pykakasi.

    pykakasi does the analysis and dictionary work; this class only picks the
    reading for the requested script and lays tokens out for a rendering mode.
    """

    def __init__(self):
        self._kakasi = None

    async def init(self) -> None:
        # Dictionary load is blocking file I/O
        self._kakasi = await asyncio.to_thread(pykakasi.kakasi)
        logger.info("kakasi_ready")

    async def convert(self, text: str, to: str, mode: str) -> str:
        if to not in READING_FIELDS:
            raise ConversionError("Invalid Target Syntax.")
        if mode not in MODES:
            raise ConversionError("Invalid Conversion Mode.")
        if self._kakasi is None:
            raise ConversionError("Engine is not initialized.")
        try:
            tokens = self._kakasi.convert(text)
        except Exception as e:
            raise ConversionError(str(e)) from e
        return self.render(tokens, to, mode)

    def render(self, tokens: List[dict], to: str, mode: str) -> str:
        field = READING_FIELDS[to]
        if mode == "normal":
            return "".join(t[field] for t in tokens)
        if mode == "spaced":
            return " ".join(t[field] for t in tokens if t[field].strip())

        out = []
        for t in tokens:
            orig, reading = t["orig"], t[field]
            if to == "romaji":
                if japanese_regex.search(orig):
                    out.append(_annotate(orig, reading, mode))
                else:
                    out.append(orig)
            elif kanji_regex.search(orig):
                stem, stem_reading, okuri = _split_okurigana(orig, t["hira"], reading)
                out.append(_annotate(stem, stem_reading, mode) + okuri)
            else:
                out.append(orig)
        return "".join(out)
