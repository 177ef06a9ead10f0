"""TextService — one operation per string utility.

Domain functions stay pure and return plain values. This layer turns
them into ServiceResult, applies config defaults, maps domain exceptions
to error codes, and flags silent fallbacks as warnings.

Error codes:
- INVALID_INPUT: contract violation (negative duration, bad width, bad range)
- ENCODING_ERROR: text not encodable as UTF-8 in strict digest mode
- INVALID_JSON: text is not a JSON object, or a mapping is not serialisable
- FONT_ERROR: font file missing or unreadable
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from strext.domain.color import hex_color_components, hex_color_rgb255, is_valid_hex_color
from strext.domain.digest import DigestEncodingError, is_md5_digest
from strext.domain.digest import md5 as md5_digest
from strext.domain.han import contains_chinese_characters, is_include_chinese
from strext.domain.jsonconv import convert_json_hash_to_string, convert_json_string_to_hash
from strext.domain.layout import line_height, load_font
from strext.domain.layout import text_height as measure_height
from strext.domain.pinyin import (
    get_pinyin_head,
    transform_to_pinyin,
    transform_to_pinyin_without_blank,
)
from strext.domain.ranges import to_range, to_utf16_range, utf16_length
from strext.domain.timefmt import format_hms as render_hms
from strext.services.base import BaseService
from strext.services.result import ErrorCode, ServiceResult
from strext.services.telemetry import traced

logger = logging.getLogger(__name__)


class TextService(BaseService):
    """String utilities exposed as service operations."""

    # ------------------------------------------------------------------
    # Color / digest
    # ------------------------------------------------------------------

    @traced
    def hex_color(self, text: str) -> ServiceResult:
        """Parse a ``#RRGGBB`` color into fractional and 0-255 channels."""
        color = hex_color_components(text)
        warnings: list[str] = []
        if not is_valid_hex_color(text):
            warnings.append(f"Unparseable color {text!r}; using (0, 0, 0)")
        return ServiceResult(
            ok=True,
            op="hex_color",
            data={
                "input": text,
                "red": color.red,
                "green": color.green,
                "blue": color.blue,
                "rgb255": list(hex_color_rgb255(text)),
            },
            warnings=warnings,
        )

    @traced
    def md5(self, text: str, *, strict: bool | None = None) -> ServiceResult:
        """MD5 of *text*; *strict* defaults to ``[digest] strict``."""
        if strict is None:
            strict = self._settings.digest.strict
        try:
            digest = md5_digest(text, strict=strict)
        except DigestEncodingError as exc:
            return self._fail("md5", ErrorCode.ENCODING_ERROR, str(exc))

        warnings: list[str] = []
        if not is_md5_digest(digest):
            warnings.append("Text is not UTF-8 encodable; returned input instead of a digest")
        return ServiceResult(
            ok=True,
            op="md5",
            data={"input": text, "digest": digest},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Chinese text
    # ------------------------------------------------------------------

    @traced
    def detect_chinese(self, text: str) -> ServiceResult:
        """Run both Chinese-character checks on *text*."""
        in_range = is_include_chinese(text)
        han_script = contains_chinese_characters(text)
        warnings: list[str] = []
        if in_range != han_script:
            warnings.append("Range check and Han script check disagree")
        return ServiceResult(
            ok=True,
            op="detect_chinese",
            data={"input": text, "in_range": in_range, "han_script": han_script},
            warnings=warnings,
        )

    @traced
    def pinyin(self, text: str, *, blank: bool = True) -> ServiceResult:
        """Transliterate *text* to pinyin, with or without syllable spaces."""
        converted = transform_to_pinyin(text) if blank else transform_to_pinyin_without_blank(text)
        head = get_pinyin_head(text, fallback=self._settings.pinyin.head_fallback)
        return ServiceResult(
            ok=True,
            op="pinyin",
            data={"input": text, "pinyin": converted, "head": head},
        )

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    @traced
    def json_parse(self, text: str) -> ServiceResult:
        """Parse *text* as a JSON object."""
        parsed = convert_json_string_to_hash(text)
        if parsed is None:
            return self._fail("json_parse", ErrorCode.INVALID_JSON, "Text is not a JSON object")
        return ServiceResult(ok=True, op="json_parse", data={"object": parsed})

    @traced
    def json_dump(self, mapping: Mapping[str, Any]) -> ServiceResult:
        """Serialise *mapping* with the ``[jsonconv]`` formatting options."""
        cfg = self._settings.jsonconv
        text = convert_json_hash_to_string(
            mapping, indent=cfg.indent, ensure_ascii=cfg.ensure_ascii
        )
        if text is None:
            return self._fail(
                "json_dump", ErrorCode.INVALID_JSON, "Mapping is not JSON serialisable"
            )
        return ServiceResult(ok=True, op="json_dump", data={"json": text})

    # ------------------------------------------------------------------
    # Ranges / time
    # ------------------------------------------------------------------

    @traced
    def range_to_slice(self, text: str, location: int, length: int) -> ServiceResult:
        """Convert a UTF-16 range of *text* to a code-point slice."""
        span = to_range(text, (location, length))
        if span is None:
            return self._fail(
                "range_to_slice",
                ErrorCode.INVALID_INPUT,
                "Range is out of bounds or not on character boundaries",
                location=location,
                length=length,
                utf16_length=utf16_length(text),
            )
        return ServiceResult(
            ok=True,
            op="range_to_slice",
            data={"start": span.start, "stop": span.stop, "text": text[span]},
        )

    @traced
    def range_to_utf16(self, text: str, start: int, stop: int) -> ServiceResult:
        """Convert a code-point slice of *text* to a UTF-16 range."""
        utf16 = to_utf16_range(text, slice(start, stop))
        warnings: list[str] = []
        if not 0 <= start <= stop <= len(text):
            warnings.append(f"Slice [{start}:{stop}] is out of bounds; using empty range")
        return ServiceResult(
            ok=True,
            op="range_to_utf16",
            data={"location": utf16.location, "length": utf16.length},
            warnings=warnings,
        )

    @traced
    def format_hms(self, milliseconds: int) -> ServiceResult:
        """Render *milliseconds* as ``HH:MM:SS``."""
        try:
            hms = render_hms(milliseconds)
        except ValueError as exc:
            return self._fail("format_hms", ErrorCode.INVALID_INPUT, str(exc))
        return ServiceResult(
            ok=True,
            op="format_hms",
            data={"milliseconds": milliseconds, "hms": hms},
        )

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    @traced
    def text_height(
        self,
        text: str,
        width: float,
        *,
        font_path: str | None = None,
        font_size: float | None = None,
    ) -> ServiceResult:
        """Height needed to lay out *text* within *width* pixels.

        Font defaults come from the ``[layout]`` section.
        """
        cfg = self._settings.layout
        path = font_path if font_path is not None else cfg.font_path
        size = font_size if font_size is not None else cfg.font_size
        try:
            font = load_font(path, size)
        except OSError as exc:
            logger.debug("Font load failed for %s", path, exc_info=True)
            return self._fail(
                "text_height", ErrorCode.FONT_ERROR, f"Cannot load font: {exc}", path=path
            )
        except ValueError as exc:
            return self._fail("text_height", ErrorCode.INVALID_INPUT, str(exc), size=size)

        try:
            height = measure_height(text, width, font)
        except ValueError as exc:
            return self._fail("text_height", ErrorCode.INVALID_INPUT, str(exc))

        per_line = line_height(font)
        return ServiceResult(
            ok=True,
            op="text_height",
            data={
                "height": height,
                "lines": round(height / per_line) if per_line else 0,
                "line_height": per_line,
                "width": width,
            },
        )
