"""
Evaluation parser.

Turns the text of one decision-table cell into an evaluation field of the
given attribute:

1. The text is trimmed; empty text is a FieldParseError.
2. Missing-value strings (case-insensitive) become the attribute's missing
   evaluation, or a fully missing pair for composite attributes.
3. Pair attributes parse "(first,second)", each member through steps 2 and 4.
4. Other texts go to the plain factory of the attribute's value kind, or to
   the volatile or persistent tier of the parser's FieldCache.
"""

from __future__ import annotations

from typing import Iterable, Optional

import structlog

from ..config import get_settings
from ..core.errors import FieldParseError
from ..core.precondition import not_null
from ..fields.caching import FieldCache
from ..fields.enums import CachingType
from ..fields.factories import get_factory, pair_field_factory
from ..fields.field import EvaluationField, SimpleField
from ..fields.pair import PairField
from .attribute import EvaluationAttribute

logger = structlog.get_logger()


class EvaluationParser:
    """
    Parses textual evaluations for attributes.

    Args:
        missing_value_strings: Texts read as a missing evaluation
            (default from settings)
        caching_type: Cache tier for known fields (default from settings)
        cache: Cache context to use; created on demand when caching is enabled
    """

    def __init__(
        self,
        missing_value_strings: Optional[Iterable[str]] = None,
        caching_type: Optional[CachingType] = None,
        cache: Optional[FieldCache] = None,
    ):
        settings = get_settings()
        if missing_value_strings is None:
            missing_value_strings = settings.missing_value_markers()
        self.missing_value_strings = tuple(missing_value_strings)
        self._missing = {marker.strip().lower() for marker in self.missing_value_strings}
        self.caching_type = caching_type or settings.default_caching_type
        if cache is None and self.caching_type is not CachingType.NONE:
            cache = FieldCache()
        self.cache = cache

    def is_missing_value_string(self, text: str) -> bool:
        return text.strip().lower() in self._missing

    def parse_evaluation(self, text: Optional[str], attribute: EvaluationAttribute) -> EvaluationField:
        """
        Parse text as an evaluation of attribute.

        Raises:
            NullArgumentError: If attribute is None
            FieldParseError: If text is empty or not a valid literal
            InvalidTypeError: If the attribute cannot hold the parsed kind
        """
        not_null(attribute, "Attribute is null.")
        trimmed = text.strip() if text is not None else ""
        if not trimmed:
            raise FieldParseError(
                f"Empty value of attribute {attribute.name}.",
                text=text,
                attribute_name=attribute.name,
            )

        if self.is_missing_value_string(trimmed):
            missing = attribute.missing_value()
            logger.debug(
                "missing_value_substituted",
                attribute=attribute.name,
                text=trimmed,
                missing_value_type=attribute.missing_value_type.value,
            )
            if attribute.composite:
                return PairField(first=missing, second=missing)
            return missing

        if attribute.composite:
            return pair_field_factory.create_from_text(
                trimmed,
                attribute,
                member_parser=lambda member: self.parse_simple(member, attribute),
            )
        return self.parse_known(trimmed, attribute)

    def parse_simple(self, text: str, attribute: EvaluationAttribute) -> SimpleField:
        """Parse one simple evaluation, known or missing."""
        if self.is_missing_value_string(text):
            return attribute.missing_value()
        return self.parse_known(text.strip(), attribute)

    def parse_known(self, text: str, attribute: EvaluationAttribute) -> SimpleField:
        if self.caching_type is CachingType.NONE or self.cache is None:
            return get_factory(attribute.value_kind).create_from_text(text, attribute)
        caching_factory = self.cache.for_kind(attribute.value_kind)
        if self.caching_type is CachingType.PERSISTENT:
            return caching_factory.create_with_persistent_cache(text, attribute)
        return caching_factory.create_with_volatile_cache(text, attribute)
