import re
from typing import Callable, List, Optional, Tuple

from .column_types import ColumnCategory


class ValueClassifier:
    # ASCII digits only; "٣" and friends are text
    FLOAT_PATTERN = re.compile(r'\d+\.\d+', re.ASCII)
    INT_PATTERN = re.compile(r'\d+', re.ASCII)
    # No month/day-count cross check: 2024-02-31 is a DATE
    DATE_PATTERN = re.compile(
        r'(?:18|19|20)\d\d-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12]\d|3[01])',
        re.ASCII
    )

    # Evaluated top to bottom; the first match decides a column's starting category
    CLASSIFICATION_RULES: List[Tuple[Callable[[str], bool], ColumnCategory]] = [
        (lambda value: ValueClassifier.FLOAT_PATTERN.fullmatch(value) is not None, ColumnCategory.FLOAT),
        (lambda value: ValueClassifier.INT_PATTERN.fullmatch(value) is not None, ColumnCategory.INTEGER),
        (lambda value: ValueClassifier.DATE_PATTERN.fullmatch(value) is not None, ColumnCategory.DATE),
    ]

    @classmethod
    def is_null(cls, value: Optional[str]) -> bool:
        return value is None or value == ""

    @classmethod
    def classify(cls, value: str) -> ColumnCategory:
        for predicate, category in cls.CLASSIFICATION_RULES:
            if predicate(value):
                return category
        return ColumnCategory.TEXT_VARIABLE

    @classmethod
    def matches(cls, category: ColumnCategory, value: str) -> bool:
        if category == ColumnCategory.TEXT_VARIABLE:
            return True

        if category == ColumnCategory.UNSET:
            return False

        for predicate, rule_category in cls.CLASSIFICATION_RULES:
            if rule_category == category:
                return predicate(value)
        return False
