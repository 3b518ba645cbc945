"""
SelectorBuilder: immutable step-by-step builder for CSS selector strings.

    element#id.class[attr]:pseudo-class::pseudo-element

Each part-adding call returns a new builder, so a partially built selector can be
shared and extended in several directions without interference.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
PART_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

COMBINATORS = (" ", ">", "+", "~")

# render/validation rank of each part kind
ELEMENT, ID, CLASS, ATTRIBUTE, PSEUDO_CLASS, PSEUDO_ELEMENT = range(6)


class SelectorBuilderError(Exception):
    pass


class DuplicatePartError(SelectorBuilderError):
    def __init__(self, message: str = DUPLICATE_PART_MESSAGE):
        super().__init__(message)


class PartOrderError(SelectorBuilderError):
    def __init__(self, message: str = PART_ORDER_MESSAGE):
        super().__init__(message)


class CombinedSelectorError(SelectorBuilderError):
    pass


class InvalidCombinatorError(SelectorBuilderError, ValueError):
    pass


@dataclass(frozen=True)
class SelectorBuilder:
    element_name: Optional[str] = None
    id_name: Optional[str] = None
    classes: Tuple[str, ...] = ()
    attributes: Tuple[str, ...] = ()
    pseudo_classes: Tuple[str, ...] = ()
    pseudo_element_name: Optional[str] = None
    combined_expression: Optional[str] = None
    strict_order: bool = False
    last_rank: int = -1

    def _add(self, rank: int, **changes) -> "SelectorBuilder":
        if self.combined_expression is not None:
            raise CombinedSelectorError(
                f"Cannot add parts to combined selector '{self.combined_expression}'"
            )
        if self.strict_order and rank < self.last_rank:
            raise PartOrderError()
        return replace(self, last_rank=max(rank, self.last_rank), **changes)

    def element(self, value: str) -> "SelectorBuilder":
        if self.element_name is not None:
            raise DuplicatePartError()
        return self._add(ELEMENT, element_name=value)

    def id(self, value: str) -> "SelectorBuilder":
        if self.id_name is not None:
            raise DuplicatePartError()
        return self._add(ID, id_name=value)

    def class_(self, value: str) -> "SelectorBuilder":
        return self._add(CLASS, classes=self.classes + (value,))

    def attr(self, value: str) -> "SelectorBuilder":
        return self._add(ATTRIBUTE, attributes=self.attributes + (value,))

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        return self._add(PSEUDO_CLASS, pseudo_classes=self.pseudo_classes + (value,))

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        if self.pseudo_element_name is not None:
            raise DuplicatePartError()
        return self._add(PSEUDO_ELEMENT, pseudo_element_name=value)

    @classmethod
    def combine(
        cls,
        left: Union["SelectorBuilder", str],
        combinator: str,
        right: Union["SelectorBuilder", str],
    ) -> "SelectorBuilder":
        """
        Join two selectors with a combinator.

        The operands are rendered immediately; the result only carries the
        combined string. The descendant combinator is a single space, so it
        ends up as three spaces between the operands.
        """
        if combinator not in COMBINATORS:
            raise InvalidCombinatorError(
                f"Unknown combinator {combinator!r}, expected one of {COMBINATORS!r}"
            )
        expression = f"{_render(left)} {combinator} {_render(right)}"
        logger.debug("Combined selector: %s", expression)
        return cls(combined_expression=expression)

    def stringify(self) -> str:
        if self.combined_expression is not None:
            return self.combined_expression

        parts = []
        if self.element_name is not None:
            parts.append(self.element_name)
        if self.id_name is not None:
            parts.append(f"#{self.id_name}")
        parts.extend(f".{c}" for c in self.classes)
        parts.extend(f"[{a}]" for a in self.attributes)
        parts.extend(f":{p}" for p in self.pseudo_classes)
        if self.pseudo_element_name is not None:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()


def _render(selector: Union[SelectorBuilder, str]) -> str:
    if isinstance(selector, SelectorBuilder):
        return selector.stringify()
    return selector
