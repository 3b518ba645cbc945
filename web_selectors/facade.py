"""
Facade over SelectorBuilder.

Every entry point starts from a fresh builder, so two chains started from the
facade never see each other's parts:

    css_selector_builder.id("main").class_("container").stringify()
    # => '#main.container'
"""

from typing import Union

from .builder import SelectorBuilder


class CssSelectorBuilder:
    def __init__(self, strict_order: bool = False):
        self.strict_order = strict_order

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(strict_order=self.strict_order)

    def element(self, value: str) -> SelectorBuilder:
        return self._new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_element(value)

    def combine(
        self,
        left: Union[SelectorBuilder, str],
        combinator: str,
        right: Union[SelectorBuilder, str],
    ) -> SelectorBuilder:
        return SelectorBuilder.combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
