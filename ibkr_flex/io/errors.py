# ibkr_flex/io/errors.py
"""Exceptions raised while decoding FLEX XML."""

from typing import Optional


class FlexParseError(ValueError):
    """Base class: the statement is unusable and no partial result exists."""


class XmlStructureError(FlexParseError):
    """XML is not well-formed, empty, or lacks a required element."""


class UnknownRootError(XmlStructureError):
    """Root element is neither an activity nor a trade-confirmation shape."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Cannot detect statement type from root element <{tag}>")


class MissingFieldError(XmlStructureError):
    """A mandatory attribute or element is absent."""

    def __init__(self, field: str, context: str):
        self.field = field
        self.context = context
        super().__init__(f"Missing required field '{field}' in <{context}>")


class InvalidValueError(FlexParseError):
    """A present attribute failed its primitive decoder."""

    def __init__(self, field: Optional[str], value: str, reason: str, context: Optional[str] = None):
        self.field = field
        self.value = value
        self.reason = reason
        self.context = context
        where = f"{context}@{field}" if context and field else (field or "value")
        super().__init__(f"Invalid {where}={value!r}: {reason}")
