"""Failure taxonomy of the player state pipeline.

Every error is terminal for the request that raised it: the input is static,
so retrying can not change the outcome, and nothing here is fatal to the
process. Messages never carry the values of undeclared fields.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for every rejection produced by the state pipeline."""


class DecodeError(PipelineError):
    """The transport encoding (base64) of the player state is malformed."""


class BindError(PipelineError):
    """The decoded document does not bind to the declared schema."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return self.detail


class MalformedPayload(BindError):
    """The decoded bytes are not a syntactically valid JSON document."""


class SchemaMismatch(BindError):
    """A declared field is missing, repeated or has the wrong shape."""


class UnexpectedFields(BindError):
    """The document carries fields outside the declared schema (strict mode only)."""

    def __init__(self, fields: list[str], expected: list[str]) -> None:
        self.fields = list(fields)
        self.expected = list(expected)
        super().__init__(self._describe())

    def _describe(self) -> str:
        expected = " or ".join(f"`{name}`" for name in self.expected)
        noun = "field" if len(self.fields) == 1 else "fields"
        unknown = ", ".join(f"`{name}`" for name in self.fields)
        return f"unknown {noun} {unknown}, expected {expected}"


class StateValidationError(PipelineError):
    """A bound player state holds a value its schema can not rule out."""


class OutOfRangeError(StateValidationError):

    def __init__(self, field: str, value: int, bound: int, name: str = "") -> None:
        self.field = field
        self.value = value
        self.bound = bound
        self.name = name or field
        super().__init__(f"{field}={value} exceeds the maximum of {bound}")
