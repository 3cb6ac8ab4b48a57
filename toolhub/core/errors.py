"""
Tool Invocation Errors
"""


class ToolhubError(Exception):
    """Base class for errors raised inside the invocation pipeline."""


class SchemaGenerationError(ToolhubError):
    """Parameter schema could not be derived. Always recovered locally."""


class ArgumentEnvelopeError(ToolhubError):
    """The arguments text is not a JSON object."""


class ArgumentCoercionError(ToolhubError):
    """
    A raw argument could not be converted to the declared parameter type.
    """

    def __init__(self, parameter: str, message: str):
        super().__init__(message)
        self.parameter = parameter


class ToolInvocationError(ToolhubError):
    """The underlying callable raised while executing."""


class ResultSerializationError(ToolhubError):
    """The callable's result could not be rendered as text."""
