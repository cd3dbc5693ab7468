"""Core exception hierarchy.

The query functions never raise on malformed documents: a missing or
misshapen section simply yields less data. The types defined here are
used only at the parsing boundary, where a YAML stream is composed into
nodes, to report syntax problems either as a fatal error (strict mode)
or as a warning (lenient mode).
"""

from os import linesep
from typing import TYPE_CHECKING, TypedDict

from yaml.error import MarkedYAMLError

if TYPE_CHECKING:
    from typing import Self

if TYPE_CHECKING:
    from yaml import YAMLError

FORMAT_FILENAME = '<unicode string>'
FORMAT_INDENT = 4


class ErrorContext(TypedDict, total=False):
    """Container describing source location of an error.

    All fields are optional; the formatter adapts output based on
    provided values.
    """

    #: Name of the source file where the error occurred.
    filename: str | None

    #: Zero-based line number in the source file.
    line_num: int | None
    #: Zero-based column number in the source file.
    column_num: int | None

    #: Source excerpt pointing at the failure.
    snippet: str | None


class ErrorFormatter:
    """Utility class for formatting parse errors.

    Produces human-readable messages with an optional source location
    line and a source snippet.
    """

    @classmethod
    def format(cls, message: str, context: ErrorContext | None = None) -> str:
        """Format an error message using contextual information.

        Args:
            message: Base human-readable error message.
            context: Optional error context with location data.

        Returns:
            A fully formatted error message suitable for display.
        """
        if not context:
            return message

        message += linesep
        message += cls.get_location_string(context, indent=FORMAT_INDENT)

        if snippet := context.get('snippet'):
            message += cls._make_indent(snippet, ' ' * FORMAT_INDENT * 2)

        return message

    @classmethod
    def get_location_string(cls, context: ErrorContext, *,
                            indent: str | int | None = None) -> str:
        """Format source location information.

        Args:
            context: Error context containing location metadata.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted location string including filename, line
            and column when available.
        """
        indent = cls._ensure_indent(indent)

        filename = context.get('filename')
        if not filename:
            filename = FORMAT_FILENAME

        message = f'{indent}in "{filename}"'
        if (line_num := context.get('line_num')) is not None:
            message += f', line {line_num + 1}'
            if (column_num := context.get('column_num')) is not None:
                message += f', column {column_num + 1}'
        message += linesep

        return message

    @staticmethod
    def _make_indent(value: str, indent: str) -> str:
        """Apply indentation to a multi-line string.

        Empty or whitespace-only lines are omitted.
        """
        return linesep.join(
            f'{indent}{line}'
            for line in value.splitlines()
            if line.strip()
        )

    @staticmethod
    def _ensure_indent(indent: str | int | None = None) -> str:
        """Normalize indentation given as a string or a number of spaces."""
        if isinstance(indent, int) and indent > 0:
            return ' ' * indent

        if isinstance(indent, str):
            return indent

        return ''


class ParseWarning(UserWarning):
    """Warning emitted for non-fatal YAML parsing problems.

    Used in lenient mode when a stream cannot be composed completely.
    Documents composed before the problem are still returned.
    """


class TektonYamlError(Exception, ErrorFormatter):
    """Base exception for all tekton-yaml errors."""

    def __init__(self, message: str, *,
                 context: ErrorContext | None = None) -> None:
        """Initialize an error.

        Args:
            message: Human-readable error description.
            context: Optional error location context.
        """
        self.message = message
        self.context = context

        super().__init__(message)

    def __str__(self) -> str:
        """String representation."""
        return self.format(self.message, self.context)


class YamlParseError(TektonYamlError):
    """Error raised when a YAML stream cannot be composed into nodes."""

    @classmethod
    def from_yaml_error(cls, error: 'YAMLError') -> 'Self':
        """Create a parse error from a PyYAML failure.

        Scanner, parser and composer failures carry a problem mark
        which is kept as the error location. Reader failures (for
        example, non-printable characters) carry only a description.

        Args:
            error: Exception raised while reading or composing YAML.

        Returns:
            YamlParseError carrying the problem location and snippet
            when available.
        """
        message = 'Invalid YAML'

        if not isinstance(error, MarkedYAMLError):
            return cls(f'{message}{linesep}{" " * FORMAT_INDENT}{error}')

        if error.problem:
            message += f'{linesep}{" " * FORMAT_INDENT}{error.problem}'

        mark = error.problem_mark
        if mark is None:
            return cls(message)

        error_context = ErrorContext(
            filename=mark.name,
            line_num=mark.line,
            column_num=mark.column,
            snippet=mark.get_snippet(indent=0),
        )

        return cls(message, context=error_context)
