"""Custom exceptions for the parsing context."""

from pathlib import Path
from typing import Optional


class ResumeParsingError(Exception):
    """Base class for errors raised around the parsing context."""


class ParserConfigError(ResumeParsingError):
    """
    Exception raised when a parser settings override cannot be applied.

    Attributes:
        message: Error description
        config_path: Path to the offending YAML file
        original_error: The underlying OmegaConf/IO error
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.original_error = original_error

        parts = [message]

        if config_path:
            parts.append(f"\nConfig file: {config_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class UnsupportedFileFormatError(ResumeParsingError, ValueError):
    """
    Exception raised when a résumé file has an extension we cannot read.

    Attributes:
        file_path: The file that was rejected
        supported: Extensions that are readable
    """

    def __init__(self, file_path: Path, supported: tuple = (".txt", ".pdf")):
        self.file_path = Path(file_path)
        self.supported = supported
        super().__init__(
            f"Unsupported file format '{self.file_path.suffix or self.file_path.name}'. "
            f"Supported formats: {', '.join(supported)}"
        )
