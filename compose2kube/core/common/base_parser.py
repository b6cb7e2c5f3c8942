"""Base implementation for source file parsers."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..exceptions import ParseError
from ..protocols import SourceParser

if TYPE_CHECKING:
    from compose2kube.models.v1 import ServiceRecord

logger = logging.getLogger(__name__)


class BaseSourceFileParser(SourceParser, ABC):
    """
    Abstract base class for source file parsers.

    Provides common functionality for file validation, error handling, and basic
    parsing operations while keeping format-specific parsing logic abstract.

    Subclasses must implement:
    - get_supported_extensions(): Define which file extensions are supported
    - _parse_content(): Parse the actual file content into service records

    Subclasses can optionally override:
    - validate_file(): Custom file validation logic
    - _read_file(): Custom file reading logic
    - _handle_parse_error(): Custom error handling
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize the parser.

        Args:
            encoding: Default file encoding to use when reading files
        """
        self.encoding = encoding
        self._logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def get_supported_extensions(self) -> list[str]:
        """
        Returns a list of file extensions this parser supports.

        Returns:
            List of file extensions (e.g., ['.yml', '.yaml'])
        """
        pass

    @abstractmethod
    def _parse_content(
        self, content: str, file_path: Path
    ) -> dict[str, "ServiceRecord"]:
        """
        Parse the file content into service records.

        Args:
            content: The raw file content as a string
            file_path: Path to the file being parsed (for context/error reporting)

        Returns:
            Mapping from service name to ServiceRecord

        Raises:
            Any parsing-related exceptions should be raised here
        """
        pass

    def parse(self, file_path: Path) -> dict[str, "ServiceRecord"]:
        """
        Parses a single file into service records.

        This method orchestrates the parsing process by:
        1. Validating the file
        2. Reading the file content
        3. Parsing the content using format-specific logic
        4. Handling any errors that occur

        Args:
            file_path: Path to the file to parse

        Returns:
            Mapping from service name to ServiceRecord

        Raises:
            ParseError: If the file is missing, unsupported or invalid
        """
        self._logger.info(f"Parsing file: {file_path}")

        self.validate_file(file_path)

        try:
            content = self._read_file(file_path)
            result = self._parse_content(content, file_path)

            self._logger.debug(
                f"Successfully parsed {file_path} ({len(result)} services)"
            )
            return result

        except Exception as e:
            return self._handle_parse_error(e, file_path)

    def validate_file(self, file_path: Path) -> None:
        """
        Validate that the file exists and has a supported extension.

        Args:
            file_path: Path to the file to validate

        Raises:
            ParseError: If the file doesn't exist, is not a file or has an
                unsupported extension
        """
        if not file_path.exists():
            raise ParseError(f"File not found: {file_path}", source_path=file_path)

        if not file_path.is_file():
            raise ParseError(f"Path is not a file: {file_path}", source_path=file_path)

        supported_extensions = self.get_supported_extensions()
        if supported_extensions and file_path.suffix not in supported_extensions:
            raise ParseError(
                f"Unsupported file extension '{file_path.suffix}'. "
                f"Supported extensions: {supported_extensions}",
                source_path=file_path,
            )

    def _read_file(self, file_path: Path) -> str:
        """
        Reads the file content as text.

        Raises:
            UnicodeDecodeError: If decoding fails.
            OSError: If reading the file fails.
        """
        try:
            return file_path.read_text(encoding=self.encoding)
        except UnicodeDecodeError:
            self._logger.error(
                f"Failed to decode file {file_path} with encoding {self.encoding}"
            )
            raise
        except OSError as e:
            self._logger.error(f"Failed to read file {file_path}: {e}")
            raise

    def _handle_parse_error(
        self, error: Exception, file_path: Path
    ) -> dict[str, "ServiceRecord"]:
        """
        Handle parsing errors.

        ParseErrors propagate unchanged; anything else is wrapped in a
        ParseError naming the file.

        Raises:
            ParseError: Always
        """
        self._logger.error(f"Failed to parse {file_path}: {error}")
        if isinstance(error, ParseError):
            raise error
        raise ParseError(
            f"Cannot parse {file_path.name}: {error}", source_path=file_path
        ) from error

    def can_parse(self, file_path: Path) -> bool:
        """Return True for an existing regular file with a supported suffix."""
        try:
            is_file = file_path.is_file()
        except OSError:
            return False
        extensions = self.get_supported_extensions()
        return is_file and (not extensions or file_path.suffix in extensions)

    def get_parser_info(self) -> dict[str, Any]:
        """Describe the parser for debug logging."""
        return {
            "class_name": self.__class__.__name__,
            "supported_extensions": self.get_supported_extensions(),
            "encoding": self.encoding,
        }
