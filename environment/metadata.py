"""Host agent metadata discovery used to enrich metric dimensions"""
from pathlib import Path
from typing import Iterable, Iterator, List, MutableSequence, Optional, Tuple

from logging_config import get_logger

# Reading this file through the host agent yields the path of the actual metadata file
INDIRECTION_FILE_NAME = "dt_metadata_e617c525669e072eebe3d0f08212e8f2.properties"


class FileReader:
    """Thin wrapper around file system reads so they can be replaced in tests"""

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    def read_lines(self, path: str) -> List[str]:
        return self.read_text(path).splitlines()


class MetadataEnricher:
    """Adds metadata provided by a locally installed host agent to dimension lists.

    If no agent is installed, or its files cannot be read for any other
    reason, no dimensions are added.
    """

    def __init__(self, file_reader: Optional[FileReader] = None, logger=None):
        self.file_reader = file_reader or FileReader()
        self.logger = logger if logger is not None else get_logger(__name__)

    def enrich(self, target: MutableSequence[Tuple[str, str]]) -> None:
        """Append metadata dimensions to ``target``. Never raises."""
        for dimension in self.process_metadata(self._read_metadata_file()):
            target.append(dimension)

    def process_metadata(self, lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
        """Parse ``key=value`` lines, skipping everything else"""
        for line in lines:
            self.logger.debug("Parsing metadata line", line=line)
            parts = line.split("=")
            if len(parts) != 2 or not parts[0] or not parts[1]:
                self.logger.warning("Failed to parse line from metadata file", line=line)
                continue
            yield parts[0], parts[1]

    def _read_metadata_file(self) -> List[str]:
        try:
            metadata_file_path = self.file_reader.read_text(INDIRECTION_FILE_NAME).strip()
            if not metadata_file_path:
                return []
            return list(self.file_reader.read_lines(metadata_file_path))
        except Exception as e:
            self.logger.warning(
                "Could not read host agent metadata. This is normal if no agent is installed.",
                error=str(e),
                error_type=type(e).__name__,
            )
            return []
