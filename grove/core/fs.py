"""Filesystem access for Grove.

Every read and write the core performs goes through :class:`FileSystem` so
that ``OSError`` surfaces uniformly as :class:`~grove.core.errors.StorageError`.
The one exception is an exclusive-create collision, which is re-raised as
``FileExistsError`` so callers can treat "already there" as a normal outcome.
"""

import logging
from pathlib import Path
from typing import Union

from .errors import StorageError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileSystem:
    """Thin wrapper over :mod:`pathlib` file operations."""
    
    def mkdir_all(self, path: PathLike) -> None:
        """
        Create a directory and any missing parents.
        
        Succeeds silently if the directory already exists.
        
        Args:
            path: Directory to create
        """
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create directory {path}: {e.strerror or e}", str(path)) from e
    
    def exists(self, path: PathLike) -> bool:
        """Check whether a path exists."""
        return Path(path).exists()
    
    def read_bytes(self, path: PathLike) -> bytes:
        """
        Read a file's content.
        
        Args:
            path: File to read
            
        Returns:
            bytes: File content
            
        Raises:
            StorageError: If the file cannot be read
        """
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e.strerror or e}", str(path)) from e
    
    def read_text(self, path: PathLike) -> str:
        """Read a UTF-8 text file."""
        return self.read_bytes(path).decode('utf-8')
    
    def write_bytes(self, path: PathLike, data: bytes, exclusive: bool = False) -> None:
        """
        Write data to a file.
        
        Args:
            path: File to write
            data: Content to write
            exclusive: Fail with FileExistsError instead of overwriting
            
        Raises:
            FileExistsError: If exclusive is set and the file already exists
            StorageError: If the write fails for any other reason
        """
        mode = 'xb' if exclusive else 'wb'
        try:
            with open(path, mode) as f:
                f.write(data)
        except FileExistsError:
            raise
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e.strerror or e}", str(path)) from e
    
    def write_text(self, path: PathLike, text: str, exclusive: bool = False) -> None:
        """Write a UTF-8 text file."""
        self.write_bytes(path, text.encode('utf-8'), exclusive=exclusive)
    
    def list_dir(self, path: PathLike) -> list:
        """
        List file names in a directory.
        
        Returns an empty list when the directory does not exist.
        """
        directory = Path(path)
        if not directory.is_dir():
            return []
        try:
            return sorted(p.name for p in directory.iterdir() if p.is_file())
        except OSError as e:
            raise StorageError(f"Cannot list {path}: {e.strerror or e}", str(path)) from e
    
    def size(self, path: PathLike) -> int:
        """Return a file's size in bytes."""
        try:
            return Path(path).stat().st_size
        except OSError as e:
            raise StorageError(f"Cannot stat {path}: {e.strerror or e}", str(path)) from e
