"""Grove - a minimal content-addressed version control system."""

__version__ = '0.1.0'

from grove.core.repository import Repository
from grove.core.objects import GroveObject, Blob, Commit, StagingEntry

__all__ = [
    'Repository',
    'GroveObject',
    'Blob',
    'Commit',
    'StagingEntry',
]
