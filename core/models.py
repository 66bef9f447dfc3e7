"""
Core data models for counterpart resolution.

This module defines the transient data structures computed for each
resolution: the classified active file, the search target derived from it,
and the two-valued search result handed back to the host.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TypeAlias


class FileRole(Enum):
    VIEW = "view"
    VIEW_MODEL = "view_model"
    UNKNOWN = "unknown"


class NotFoundReason(Enum):
    """
    Why a resolution produced no counterpart.

    Every failure mode of the resolver converges on NotFound; the reason only
    lets the host pick a suitable message for the user.

    Attributes:
        NO_ACTIVE_DOCUMENT: The host has no active document.
        NO_MATCHING_PROJECT: The active file is not under any known project.
        UNRECOGNIZED_NAMING_CONVENTION: The active file is neither a View nor a
            ViewModel, so no search was attempted.
        COUNTERPART_NOT_PRESENT: The whole project subtree was searched without
            a match.
    """

    NO_ACTIVE_DOCUMENT = "no_active_document"
    NO_MATCHING_PROJECT = "no_matching_project"
    UNRECOGNIZED_NAMING_CONVENTION = "unrecognized_naming_convention"
    COUNTERPART_NOT_PRESENT = "counterpart_not_present"


@dataclass(frozen=True)
class ActiveFile:
    """
    The file the user is currently editing, classified by naming convention.

    Attributes:
        full_path: Path of the active document as reported by the host.
        base_name: File name with the role's extension stripped
            (e.g., "CustomerView" for "CustomerView.xaml.cs").
        role: Whether the file is a View, a ViewModel, or neither.
    """

    full_path: Path
    base_name: str
    role: FileRole


@dataclass(frozen=True)
class SearchTarget:
    """
    Name and extension the counterpart file is expected to have.

    Attributes:
        expected_base_name: Preferred base name of the counterpart (without extension).
        expected_extension: Extension the counterpart must carry (e.g., ".cs").
        alternate_base_names: Lower-priority base names. A file matching one of
            these is only returned when no file matches expected_base_name.
    """

    expected_base_name: str
    expected_extension: str
    alternate_base_names: tuple[str, ...] = field(default=())

    @property
    def file_name(self) -> str:
        """The counterpart's expected file name, e.g. "CustomerViewModel.cs"."""
        return f"{self.expected_base_name}{self.expected_extension}"


@dataclass(frozen=True)
class Found:
    path: Path

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    reason: NotFoundReason

    def __bool__(self) -> bool:
        return False


SearchResult: TypeAlias = Found | NotFound
