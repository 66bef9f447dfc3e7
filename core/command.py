"""
The "open counterpart" command.

Ties the resolver to an editor host: ask the host what is open, resolve, and
open the result. Presenting NotFound is left to the caller.
"""

from pathlib import Path

from adapters.editor import EditorHost
from core.models import Found, NotFound, NotFoundReason, SearchResult
from core.naming import classify_active_file, derive_search_target
from core.resolver import CounterpartResolver


def open_counterpart(host: EditorHost, resolver: CounterpartResolver) -> SearchResult:
    """
    Open the counterpart of the host's active document.

    Files outside the naming convention are rejected before the host is asked
    for its projects, since listing projects may itself walk the disk.

    Args:
        host: Editor host supplying the active document and projects, and
            opening the result.
        resolver: Resolver used to find the counterpart.

    Returns:
        SearchResult: Found if a counterpart was found (and opened), otherwise
        NotFound with the reason.

    Raises:
        EditorLaunchError: If the host fails to open the found file.
    """
    active_path = host.get_active_document_full_path()
    if not active_path:
        return NotFound(NotFoundReason.NO_ACTIVE_DOCUMENT)

    active = classify_active_file(Path(active_path), resolver.convention)
    if derive_search_target(active, resolver.convention) is None:
        return NotFound(NotFoundReason.UNRECOGNIZED_NAMING_CONVENTION)

    result = resolver.resolve(active_path, host.get_project_paths())
    if isinstance(result, Found):
        host.open_file(result.path)
    return result
