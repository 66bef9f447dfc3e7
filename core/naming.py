"""
View/ViewModel naming convention.

Classifies the active file as a View, a ViewModel or neither, and derives the
name and extension its counterpart must have:

    CustomerView.xaml      -> CustomerViewModel.cs
    Customer.xaml.cs       -> CustomerViewModel.cs
    CustomerViewModel.cs   -> CustomerView.xaml (or Customer.xaml)

All transforms work on the end of the base name only; a name such as
"ModelEditorView" keeps its leading "Model".
"""

import os
from pathlib import Path

from core.models import ActiveFile, FileRole, SearchTarget
from models import NamingConvention


def _strip_suffix(name: str, suffix: str) -> str | None:
    """
    Remove `suffix` from the end of `name`, comparing with host case folding.

    Returns:
        The remaining base name, or None if `name` does not end with `suffix`
        or nothing would remain.
    """
    if not suffix or len(name) <= len(suffix):
        return None
    if not os.path.normcase(name).endswith(os.path.normcase(suffix)):
        return None
    return name[: -len(suffix)]


def classify_active_file(path: Path, convention: NamingConvention) -> ActiveFile:
    """
    Determine the role of the active file from its name.

    Code-behind files (e.g., "Customer.xaml.cs") are checked before plain code
    files so that they count as views. A code file is only a ViewModel when its
    base name ends with "ViewModel".

    Args:
        path: Path of the active file.
        convention: Naming convention supplying extensions and tokens.

    Returns:
        ActiveFile: The classified file. For UNKNOWN files base_name is the stem.
    """
    name = path.name

    for view_suffix in (
        convention["code_behind_extension"],
        convention["view_extension"],
    ):
        base = _strip_suffix(name, view_suffix)
        if base is not None:
            return ActiveFile(path, base, FileRole.VIEW)

    view_model_token = convention["view_token"] + convention["model_token"]
    base = _strip_suffix(name, convention["code_extension"])
    if base is not None and base.endswith(view_model_token):
        return ActiveFile(path, base, FileRole.VIEW_MODEL)

    return ActiveFile(path, path.stem, FileRole.UNKNOWN)


def derive_search_target(
    active: ActiveFile, convention: NamingConvention
) -> SearchTarget | None:
    """
    Derive the counterpart's expected base name and extension.

    - View whose name ends with "View": append "Model" ("CustomerView" -> "CustomerViewModel").
    - Any other View: append "ViewModel" ("Customer" -> "CustomerViewModel").
    - ViewModel: drop the trailing "Model" ("CustomerViewModel" -> "CustomerView"),
      with the name minus "ViewModel" ("Customer") as an alternate.

    Args:
        active: The classified active file.
        convention: Naming convention supplying extensions and tokens.

    Returns:
        SearchTarget | None: The target, or None for files of UNKNOWN role,
        for which no search should be attempted.
    """
    view_token = convention["view_token"]
    model_token = convention["model_token"]
    base = active.base_name

    if active.role is FileRole.VIEW:
        if base.endswith(view_token):
            expected = base + model_token
        else:
            expected = base + view_token + model_token
        return SearchTarget(expected, convention["code_extension"])

    if active.role is FileRole.VIEW_MODEL:
        expected = base[: -len(model_token)]
        bare = base[: -len(view_token + model_token)]
        alternates = (bare,) if bare else ()
        return SearchTarget(expected, convention["view_extension"], alternates)

    return None
