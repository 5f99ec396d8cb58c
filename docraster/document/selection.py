# docraster/document/selection.py
# ============================================================
# Document Selection
# ============================================================
# The file picker is supplied by the host (a dialog, a console
# prompt, a test double). It returns a path or None when the
# user backs out.
# ============================================================

from pathlib import Path
from typing import Callable, Optional, Union

from docraster.errors import NoSelectionError

Picker = Callable[[], Optional[Union[str, Path]]]


def select_document(picker: Picker) -> Path:
    """
    Ask the picker for a document.

    Raises:
        NoSelectionError: If the picker returned nothing.
    """
    choice = picker()
    if choice is None or not str(choice).strip():
        raise NoSelectionError("No document selected")
    return Path(str(choice).strip())
