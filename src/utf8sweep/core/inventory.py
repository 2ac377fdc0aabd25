"""Extension inventory for the "show unrecognized formats" diagnostic.

Walks the same traversal as the conversion engine and reports which
extensions are present, optionally hiding those already excluded.
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from utf8sweep.core.policy import get_extension
from utf8sweep.fs.traversal import iter_files
from utf8sweep.models.settings import Settings


def list_extensions(
    root: Union[str, Path],
    settings: Settings,
    *,
    include_excluded: bool = False,
    on_error: Optional[Callable[[str], None]] = None,
) -> List[str]:
    """List the distinct extensions of files under *root*.

    Extensions are compared case-insensitively; the casing seen last wins and
    the list is ordered by last sighting. Extensionless files contribute
    ``""``.

    Args:
        root: Directory to inspect.
        settings: Supplies the exclusion list.
        include_excluded: If False, drop extensions on the exclusion list.
        on_error: Forwarded to the traversal for unreadable directories.

    Returns:
        Deduplicated extensions.
    """
    found: Dict[str, str] = {}
    for file_path in iter_files(root, on_error=on_error):
        ext = get_extension(file_path)
        key = ext.lower()
        # Re-insert so ordering follows the most recent sighting
        found.pop(key, None)
        found[key] = ext

    if not include_excluded:
        for key in list(found):
            if key and settings.is_excluded(key):
                del found[key]

    return list(found.values())
