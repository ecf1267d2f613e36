"""Recursive file discovery.

``walk(root)`` yields the path of every regular file under *root*, joined onto
*root* exactly as given (``walk(".")`` yields ``"./a.txt"``). Entries are
visited in name order. Symlinked directories are followed unless they lead
back to a directory currently being walked, or to a directory some other
symlink already led to. Entries that cannot be listed or stat'ed are skipped
without complaint.
"""

import os
from typing import Iterator


def walk(root: str) -> Iterator[str]:
    if os.path.isfile(root):
        yield root
        return
    yield from _walk_dir(root, frozenset(), set(), via_link=False)


def _walk_dir(directory: str, ancestors: frozenset, linked: set,
              via_link: bool) -> Iterator[str]:
    try:
        st = os.stat(directory)
    except OSError:
        return
    key = (st.st_dev, st.st_ino)
    if key in ancestors:
        return
    if via_link:
        # each directory is entered through symlinks at most once per walk
        if key in linked:
            return
        linked.add(key)
    ancestors = ancestors | {key}

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        return

    for entry in entries:
        path = os.path.join(directory, entry.name)
        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
            is_link = entry.is_symlink()
        except OSError:
            continue
        if is_dir:
            yield from _walk_dir(path, ancestors, linked, via_link=is_link)
        elif is_file:
            yield path
