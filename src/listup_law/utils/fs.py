from pathlib import Path
from typing import Iterator, Tuple, Union

from ..errors import CorpusIOError


def iter_law_files(work_dir: Union[str, Path]) -> Iterator[Tuple[str, str, Path]]:
    """
    Walk the e-Gov bulk download layout: work_dir/<LawId dir>/<version file>.

    Yields (dir_name, file_name, path) for regular files directly inside each
    law directory, sorted by name so repeated runs see the same order.
    Nested directories (e.g. pict/) are not descended into.
    """
    root = Path(work_dir)
    try:
        law_dirs = sorted(p for p in root.iterdir() if p.is_dir())
    except OSError as e:
        raise CorpusIOError(f"Cannot list work directory {root}: {e}") from e

    for law_dir in law_dirs:
        try:
            files = sorted(p for p in law_dir.iterdir() if p.is_file())
        except OSError as e:
            raise CorpusIOError(f"Cannot list law directory {law_dir}: {e}") from e
        for path in files:
            yield law_dir.name, path.name, path
