"""Reading and writing the seeded-booking artifact file."""

import json
import os
import tempfile
from pathlib import Path

from booker_seed.schemas.booking import SeededIds, SeedResult


def write_seed_result(result: SeedResult, path: str | Path) -> Path:
    """Write ``result`` to ``path``, replacing any previous artifact.

    The JSON goes to a temporary sibling first so readers never see a
    half-written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(result.to_artifact(), fh, indent=2)
            fh.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    return path


def read_seed_result(path: str | Path) -> SeededIds:
    with open(path, encoding="utf-8") as fh:
        return SeededIds(**json.load(fh))
