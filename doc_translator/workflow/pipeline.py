import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from doc_translator.workflow.models import WorkflowContext


class WorkflowStep(ABC):
    name: str = ""

    @abstractmethod
    def run(self, context: WorkflowContext) -> WorkflowContext:
        raise NotImplementedError


def write_temp_file(context: WorkflowContext, tmp_dir: Path, data: bytes, suffix: str) -> Path:
    """Write data to a new temp file and register it on the context for cleanup."""
    tmp_dir.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(dir=tmp_dir, suffix=suffix)
    path = Path(name)
    context.temp_paths.append(path)
    with os.fdopen(fd, "wb") as fh:
        fh.write(data)
    return path
