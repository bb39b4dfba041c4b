import os
import tempfile

# Log files go to a scratch directory, not the repo.
os.environ.setdefault("AHMA_LOG_DIR", tempfile.mkdtemp(prefix="ahma-logs-"))

from ahma_studio.utils.logging_utils import setup_logging  # noqa: E402

# Bind the package logger's console handler to the session-wide stderr
# before any test swaps it out with capsys.
setup_logging("ahma_studio")
