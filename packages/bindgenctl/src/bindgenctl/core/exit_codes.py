from __future__ import annotations

OK = 0
ERR_USAGE = 2
ERR_CONFIG = 3
ERR_CONTEXT = 4
ERR_VALIDATION = 5
ERR_INTERNAL = 99
# shell conventions for a command that cannot be executed or found
ERR_NOT_EXECUTABLE = 126
ERR_PREREQ = 127
ERR_INTERRUPTED = 130
SIGNAL_BASE = 128
