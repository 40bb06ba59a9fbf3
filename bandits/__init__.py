"""Let ``import bandits`` work from a source checkout by loading src/bandits in place."""
from __future__ import annotations

from pathlib import Path

_SOURCE_ROOT = Path(__file__).resolve().parents[1] / "src" / "bandits"
_SOURCE_INIT = _SOURCE_ROOT / "__init__.py"

# Submodules (bandits.core, bandits.services, ...) resolve against the real package.
__path__ = [str(_SOURCE_ROOT)]
__file__ = str(_SOURCE_INIT)

exec(compile(_SOURCE_INIT.read_text(encoding="utf-8"), __file__, "exec"), globals())
